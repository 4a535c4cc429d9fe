"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        instance_type: EC2 instance type for the VPN gateway
        db_instance_class: RDS instance class for MySQL
        db_engine_version: Pinned MySQL engine version
        db_allocated_storage: Initial RDS storage in GB
        db_max_allocated_storage: Storage autoscaling ceiling in GB
        db_multi_az: Enable multi-AZ deployment for RDS
        db_backup_retention_days: Days to keep automated backups
        enable_deletion_protection: Enable deletion protection for the database
        key_pair_name: Name of the EC2 key pair for SSH access
        write_env_file: Write resolved outputs to a local .env file
    """
    environment: str
    instance_type: str
    db_instance_class: str
    db_engine_version: str
    db_allocated_storage: int
    db_max_allocated_storage: int
    db_multi_az: bool
    db_backup_retention_days: int
    enable_deletion_protection: bool
    key_pair_name: str
    write_env_file: bool = False

    def __post_init__(self) -> None:
        if self.db_max_allocated_storage < self.db_allocated_storage:
            raise ValueError(
                f"db_max_allocated_storage ({self.db_max_allocated_storage}) "
                f"must be >= db_allocated_storage ({self.db_allocated_storage})"
            )
        if self.db_backup_retention_days < 0:
            raise ValueError("db_backup_retention_days must not be negative")
