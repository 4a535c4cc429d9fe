"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from openvpn_infra.configs.base import EnvironmentConfig
from openvpn_infra.configs.constants import DB_DEFAULTS, INSTANCE_TYPES, KEY_PAIR_NAME


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        ValueError: If storage or backup settings are inconsistent
    """
    config = pulumi.Config()
    environment = config.require("environment")

    multi_az = config.get_bool("db_multi_az")
    deletion_protection = config.get_bool("enable_deletion_protection")

    return EnvironmentConfig(
        environment=environment,
        instance_type=config.get("instance_type") or INSTANCE_TYPES.get(environment, "t3a.nano"),
        db_instance_class=config.get("db_instance_class") or str(DB_DEFAULTS["instance_class"]),
        db_engine_version=config.get("db_engine_version") or str(DB_DEFAULTS["engine_version"]),
        db_allocated_storage=int(config.get("db_allocated_storage") or DB_DEFAULTS["allocated_storage"]),
        db_max_allocated_storage=int(
            config.get("db_max_allocated_storage") or DB_DEFAULTS["max_allocated_storage"]
        ),
        db_multi_az=bool(DB_DEFAULTS["multi_az"]) if multi_az is None else multi_az,
        db_backup_retention_days=int(
            config.get("db_backup_retention_days") or DB_DEFAULTS["backup_retention_days"]
        ),
        enable_deletion_protection=deletion_protection or False,
        key_pair_name=config.get("key_pair_name") or KEY_PAIR_NAME,
        write_env_file=config.get_bool("write_env_file") or False,
    )
