"""
RDS MySQL Component for the VPN gateway's database.

Access Control - Who Can Connect:
1. OpenVPN gateway (openvpn_sg) -> Port 3306
2. Anyone else -> DENIED (publicly_accessible=False, no other ingress rules)

Credentials:
manage_master_user_password=True makes AWS generate the master password and
keep it in a Secrets Manager secret it owns. The stack exports that secret's
name so operators can fetch the password, never the password itself.

Teardown:
The database is disposable. Destroying the stack deletes it without a final
snapshot and removes its automated backups. Deletion protection stays off
unless the stack config enables it.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from openvpn_infra.configs.base import EnvironmentConfig
from openvpn_infra.configs.constants import DB_DEFAULTS, PORTS
from openvpn_infra.utils.tags import create_tags


@dataclass
class RdsOutputs:
    """Output values from RDS component."""
    endpoint: pulumi.Output[str]
    port: pulumi.Output[int]
    database_name: pulumi.Output[str]
    secret_arn: pulumi.Output[str]
    secret_name: pulumi.Output[str]


class RdsMysqlComponent(pulumi.ComponentResource):
    """RDS MySQL instance for the OpenVPN gateway."""

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        subnet_ids: pulumi.Input[list[str]],
        security_group_id: pulumi.Input[str],
        identifier: str | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:RdsMysql", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        self.database_name = str(DB_DEFAULTS["database_name"])

        # DB Subnet Group
        self.subnet_group = aws.rds.SubnetGroup(
            f"{name}-subnet-group",
            subnet_ids=subnet_ids,
            tags=create_tags(environment, f"{name}-subnet-group", component="storage"),
            opts=child_opts,
        )

        self.instance = aws.rds.Instance(
            f"{name}-mysql",
            identifier=identifier or f"{name}-mysql",
            engine=str(DB_DEFAULTS["engine"]),
            engine_version=config.db_engine_version,
            instance_class=config.db_instance_class,
            allocated_storage=config.db_allocated_storage,
            max_allocated_storage=config.db_max_allocated_storage,
            storage_type="gp3",
            storage_encrypted=True,
            db_name=self.database_name,
            username=str(DB_DEFAULTS["username"]),
            manage_master_user_password=True,  # AWS manages password in Secrets Manager
            port=PORTS["mysql"],
            db_subnet_group_name=self.subnet_group.name,
            vpc_security_group_ids=[security_group_id],
            publicly_accessible=False,
            multi_az=config.db_multi_az,
            allow_major_version_upgrade=False,
            auto_minor_version_upgrade=True,
            backup_retention_period=config.db_backup_retention_days,
            delete_automated_backups=True,
            deletion_protection=config.enable_deletion_protection,
            skip_final_snapshot=True,
            tags=create_tags(environment, f"{name}-mysql", component="storage"),
            opts=child_opts,
        )

        self.secret_arn = self.instance.master_user_secrets.apply(
            lambda secrets: secrets[0].secret_arn
        )
        self.secret_name = aws.secretsmanager.get_secret_output(arn=self.secret_arn).name

        self.register_outputs({
            "endpoint": self.instance.address,
            "port": self.instance.port,
            "database_name": self.database_name,
            "secret_name": self.secret_name,
        })

    def get_outputs(self) -> RdsOutputs:
        """Get RDS output values."""
        return RdsOutputs(
            endpoint=self.instance.address,
            port=self.instance.port,
            database_name=pulumi.Output.from_input(self.database_name),
            secret_arn=self.secret_arn,
            secret_name=self.secret_name,
        )
