"""
Stack composition for the OpenVPN gateway.

Instantiates all component resources in dependency order:
1. Default VPC lookup
2. Security groups
3. IAM role, SSH key pair
4. OpenVPN EC2 instance
5. RDS MySQL

Pulumi works out the real creation order from the references between them.
"""

from dataclasses import dataclass

import pulumi

from openvpn_infra.configs.base import EnvironmentConfig
from openvpn_infra.utils.naming import ResourceNamer

# Networking
from openvpn_infra.components.networking.default_vpc import DefaultVpcComponent
from openvpn_infra.components.networking.security_groups import SecurityGroupsComponent

# Security
from openvpn_infra.components.security.iam_roles import IamRolesComponent
from openvpn_infra.components.security.key_pair import KeyPairComponent

# Compute
from openvpn_infra.components.compute.openvpn_instance import OpenVpnInstanceComponent

# Storage
from openvpn_infra.components.storage.rds_mysql import RdsMysqlComponent

PROJECT_NAME = "openvpn-gateway"

# Everything exported from the stack. No key or password material is exported.
STACK_OUTPUT_KEYS = ("db_endpoint", "secret_name")


@dataclass
class GatewayStack:
    """Components declared by build_stack and the values to export."""
    vpc: DefaultVpcComponent
    security_groups: SecurityGroupsComponent
    iam_roles: IamRolesComponent
    key_pair: KeyPairComponent
    openvpn: OpenVpnInstanceComponent
    database: RdsMysqlComponent
    outputs: dict[str, pulumi.Output]

    def exports(self) -> dict[str, pulumi.Output]:
        """Values to publish with pulumi.export, restricted to STACK_OUTPUT_KEYS."""
        return {key: self.outputs[key] for key in STACK_OUTPUT_KEYS}


def build_stack(
    config: EnvironmentConfig,
    namer: ResourceNamer | None = None,
) -> GatewayStack:
    """
    Declare the gateway, its firewall, its IAM role and the database.

    Args:
        config: Environment configuration
        namer: Resource namer; defaults to the project namer for config.environment

    Returns:
        GatewayStack with every component and the stack outputs
    """
    namer = namer or ResourceNamer(project=PROJECT_NAME, environment=config.environment)
    base_name = namer.name("")

    # --- Layer 1: Networking ---
    vpc = DefaultVpcComponent(name=base_name, instance_type=config.instance_type)
    vpc_outputs = vpc.get_outputs()

    security_groups = SecurityGroupsComponent(
        name=base_name,
        environment=config.environment,
        vpc_id=vpc_outputs.vpc_id,
    )
    sg_outputs = security_groups.get_outputs()

    # --- Layer 2: Identity ---
    iam_roles = IamRolesComponent(
        name=base_name,
        environment=config.environment,
    )
    iam_outputs = iam_roles.get_outputs()

    key_pair = KeyPairComponent(
        name=base_name,
        environment=config.environment,
        key_pair_name=config.key_pair_name,
    )
    key_outputs = key_pair.get_outputs()

    # --- Layer 3: Compute ---
    openvpn = OpenVpnInstanceComponent(
        name=namer.name("gateway"),
        environment=config.environment,
        config=config,
        subnet_id=vpc_outputs.instance_subnet_ids.apply(lambda ids: ids[0]),
        security_group_id=sg_outputs.openvpn_sg_id,
        key_name=key_outputs.key_pair_name,
        instance_profile_name=iam_outputs.instance_profile_name,
    )

    # --- Layer 4: Database ---
    database = RdsMysqlComponent(
        name=base_name,
        environment=config.environment,
        config=config,
        subnet_ids=vpc_outputs.subnet_ids,
        security_group_id=sg_outputs.database_sg_id,
        identifier=namer.db_identifier("db"),
    )
    rds_outputs = database.get_outputs()

    pulumi.log.info(
        f"Declared OpenVPN gateway stack for '{config.environment}' "
        f"({config.instance_type}, MySQL {config.db_engine_version} on {config.db_instance_class})"
    )

    return GatewayStack(
        vpc=vpc,
        security_groups=security_groups,
        iam_roles=iam_roles,
        key_pair=key_pair,
        openvpn=openvpn,
        database=database,
        outputs={
            "db_endpoint": rds_outputs.endpoint,
            "secret_name": rds_outputs.secret_name,
        },
    )
