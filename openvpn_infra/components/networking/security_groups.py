"""
Security Groups Component for the VPN gateway and its database.

Access Patterns:
1. OpenVPN gateway (openvpn_sg):
   - Inbound from any IPv4 address on exactly the ports in OPENVPN_INGRESS_RULES
     (SSH, 445, admin web GUI 943, cluster control 945, OpenVPN UDP 1194).
   - Outbound: everything.
2. Database (database_sg):
   - Inbound MySQL (3306) ONLY from openvpn_sg, referenced by group id rather
     than by IP.
   - No egress rules. Security groups are stateful, so replies still flow.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from openvpn_infra.configs.constants import ANY_IPV4, OPENVPN_INGRESS_RULES, PORTS
from openvpn_infra.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security groups component."""
    openvpn_sg_id: pulumi.Output[str]
    database_sg_id: pulumi.Output[str]


class SecurityGroupsComponent(pulumi.ComponentResource):
    """
    Security groups for the VPN gateway instance and the MySQL database.

    Rules are declared as standalone VPC rule resources so each one can be
    inspected and replaced on its own.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:SecurityGroups", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        self.openvpn_sg = aws.ec2.SecurityGroup(
            f"{name}-openvpn-sg",
            description="Default security group for OpenVPN",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-openvpn-sg", component="networking"),
            opts=child_opts,
        )

        self.database_sg = aws.ec2.SecurityGroup(
            f"{name}-database-sg",
            description="Security group for RDS MySQL",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-database-sg", component="networking"),
            opts=child_opts,
        )

        self.openvpn_ingress_rules: list[aws.vpc.SecurityGroupIngressRule] = []
        self.database_ingress_rules: list[aws.vpc.SecurityGroupIngressRule] = []

        self._create_openvpn_rules(name, child_opts)
        self._create_database_rules(name, child_opts)

        self.register_outputs({
            "openvpn_sg_id": self.openvpn_sg.id,
            "database_sg_id": self.database_sg.id,
        })

    def _create_openvpn_rules(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Open the gateway ports to the internet and allow all egress."""
        for rule in OPENVPN_INGRESS_RULES:
            self.openvpn_ingress_rules.append(
                aws.vpc.SecurityGroupIngressRule(
                    f"{name}-openvpn-ingress-{rule.protocol}-{rule.port}",
                    security_group_id=self.openvpn_sg.id,
                    ip_protocol=rule.protocol,
                    from_port=rule.port,
                    to_port=rule.port,
                    cidr_ipv4=ANY_IPV4,
                    description=rule.description,
                    opts=opts,
                )
            )

        self.openvpn_egress_rule = aws.vpc.SecurityGroupEgressRule(
            f"{name}-openvpn-egress-all",
            security_group_id=self.openvpn_sg.id,
            ip_protocol="-1",
            cidr_ipv4=ANY_IPV4,
            description="All outbound traffic",
            opts=opts,
        )

    def _create_database_rules(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Allow MySQL into the database only from the gateway."""
        self.database_ingress_rules.append(
            aws.vpc.SecurityGroupIngressRule(
                f"{name}-database-ingress-openvpn",
                security_group_id=self.database_sg.id,
                ip_protocol="tcp",
                from_port=PORTS["mysql"],
                to_port=PORTS["mysql"],
                referenced_security_group_id=self.openvpn_sg.id,
                description="MySQL from OpenVPN gateway",
                opts=opts,
            )
        )

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            openvpn_sg_id=self.openvpn_sg.id,
            database_sg_id=self.database_sg.id,
        )
