"""
IAM role component for the VPN gateway instance.

Creates:
- EC2 role assumable by the EC2 service
- AmazonSSMManagedInstanceCore attachment (Session Manager access)
- Instance profile wrapping the role
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from openvpn_infra.configs.constants import SSM_MANAGED_POLICY_ARN
from openvpn_infra.utils.tags import create_tags

EC2_ASSUME_ROLE_POLICY = {
    "Version": "2012-10-17",
    "Statement": [{
        "Effect": "Allow",
        "Principal": {"Service": "ec2.amazonaws.com"},
        "Action": "sts:AssumeRole",
    }],
}


@dataclass
class IamRoleOutputs:
    """Output values from IAM roles component."""
    openvpn_role_arn: pulumi.Output[str]
    openvpn_role_name: pulumi.Output[str]
    instance_profile_name: pulumi.Output[str]


class IamRolesComponent(pulumi.ComponentResource):
    """
    IAM role for the OpenVPN gateway.

    Only AWS managed policies are attached; the instance has no inline
    permissions of its own.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        managed_policy_arns: list[str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:IamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        self.managed_policy_arns = managed_policy_arns or [SSM_MANAGED_POLICY_ARN]

        self.openvpn_role = aws.iam.Role(
            f"{name}-openvpn-role",
            assume_role_policy=json.dumps(EC2_ASSUME_ROLE_POLICY),
            tags=create_tags(environment, f"{name}-openvpn-role", component="security"),
            opts=child_opts,
        )

        self.policy_attachments = [
            aws.iam.RolePolicyAttachment(
                f"{name}-openvpn-policy-{policy_arn.rsplit('/', 1)[-1]}",
                role=self.openvpn_role.name,
                policy_arn=policy_arn,
                opts=child_opts,
            )
            for policy_arn in self.managed_policy_arns
        ]

        self.instance_profile = aws.iam.InstanceProfile(
            f"{name}-openvpn-profile",
            role=self.openvpn_role.name,
            tags=create_tags(environment, f"{name}-openvpn-profile", component="security"),
            opts=child_opts,
        )

        self.register_outputs({
            "openvpn_role_arn": self.openvpn_role.arn,
            "openvpn_role_name": self.openvpn_role.name,
            "instance_profile_name": self.instance_profile.name,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            openvpn_role_arn=self.openvpn_role.arn,
            openvpn_role_name=self.openvpn_role.name,
            instance_profile_name=self.instance_profile.name,
        )
