"""
EC2 Instance Component for the OpenVPN gateway.

Key Components:
1. AMI: Latest Canonical Ubuntu 22.04 (Jammy) amd64 image, selected by name
   pattern at program start.
2. Placement: First subnet of the default VPC with a public IP, since VPN
   clients connect straight to the instance.
3. Security group: openvpn_sg (VPN and SSH ports from anywhere).
4. Access: EC2 key pair for SSH, instance profile with the SSM core policy
   for Session Manager.
5. IMDSv2 (http_tokens="required") and an encrypted gp3 root volume.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from openvpn_infra.configs.base import EnvironmentConfig
from openvpn_infra.configs.constants import CANONICAL_OWNER_ID, UBUNTU_AMI_NAME_PATTERN
from openvpn_infra.utils.tags import create_tags


@dataclass
class Ec2Outputs:
    """Output values from EC2 component."""
    instance_id: pulumi.Output[str]
    public_ip: pulumi.Output[str]
    private_ip: pulumi.Output[str]


def lookup_ubuntu_ami(name_pattern: str = UBUNTU_AMI_NAME_PATTERN) -> aws.ec2.AwaitableGetAmiResult:
    """Find the most recent Canonical image matching name_pattern."""
    return aws.ec2.get_ami(
        most_recent=True,
        owners=[CANONICAL_OWNER_ID],
        filters=[
            aws.ec2.GetAmiFilterArgs(
                name="name",
                values=[name_pattern],
            ),
            aws.ec2.GetAmiFilterArgs(
                name="virtualization-type",
                values=["hvm"],
            ),
        ],
    )


class OpenVpnInstanceComponent(pulumi.ComponentResource):
    """
    EC2 instance for the OpenVPN gateway.

    The OpenVPN software itself is installed out of band.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        subnet_id: pulumi.Input[str],
        security_group_id: pulumi.Input[str],
        key_name: pulumi.Input[str],
        instance_profile_name: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:OpenVpnInstance", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.ami = lookup_ubuntu_ami()
        pulumi.log.info(f"Using AMI {self.ami.id} ({self.ami.name})", resource=self)

        self.instance = aws.ec2.Instance(
            f"{name}-instance",
            ami=self.ami.id,
            instance_type=config.instance_type,
            subnet_id=subnet_id,
            associate_public_ip_address=True,
            vpc_security_group_ids=[security_group_id],
            key_name=key_name,
            iam_instance_profile=instance_profile_name,
            root_block_device=aws.ec2.InstanceRootBlockDeviceArgs(
                volume_size=8,
                volume_type="gp3",
                encrypted=True,
            ),
            metadata_options=aws.ec2.InstanceMetadataOptionsArgs(
                http_tokens="required",  # IMDSv2
                http_endpoint="enabled",
            ),
            tags=create_tags(environment, f"{name}-openvpn", component="compute"),
            opts=child_opts,
        )

        self.register_outputs({
            "instance_id": self.instance.id,
            "public_ip": self.instance.public_ip,
            "private_ip": self.instance.private_ip,
        })

    def get_outputs(self) -> Ec2Outputs:
        """Get EC2 output values."""
        return Ec2Outputs(
            instance_id=self.instance.id,
            public_ip=self.instance.public_ip,
            private_ip=self.instance.private_ip,
        )
