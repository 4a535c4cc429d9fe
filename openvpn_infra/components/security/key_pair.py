"""
SSH key pair component for the VPN gateway.

Flow:
1. Generate an RSA key with pulumi-tls. The private key lives only in Pulumi
   state (encrypted as a secret) and in Secrets Manager.
2. Register the OpenSSH public key as an EC2 key pair under a fixed name so
   it can be selected in the console and by the instance.
3. Store the private PEM in Secrets Manager at ec2-ssh-key/<name>/private.
   Operators fetch it from there; it is never exported from the stack.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws
import pulumi_tls as tls

from openvpn_infra.utils.tags import create_tags


@dataclass
class KeyPairOutputs:
    """Output values from the key pair component."""
    key_pair_name: pulumi.Output[str]
    private_key_secret_arn: pulumi.Output[str]


class KeyPairComponent(pulumi.ComponentResource):
    """EC2 key pair backed by a generated RSA key."""

    def __init__(
        self,
        name: str,
        environment: str,
        key_pair_name: str,
        rsa_bits: int = 2048,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:KeyPair", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.private_key = tls.PrivateKey(
            f"{name}-ssh-key",
            algorithm="RSA",
            rsa_bits=rsa_bits,
            opts=child_opts,
        )

        self.key_pair = aws.ec2.KeyPair(
            f"{name}-key-pair",
            key_name=key_pair_name,
            public_key=self.private_key.public_key_openssh,
            tags=create_tags(environment, key_pair_name, component="security"),
            opts=child_opts,
        )

        self.private_key_secret = aws.secretsmanager.Secret(
            f"{name}-ssh-private-key",
            name=f"ec2-ssh-key/{key_pair_name}/private",
            description=f"Private key for EC2 key pair {key_pair_name}",
            recovery_window_in_days=0,
            tags=create_tags(environment, f"{name}-ssh-private-key", component="security"),
            opts=child_opts,
        )

        aws.secretsmanager.SecretVersion(
            f"{name}-ssh-private-key-version",
            secret_id=self.private_key_secret.id,
            secret_string=pulumi.Output.secret(self.private_key.private_key_pem),
            opts=child_opts,
        )

        self.register_outputs({
            "key_pair_name": self.key_pair.key_name,
            "private_key_secret_arn": self.private_key_secret.arn,
        })

    def get_outputs(self) -> KeyPairOutputs:
        """Get key pair output values."""
        return KeyPairOutputs(
            key_pair_name=self.key_pair.key_name,
            private_key_secret_arn=self.private_key_secret.arn,
        )
