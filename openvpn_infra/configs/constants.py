"""
Infrastructure constants for the OpenVPN gateway.

Contains firewall rules, image lookup, instance sizes, and database defaults.
"""

from typing import Final, NamedTuple


class IngressRule(NamedTuple):
    """Inbound rule opened on the OpenVPN security group."""
    protocol: str
    port: int
    description: str


# Any IPv4 source
ANY_IPV4: Final[str] = "0.0.0.0/0"

# Inbound rules for the VPN gateway (nothing else is opened)
OPENVPN_INGRESS_RULES: Final[tuple[IngressRule, ...]] = (
    IngressRule("tcp", 22, "SSH"),
    IngressRule("tcp", 445, "HTTPS"),
    IngressRule("tcp", 943, "OpenVPN Web GUI"),
    IngressRule("tcp", 945, "Cluster control channel"),
    IngressRule("udp", 1194, "OpenVPN UDP"),
)

# Ubuntu 22.04 (Jammy) published by Canonical
UBUNTU_AMI_NAME_PATTERN: Final[str] = "ubuntu/images/hvm-ssd/ubuntu-jammy-22.04-amd64-server-*"
CANONICAL_OWNER_ID: Final[str] = "099720109477"

# EC2 Instance types by environment
INSTANCE_TYPES: Final[dict[str, str]] = {
    "dev": "t3a.nano",
    "staging": "t3a.nano",
    "prod": "t3a.nano",
}

# RDS MySQL defaults
DB_DEFAULTS: Final[dict[str, object]] = {
    "engine": "mysql",
    "engine_version": "8.0.31",
    "instance_class": "db.t3.micro",
    "username": "dbuser",
    "database_name": "openvpndb",
    "allocated_storage": 20,
    "max_allocated_storage": 40,
    "multi_az": True,
    "backup_retention_days": 1,
}

# Port configurations
PORTS: Final[dict[str, int]] = {
    "ssh": 22,
    "mysql": 3306,
}

# AWS managed policy for Session Manager access
SSM_MANAGED_POLICY_ARN: Final[str] = "arn:aws:iam::aws:policy/AmazonSSMManagedInstanceCore"

# EC2 key pair registered for SSH access
KEY_PAIR_NAME: Final[str] = "openvpn-keypair"

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "openvpn-gateway",
    "ManagedBy": "pulumi",
}
