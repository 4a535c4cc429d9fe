"""
Security components for IAM and SSH key material.

Components:
- IamRolesComponent: IAM role and instance profile for the gateway
- KeyPairComponent: Generated EC2 key pair with the private key in Secrets Manager
"""

from openvpn_infra.components.security.iam_roles import IamRolesComponent, IamRoleOutputs
from openvpn_infra.components.security.key_pair import KeyPairComponent, KeyPairOutputs

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
    "KeyPairComponent",
    "KeyPairOutputs",
]
