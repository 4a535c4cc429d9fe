"""
Networking components for the VPN gateway.

Components:
- DefaultVpcComponent: Lookup of the account's default VPC and its subnets
- SecurityGroupsComponent: Security groups for the gateway and the database
"""

from openvpn_infra.components.networking.default_vpc import DefaultVpcComponent, VpcOutputs
from openvpn_infra.components.networking.security_groups import SecurityGroupsComponent, SecurityGroupOutputs

__all__ = [
    "DefaultVpcComponent",
    "VpcOutputs",
    "SecurityGroupsComponent",
    "SecurityGroupOutputs",
]
