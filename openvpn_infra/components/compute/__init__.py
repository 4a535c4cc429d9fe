"""
Compute components for the VPN gateway.

Components:
- OpenVpnInstanceComponent: Ubuntu EC2 instance hosting OpenVPN
"""

from openvpn_infra.components.compute.openvpn_instance import OpenVpnInstanceComponent, Ec2Outputs

__all__ = [
    "OpenVpnInstanceComponent",
    "Ec2Outputs",
]
