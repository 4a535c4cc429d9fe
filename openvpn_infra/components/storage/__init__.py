"""
Storage components for the VPN gateway.

Components:
- RdsMysqlComponent: RDS MySQL database with AWS-managed credentials
"""

from openvpn_infra.components.storage.rds_mysql import RdsMysqlComponent, RdsOutputs

__all__ = [
    "RdsMysqlComponent",
    "RdsOutputs",
]
