"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from openvpn_infra.configs.base import EnvironmentConfig
from openvpn_infra.configs.environment import get_config
from openvpn_infra.configs.constants import (
    DB_DEFAULTS,
    DEFAULT_TAGS,
    INSTANCE_TYPES,
    OPENVPN_INGRESS_RULES,
    PORTS,
)

__all__ = [
    "EnvironmentConfig",
    "get_config",
    "DB_DEFAULTS",
    "DEFAULT_TAGS",
    "INSTANCE_TYPES",
    "OPENVPN_INGRESS_RULES",
    "PORTS",
]
