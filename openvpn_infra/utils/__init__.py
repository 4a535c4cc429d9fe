"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, and output utilities.
"""

from openvpn_infra.utils.naming import ResourceNamer
from openvpn_infra.utils.tags import create_tags, merge_tags
from openvpn_infra.utils.outputs import format_env_lines, write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_tags",
    "merge_tags",
    "format_env_lines",
    "write_outputs_to_env",
]
