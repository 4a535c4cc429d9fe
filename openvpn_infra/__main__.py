"""
Pulumi program entry point for the OpenVPN gateway.

Loads stack configuration, declares the stack and exports its outputs:
- db_endpoint: hostname of the MySQL instance
- secret_name: Secrets Manager secret holding the generated DB credentials
"""

import pulumi

from openvpn_infra.configs.environment import get_config
from openvpn_infra.stack import build_stack
from openvpn_infra.utils.outputs import write_outputs_to_env


def main() -> None:
    """Deploy the OpenVPN gateway infrastructure."""
    config = get_config()
    stack = build_stack(config)
    outputs = stack.exports()

    # Write outputs to .env file for local tooling
    if config.write_env_file:
        write_outputs_to_env(outputs, "infrastructure.env")

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)


# Execute
main()
