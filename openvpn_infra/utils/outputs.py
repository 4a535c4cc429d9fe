"""
Write stack outputs to a dotenv file for local tooling.

Values are only known after deployment, so the file is written from inside
an apply once every output has resolved.
"""

from pathlib import Path

import pulumi


def format_env_lines(values: dict[str, object]) -> list[str]:
    """
    Render resolved outputs as KEY=value lines.

    Args:
        values: Output name to resolved value

    Returns:
        Sorted lines with upper-cased keys
    """
    return [f"{key.upper()}={'' if value is None else value}" for key, value in sorted(values.items())]


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input[object]],
    filename: str,
) -> pulumi.Output[str]:
    """
    Write outputs to a dotenv file once they resolve.

    Args:
        outputs: Mapping of export name to output value
        filename: Destination path, relative to the working directory

    Returns:
        Output resolving to the written file path
    """
    def _write(values: dict[str, object]) -> str:
        path = Path(filename)
        path.write_text("\n".join(format_env_lines(values)) + "\n")
        pulumi.log.info(f"Wrote {len(values)} outputs to {path}")
        return str(path)

    return pulumi.Output.all(**outputs).apply(_write)
