"""Pytest fixtures for infrastructure tests."""

from pathlib import Path

import pulumi
import pytest

from pulumi_mocks import PROJECT, InfraMocks

# Must be installed before any test module declares resources
MOCKS = InfraMocks()
pulumi.runtime.set_mocks(MOCKS, project=PROJECT, stack="test", preview=False)


@pytest.fixture
def infra_mocks() -> InfraMocks:
    """Return the active Pulumi mocks."""
    return MOCKS


@pytest.fixture
def iac_project_root():
    """Return the infrastructure package directory."""
    return Path(__file__).parent.parent.parent / "openvpn_infra"


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in the infrastructure package."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]
