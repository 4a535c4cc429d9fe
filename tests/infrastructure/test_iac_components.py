"""
Detailed tests for individual infrastructure components.

Validates:
1. Each component class has required attributes
2. Components are properly organized in packages
3. Output dataclasses have required fields
"""

from dataclasses import fields, is_dataclass
from pathlib import Path


def _field_names(cls) -> set[str]:
    return {f.name for f in fields(cls)}


class TestNetworkingComponents:
    """Tests for networking infrastructure components."""

    def test_default_vpc_component_attributes(self):
        """DefaultVpcComponent exposes its outputs."""
        from openvpn_infra.components.networking.default_vpc import DefaultVpcComponent, VpcOutputs

        assert hasattr(DefaultVpcComponent, "get_outputs")
        assert is_dataclass(VpcOutputs)
        assert _field_names(VpcOutputs) == {"vpc_id", "subnet_ids", "instance_subnet_ids"}

    def test_security_groups_component_attributes(self):
        """SecurityGroupsComponent builds its rules in dedicated helpers."""
        from openvpn_infra.components.networking.security_groups import (
            SecurityGroupsComponent,
            SecurityGroupOutputs,
        )

        assert hasattr(SecurityGroupsComponent, "get_outputs")
        assert hasattr(SecurityGroupsComponent, "_create_openvpn_rules")
        assert hasattr(SecurityGroupsComponent, "_create_database_rules")
        assert _field_names(SecurityGroupOutputs) == {"openvpn_sg_id", "database_sg_id"}


class TestSecurityComponents:
    """Tests for security infrastructure components."""

    def test_iam_role_outputs(self):
        """IamRoleOutputs carries the role and instance profile."""
        from openvpn_infra.components.security.iam_roles import IamRolesComponent, IamRoleOutputs

        assert hasattr(IamRolesComponent, "get_outputs")
        assert {"openvpn_role_arn", "instance_profile_name"}.issubset(_field_names(IamRoleOutputs))

    def test_key_pair_outputs_hold_no_key_material(self):
        """KeyPairOutputs exposes the key name and secret ARN, never the key."""
        from openvpn_infra.components.security.key_pair import KeyPairComponent, KeyPairOutputs

        assert hasattr(KeyPairComponent, "get_outputs")
        assert _field_names(KeyPairOutputs) == {"key_pair_name", "private_key_secret_arn"}


class TestComputeComponents:
    """Tests for compute infrastructure components."""

    def test_instance_outputs(self):
        """Ec2Outputs includes instance id and both addresses."""
        from openvpn_infra.components.compute.openvpn_instance import Ec2Outputs, OpenVpnInstanceComponent

        assert hasattr(OpenVpnInstanceComponent, "get_outputs")
        assert _field_names(Ec2Outputs) == {"instance_id", "public_ip", "private_ip"}


class TestStorageComponents:
    """Tests for storage infrastructure components."""

    def test_rds_outputs(self):
        """RdsOutputs includes the endpoint and the credentials secret."""
        from openvpn_infra.components.storage.rds_mysql import RdsMysqlComponent, RdsOutputs

        assert hasattr(RdsMysqlComponent, "get_outputs")
        assert {"endpoint", "port", "secret_name"}.issubset(_field_names(RdsOutputs))


class TestComponentPackageStructure:
    """Tests for component package organization."""

    def test_all_packages_have_init(self, iac_project_root):
        """Every package directory should have __init__.py."""
        packages = [
            iac_project_root,
            iac_project_root / "configs",
            iac_project_root / "utils",
            iac_project_root / "components",
            iac_project_root / "components" / "networking",
            iac_project_root / "components" / "security",
            iac_project_root / "components" / "compute",
            iac_project_root / "components" / "storage",
        ]

        for pkg_dir in packages:
            assert (pkg_dir / "__init__.py").exists(), f"Missing __init__.py in {pkg_dir.name}"

    def test_pulumi_project_points_at_package(self):
        """Pulumi.yaml runs the package's __main__."""
        project_file = Path(__file__).parent.parent.parent / "Pulumi.yaml"
        content = project_file.read_text()

        assert "name: openvpn-gateway" in content
        assert "main: openvpn_infra/" in content


class TestComponentExports:
    """Tests for component __init__ files."""

    def test_networking_exports_components(self):
        from openvpn_infra.components.networking import DefaultVpcComponent, SecurityGroupsComponent

        assert DefaultVpcComponent is not None
        assert SecurityGroupsComponent is not None

    def test_security_exports_components(self):
        from openvpn_infra.components.security import IamRolesComponent, KeyPairComponent

        assert IamRolesComponent is not None
        assert KeyPairComponent is not None

    def test_compute_exports_components(self):
        from openvpn_infra.components.compute import OpenVpnInstanceComponent

        assert OpenVpnInstanceComponent is not None

    def test_storage_exports_components(self):
        from openvpn_infra.components.storage import RdsMysqlComponent

        assert RdsMysqlComponent is not None

    def test_config_and_utils_exports(self):
        from openvpn_infra.configs import EnvironmentConfig, get_config
        from openvpn_infra.utils import ResourceNamer, create_tags, write_outputs_to_env

        assert callable(get_config)
        assert callable(create_tags)
        assert callable(write_outputs_to_env)
        assert EnvironmentConfig is not None
        assert ResourceNamer is not None
