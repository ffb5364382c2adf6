"""Packaging correctness verification for flow-tree.

Tests validate that:
- The base install imports cleanly and exposes the documented API
- py.typed marker is present in the wheel
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import subprocess
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the base install works with the default catalog."""

    def test_import_flowtree(self) -> None:
        import flowtree

        assert hasattr(flowtree, "FlowVisualEntity")
        assert hasattr(flowtree, "FlowResource")
        assert hasattr(flowtree, "CatalogSchemaService")

    def test_entity_basic(self) -> None:
        from flowtree import FlowVisualEntity

        entity = FlowVisualEntity({"name": "t1", "actions": [{"print": {}}]})
        assert entity.to_viz_node().get_children()[0].data.path == "actions.0.print"

    def test_subpackages_import(self) -> None:
        from flowtree.catalog import CatalogSchemaService
        from flowtree.path import parse_path
        from flowtree.suggestions import SuggestionRegistry
        from flowtree.visualization import VizTreeBuilder

        assert CatalogSchemaService().kinds == frozenset()
        assert len(parse_path("actions.0.print")) == 3
        assert SuggestionRegistry().providers == ()
        assert VizTreeBuilder().build({"actions": []}).data.is_group


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        result = subprocess.run(
            ["poetry", "build", "-f", "wheel"],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path) -> None:
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            assert any(n.endswith("py.typed") for n in names), (
                f"py.typed not found in wheel. Contents: {names}"
            )

    def test_no_pycache_in_wheel(self, wheel_path: Path) -> None:
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path) -> None:
        expected_modules = [
            "flowtree/__init__.py",
            "flowtree/config.py",
            "flowtree/entity.py",
            "flowtree/protocols.py",
            "flowtree/resource.py",
            "flowtree/suggestions.py",
            "flowtree/catalog/__init__.py",
            "flowtree/catalog/index.py",
            "flowtree/catalog/service.py",
            "flowtree/model/__init__.py",
            "flowtree/model/actions.py",
            "flowtree/model/document.py",
            "flowtree/model/naming.py",
            "flowtree/path/__init__.py",
            "flowtree/path/resolver.py",
            "flowtree/path/segments.py",
            "flowtree/visualization/__init__.py",
            "flowtree/visualization/builder.py",
            "flowtree/visualization/nodes.py",
            "flowtree/integrations/__init__.py",
            "flowtree/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), f"Module {module} not found in wheel"

    def test_metadata_in_wheel(self, wheel_path: Path) -> None:
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if "METADATA" in n]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "flow-tree" in metadata.lower() or "flow_tree" in metadata.lower()
            assert "0.1.0" in metadata


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self) -> None:
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")
        flow_eps = [ep for ep in pytest11_eps if "flowtree" in str(ep.value)]
        assert flow_eps, (
            f"No pytest11 entry point found for flow-tree. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self) -> None:
        import importlib

        mod = importlib.import_module("flowtree.integrations._pytest_plugin")
        assert hasattr(mod, "assert_viz_isomorphic")


class TestPackageMetadata:
    """Verify pyproject.toml metadata completeness."""

    def test_version(self) -> None:
        import flowtree

        assert flowtree.__version__ == "0.1.0"

    def test_all_exports(self) -> None:
        import flowtree

        expected = {
            "ROOT_PATH",
            "ActionCatalog",
            "CatalogIndex",
            "CatalogSchemaService",
            "EntityType",
            "FlowConfig",
            "FlowResource",
            "FlowVisualEntity",
            "NodeLabelType",
            "SourceSchemaType",
            "VizNode",
            "extract_action_name",
            "is_flow_document",
            "remove_at",
            "resolve",
            "tree_signature",
            "update",
        }
        actual = set(flowtree.__all__)
        assert expected == actual, f"Missing: {expected - actual}, Extra: {actual - expected}"
