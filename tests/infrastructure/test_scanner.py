"""Tests for filesystem module discovery."""
from pathlib import Path

import pytest

from onionarch.config.schemas import ScanConfig
from onionarch.domain.exceptions import ModuleNotFoundInRootError
from onionarch.infrastructure.scanner import FileSystemModuleSource, module_name


class TestFileSystemModuleSource:
    """Test cases for FileSystemModuleSource."""

    def test_discover_modules(self, make_tree):
        """Test module names are derived from paths."""
        root = make_tree({
            "shop/__init__.py": "",
            "shop/domain/__init__.py": "",
            "shop/domain/model.py": "",
            "shop/adapter/rest/views.py": "",
            "shop/README.md": "",
        })
        modules = FileSystemModuleSource().discover(root)

        assert sorted(modules) == ["shop", "shop.adapter.rest.views", "shop.domain", "shop.domain.model"]
        assert modules["shop.domain.model"] == root / "shop" / "domain" / "model.py"

    def test_skips_hidden_and_cache_directories(self, make_tree):
        """Test that hidden and cache directories are ignored."""
        root = make_tree({
            "shop/model.py": "",
            "shop/__pycache__/model.py": "",
            ".venv/lib/site.py": "",
        })
        assert list(FileSystemModuleSource().discover(root)) == ["shop.model"]

    def test_packages_named_like_build_output_are_scanned(self, make_tree):
        """Test that nested build, dist and node_modules packages are not dropped."""
        root = make_tree({
            "shop/adapter/build/runner.py": "",
            "shop/dist/wheel.py": "",
            "shop/node_modules/shim.py": "",
        })
        assert sorted(FileSystemModuleSource().discover(root)) == [
            "shop.adapter.build.runner",
            "shop.dist.wheel",
            "shop.node_modules.shim",
        ]

    def test_default_excludes_skip_top_level_build_output(self, make_tree):
        """Test the default scan excludes only cover build output at the root."""
        root = make_tree({
            "build/lib/shop/model.py": "",
            "dist/shop/model.py": "",
            "shop/build/model.py": "",
        })
        source = FileSystemModuleSource(exclude=ScanConfig().exclude)
        assert list(source.discover(root)) == ["shop.build.model"]

    def test_exclude_patterns(self, make_tree):
        """Test configured exclude globs."""
        root = make_tree({
            "shop/model.py": "",
            "tests/test_model.py": "",
            "shop/migrations/0001_initial.py": "",
        })
        source = FileSystemModuleSource(exclude=["tests/*", "*/migrations/*"])
        assert list(source.discover(root)) == ["shop.model"]

    def test_missing_root(self, tmp_path):
        """Test that a missing root raises."""
        with pytest.raises(ModuleNotFoundInRootError):
            FileSystemModuleSource().discover(tmp_path / "nope")


class TestModuleName:
    """Test path to module name conversion."""

    @pytest.mark.parametrize(
        "relative,expected",
        [
            ("shop/domain/model.py", "shop.domain.model"),
            ("shop/__init__.py", "shop"),
            ("setup.py", "setup"),
            ("__init__.py", None),
            ("my-scripts/run.py", None),
        ],
    )
    def test_module_name(self, relative, expected):
        assert module_name(Path(relative)) == expected
