"""Tests for package patterns."""
import pytest

from onionarch.domain.exceptions import ArchitectureDefinitionError
from onionarch.domain.pattern import PackagePattern


class TestPackagePattern:
    """Test package pattern matching."""

    @pytest.mark.parametrize(
        "module",
        ["shop.domain.model", "shop.domain.model.order", "domain.model", "a.b.domain.model.c.d"],
    )
    def test_surrounding_wildcards_match(self, module):
        """Test that ..x.y.. matches the package anywhere in the tree."""
        assert PackagePattern("..domain.model..").matches(module)

    @pytest.mark.parametrize("module", ["shop.domain.modelx", "shop.domain", "shop.model", ""])
    def test_surrounding_wildcards_reject(self, module):
        """Test that partial segment matches are rejected."""
        assert not PackagePattern("..domain.model..").matches(module)

    def test_plain_pattern_matches_package_and_below(self):
        """Test that a pattern without wildcards covers sub-packages."""
        pattern = PackagePattern("shop.adapter.cli")
        assert pattern.matches("shop.adapter.cli")
        assert pattern.matches("shop.adapter.cli.commands")
        assert not pattern.matches("shop.adapter")
        assert not pattern.matches("other.shop.adapter.cli")

    def test_leading_wildcard_anchors_end(self):
        """Test that a pattern ending without wildcard must match the last segment."""
        pattern = PackagePattern("..service")
        assert pattern.matches("shop.domain.service")
        assert not pattern.matches("shop.domain.service.pricing")

    def test_inner_wildcard(self):
        """Test wildcard between fixed segments."""
        pattern = PackagePattern("shop..rest")
        assert pattern.matches("shop.rest")
        assert pattern.matches("shop.adapter.http.rest")
        assert not pattern.matches("shop.adapter.rest.views")

    def test_segment_glob(self):
        """Test shell-style globbing inside one segment."""
        pattern = PackagePattern("..adapter.*_api..")
        assert pattern.matches("shop.adapter.rest_api")
        assert not pattern.matches("shop.adapter.rest")

    @pytest.mark.parametrize("value", ["", "   ", "..", "...", "a....b", ".a", "a.", "a-b"])
    def test_invalid_patterns(self, value):
        """Test that malformed patterns are rejected."""
        with pytest.raises(ArchitectureDefinitionError):
            PackagePattern(value)

    def test_equality_and_hash(self):
        """Test that patterns compare by value."""
        assert PackagePattern("..domain..") == PackagePattern("..domain..")
        assert len({PackagePattern("a.b"), PackagePattern("a.b")}) == 1
        assert str(PackagePattern("a.b")) == "a.b"
