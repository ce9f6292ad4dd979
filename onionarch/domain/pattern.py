"""Package patterns used to assign modules to layers.

A pattern is a dotted package name in which ``..`` stands for any number of
package segments, including none. ``..domain.model..`` therefore matches
``shop.domain.model``, ``shop.domain.model.order`` and ``domain.model``.
A pattern without any ``..`` matches the named package and everything below
it. Single segments may use ``*`` as a shell-style wildcard.
"""
import re
from fnmatch import fnmatchcase
from functools import lru_cache
from typing import Optional, Sequence, Tuple

from onionarch.domain.exceptions import ArchitectureDefinitionError

WILDCARD = None
_SEGMENT = re.compile(r"^[A-Za-z0-9_*]+$")


class PackagePattern:
    """Dotted package pattern with ``..`` wildcards."""

    __slots__ = ("value", "_tokens")

    def __init__(self, value: str):
        self._tokens = _tokenize(value)
        self.value = value.strip()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackagePattern):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"PackagePattern({self.value!r})"

    def matches(self, module: str) -> bool:
        """Check whether a dotted module name falls under this pattern."""
        if not module:
            return False
        return _match(self._tokens, tuple(module.split(".")))

    def __str__(self) -> str:
        return self.value


def _tokenize(value: str) -> Tuple[Optional[str], ...]:
    if not isinstance(value, str) or not value.strip():
        raise ArchitectureDefinitionError("Package pattern must be a non-empty string")

    value = value.strip()
    parts = value.split("..")
    tokens = []
    for index, part in enumerate(parts):
        if index > 0:
            tokens.append(WILDCARD)
        if part == "":
            # Only the leading and trailing wildcard may leave an empty part
            if 0 < index < len(parts) - 1:
                raise ArchitectureDefinitionError(f"Invalid package pattern '{value}'")
            continue
        for segment in part.split("."):
            if not _SEGMENT.match(segment):
                raise ArchitectureDefinitionError(f"Invalid package pattern '{value}'")
            tokens.append(segment)

    if all(token is WILDCARD for token in tokens):
        raise ArchitectureDefinitionError(
            f"Package pattern '{value}' must name at least one package"
        )

    if WILDCARD not in tokens:
        tokens.append(WILDCARD)

    return tuple(tokens)


def _match(tokens: Tuple[Optional[str], ...], segments: Tuple[str, ...]) -> bool:
    @lru_cache(maxsize=None)
    def step(t: int, s: int) -> bool:
        if t == len(tokens):
            return s == len(segments)
        token = tokens[t]
        if token is WILDCARD:
            return step(t + 1, s) or (s < len(segments) and step(t, s + 1))
        if s == len(segments):
            return False
        return fnmatchcase(segments[s], token) and step(t + 1, s + 1)

    return step(0, 0)


def patterns_from(values: Sequence[str]) -> Tuple[PackagePattern, ...]:
    """Build a tuple of patterns from plain strings."""
    return tuple(PackagePattern(value) for value in values)
