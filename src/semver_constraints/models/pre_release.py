"""Pre-release identifier model."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from ..errors import SemverError, ensure
from ..patterns import ONLY_ALPHANUMERIC_OR_HYPHEN_REGEX, ONLY_NUMBER_REGEX


def _is_numeric(identifier: str) -> bool:
    return ONLY_NUMBER_REGEX.fullmatch(identifier) is not None


def _compare_identifier(a: str, b: str) -> int:
    a_numeric = _is_numeric(a)
    b_numeric = _is_numeric(b)
    if a_numeric and not b_numeric:
        return -1
    if not a_numeric and b_numeric:
        return 1
    if a_numeric and b_numeric:
        left: int | str = int(a)
        right: int | str = int(b)
    else:
        left, right = a, b
    if left == right:
        return 0
    return -1 if left < right else 1


@total_ordering
@dataclass(frozen=True)
class PreRelease:
    """Dot-separated pre-release identifiers, e.g. ``alpha.1``."""

    identifiers: tuple[str, ...]

    def __post_init__(self) -> None:
        ensure(bool(self.identifiers), "Pre-release must contain at least one identifier")
        for identifier in self.identifiers:
            ensure(identifier != "", "Pre-release identifiers must be non-empty")
            if _is_numeric(identifier):
                ensure(
                    len(identifier) == 1 or identifier[0] != "0",
                    f"The pre-release part '{identifier}' is numeric but contains a leading zero.",
                )
                continue
            ensure(
                ONLY_ALPHANUMERIC_OR_HYPHEN_REGEX.fullmatch(identifier) is not None,
                f"The pre-release part '{identifier}' contains invalid character.",
            )

    def __str__(self) -> str:
        return ".".join(self.identifiers)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PreRelease):
            return NotImplemented
        return PreRelease.compare(self, other) < 0

    def identity(self) -> str:
        """Return the first identifier, which names the pre-release track (``alpha``, ``rc``...)."""
        return self.identifiers[0]

    def increment(self) -> PreRelease:
        """Bump the last numeric identifier, or append ``0`` when there is none."""
        parts = list(self.identifiers)
        for index in range(len(parts) - 1, -1, -1):
            if _is_numeric(parts[index]):
                parts[index] = str(int(parts[index]) + 1)
                return PreRelease(tuple(parts))
        parts.append("0")
        return PreRelease(tuple(parts))

    @classmethod
    def parse(cls, text: str) -> PreRelease:
        """Parse ``text``; an empty string yields the default ``0`` pre-release.

        Raises:
            SemverError: If any identifier is empty, has a leading zero or an
                invalid character.
        """
        text = text.strip()
        if not text:
            return DEFAULT_PRE_RELEASE
        return cls(tuple(text.split(".")))

    @classmethod
    def parse_or_none(cls, text: str) -> PreRelease | None:
        try:
            return cls.parse(text)
        except SemverError:
            return None

    @staticmethod
    def compare(p1: PreRelease | str, p2: PreRelease | str) -> int:
        """Compare two pre-releases with SemVer precedence; return -1, 0 or 1."""
        if not isinstance(p1, PreRelease):
            p1 = PreRelease.parse(p1)
        if not isinstance(p2, PreRelease):
            p2 = PreRelease.parse(p2)

        for a, b in zip(p1.identifiers, p2.identifiers):
            result = _compare_identifier(a, b)
            if result != 0:
                return result

        size1, size2 = len(p1.identifiers), len(p2.identifiers)
        if size1 == size2:
            return 0
        return -1 if size1 < size2 else 1


DEFAULT_PRE_RELEASE = PreRelease(("0",))
