"""Constraint parsing and evaluation.

Supported expressions:
- exact versions, with or without ``=`` (e.g., "1.2.3", "=1.2.3")
- comparison operators: =, !=, <, <=, =<, >, >=, =>
- X-ranges: 1.x, 1.2.*, 1.X (a missing part counts as a wildcard)
- caret ranges ^x.y.z and tilde ranges ~x.y.z / ~>x.y.z
- hyphen ranges "1.2.3 - 2.0.0"
- comparator sets split by spaces (AND), e.g., ">=1.0.0 <2.0.0"
- alternatives split by "|" or "||" (OR), e.g., "^1.0.0 || ^2.0.0"
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import SemverError, ensure
from ..models.version import Version
from ..patterns import HYPHEN_CONDITION_REGEX, OPERATOR_CONDITION_REGEX
from .comparator import GREATER_THAN_MIN, Comparator, Range
from .descriptor import VersionDescriptor
from .op import Op


def _descriptor(match: re.Match[str], prefix: str = "") -> VersionDescriptor:
    return VersionDescriptor(
        match.group(f"{prefix}major"),
        match.group(f"{prefix}minor"),
        match.group(f"{prefix}patch"),
        match.group(f"{prefix}pre_release"),
        match.group(f"{prefix}build_meta"),
    )


def _hyphen_to_comparator(match: re.Match[str]) -> Comparator:
    start = _descriptor(match, "start_")
    end = _descriptor(match, "end_")
    return Range(
        start.to_comparator(Op.GREATER_THAN_OR_EQUAL),
        end.to_comparator(Op.LESS_THAN_OR_EQUAL),
        Op.EQUAL,
    )


def _parse_conditions(text: str, constraint_string: str) -> list[Comparator]:
    comparators: list[Comparator] = []
    pos = 0
    while pos < len(text):
        if text[pos].isspace():
            pos += 1
            continue
        match = OPERATOR_CONDITION_REGEX.match(text, pos)
        # Tokens must be whitespace separated: "1.02.3" is not "1.0" and "2.3".
        if match is None or (match.end() < len(text) and not text[match.end()].isspace()):
            raise SemverError(f"Invalid constraint: {constraint_string}")
        comparators.append(_descriptor(match).from_operator(match.group("operator") or ""))
        pos = match.end()
    return comparators


def _parse_group(group: str, constraint_string: str) -> list[Comparator]:
    comparators: list[Comparator] = []

    def _collect(match: re.Match[str]) -> str:
        comparators.append(_hyphen_to_comparator(match))
        return " "

    residue = HYPHEN_CONDITION_REGEX.sub(_collect, group).strip()
    comparators.extend(_parse_conditions(residue, constraint_string))
    return comparators


@dataclass(frozen=True)
class Constraint:
    """Alternatives (OR) of comparator groups (AND)."""

    comparators: tuple[tuple[Comparator, ...], ...]

    def __str__(self) -> str:
        return " || ".join(" ".join(str(c) for c in group) for group in self.comparators)

    def is_satisfied_by(self, version: Version) -> bool:
        """Return True when every comparator of at least one group holds for ``version``."""
        return any(
            all(comparator.is_satisfied_by(version) for comparator in group)
            for group in self.comparators
        )

    @classmethod
    def default(cls) -> Constraint:
        return DEFAULT_CONSTRAINT

    @classmethod
    def parse(cls, constraint_string: str) -> Constraint:
        """Parse constraint text into its OR-of-AND form.

        Empty or whitespace-only text yields the unrestricted default
        constraint (``>=0.0.0``).

        Raises:
            SemverError: If any alternative is malformed or none holds a comparator.
        """
        constraint_string = constraint_string.strip()
        if not constraint_string:
            return DEFAULT_CONSTRAINT

        groups: list[tuple[Comparator, ...]] = []
        for part in constraint_string.split("|"):
            if not part.strip():
                continue
            comparators = _parse_group(part, constraint_string)
            if comparators:
                groups.append(tuple(comparators))

        ensure(bool(groups), f"Invalid constraint: {constraint_string}")
        return cls(tuple(groups))

    @classmethod
    def parse_or_none(cls, constraint_string: str) -> Constraint | None:
        try:
            return cls.parse(constraint_string)
        except SemverError:
            return None


DEFAULT_CONSTRAINT = Constraint(((GREATER_THAN_MIN,),))
