"""Semantic version model following the SemVer 2.0.0 specification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import TYPE_CHECKING

from ..errors import SemverError, ensure
from ..patterns import LOOSE_VERSION_REGEX, VERSION_REGEX
from .pre_release import DEFAULT_PRE_RELEASE, PreRelease

if TYPE_CHECKING:
    from ..constraints.constraint import Constraint


class Inc(Enum):
    """Which part of a version ``Version.inc`` should bump."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRE_RELEASE = "pre-release"


def _compare_int(a: int, b: int) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def _parse_pre_release(pre_release: str | None) -> PreRelease | None:
    return PreRelease.parse(pre_release) if pre_release is not None else None


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """Immutable semantic version.

    Build metadata is kept for rendering only; it never takes part in
    ordering, equality or hashing.
    """

    major: int
    minor: int
    patch: int
    pre_release: PreRelease | None = None
    build_meta: str | None = None

    def __post_init__(self) -> None:
        ensure(self.major >= 0, "The major number must be >= 0.")
        ensure(self.minor >= 0, "The minor number must be >= 0.")
        ensure(self.patch >= 0, "The patch number must be >= 0.")
        if isinstance(self.pre_release, str):
            object.__setattr__(self, "pre_release", PreRelease.parse(self.pre_release))

    def __str__(self) -> str:
        result = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release is not None:
            result += f"-{self.pre_release}"
        if self.build_meta is not None:
            result += f"+{self.build_meta}"
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return Version.compare(self, other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return Version.compare(self, other) < 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.pre_release))

    @property
    def is_pre_release(self) -> bool:
        return self.pre_release is not None

    @property
    def is_stable(self) -> bool:
        """Stable versions have a positive major number and no pre-release."""
        return self.major > 0 and not self.is_pre_release

    def without_suffixes(self) -> Version:
        """Return a copy without the pre-release and build metadata parts."""
        return Version(self.major, self.minor, self.patch)

    def copy(
        self,
        major: int | None = None,
        minor: int | None = None,
        patch: int | None = None,
        pre_release: str | None = None,
        build_meta: str | None = None,
    ) -> Version:
        """Return a copy with the given parts replaced."""
        return Version(
            self.major if major is None else major,
            self.minor if minor is None else minor,
            self.patch if patch is None else patch,
            self.pre_release if pre_release is None else PreRelease.parse(pre_release),
            self.build_meta if build_meta is None else build_meta,
        )

    # ---- Comparison -------------------------------------------------------------------

    @staticmethod
    def compare(v1: Version, v2: Version) -> int:
        """Compare two versions by SemVer precedence; return -1, 0 or 1."""
        for a, b in ((v1.major, v2.major), (v1.minor, v2.minor), (v1.patch, v2.patch)):
            result = _compare_int(a, b)
            if result != 0:
                return result

        if v1.pre_release is not None and v2.pre_release is None:
            return -1
        if v1.pre_release is None and v2.pre_release is not None:
            return 1
        if v1.pre_release is not None and v2.pre_release is not None:
            return PreRelease.compare(v1.pre_release, v2.pre_release)
        return 0

    def _compare_to(self, other: Version | str) -> int:
        if not isinstance(other, Version):
            other = Version.parse(other)
        return Version.compare(self, other)

    def is_less_than(self, other: Version | str) -> bool:
        return self._compare_to(other) < 0

    def is_less_than_or_equal(self, other: Version | str) -> bool:
        return self._compare_to(other) <= 0

    def is_greater_than(self, other: Version | str) -> bool:
        return self._compare_to(other) > 0

    def is_greater_than_or_equal(self, other: Version | str) -> bool:
        return self._compare_to(other) >= 0

    def is_equal(self, other: Version | str) -> bool:
        return self._compare_to(other) == 0

    def is_not_equal(self, other: Version | str) -> bool:
        return self._compare_to(other) != 0

    # ---- Next versions ----------------------------------------------------------------

    def get_next_major_version(self, pre_release: str | None = None) -> Version:
        return Version(self.major + 1, 0, 0, _parse_pre_release(pre_release))

    def get_next_minor_version(self, pre_release: str | None = None) -> Version:
        return Version(self.major, self.minor + 1, 0, _parse_pre_release(pre_release))

    def get_next_patch_version(self, pre_release: str | None = None) -> Version:
        """Bump the patch number.

        A pre-release version without an explicit ``pre_release`` argument is
        finalised onto its own patch number instead of bumping it again.
        """
        bump = not self.is_pre_release or pre_release is not None
        return Version(
            self.major,
            self.minor,
            self.patch + 1 if bump else self.patch,
            _parse_pre_release(pre_release),
        )

    def get_next_pre_release_version(self, pre_release: str | None = None) -> Version:
        """Produce the next pre-release version.

        When ``pre_release`` names the current track (its first identifier) the
        current pre-release is incremented, otherwise it replaces it. Without an
        argument the current pre-release is incremented, or ``0`` is attached to
        the next patch of a release version.
        """
        next_pre = DEFAULT_PRE_RELEASE
        if pre_release:
            if self.pre_release is not None and self.pre_release.identity() == pre_release:
                next_pre = self.pre_release.increment()
            else:
                next_pre = PreRelease.parse(pre_release)
        elif self.pre_release is not None:
            next_pre = self.pre_release.increment()

        return Version(
            self.major,
            self.minor,
            self.patch if self.is_pre_release else self.patch + 1,
            next_pre,
        )

    def inc(self, by: Inc, pre_release: str | None = None) -> Version:
        """Return the next version, bumped by the part named by ``by``."""
        if by is Inc.MAJOR:
            return self.get_next_major_version(pre_release)
        if by is Inc.MINOR:
            return self.get_next_minor_version(pre_release)
        if by is Inc.PATCH:
            return self.get_next_patch_version(pre_release)
        if by is Inc.PRE_RELEASE:
            return self.get_next_pre_release_version(pre_release)
        raise SemverError(f"Invalid `by` argument in inc(): {by!r}")

    # ---- Constraints ------------------------------------------------------------------

    def is_satisfying(self, constraint: Constraint) -> bool:
        """Return True when this version satisfies ``constraint``."""
        return constraint.is_satisfied_by(self)

    @staticmethod
    def satisfies(version_string: str, constraint_string: str) -> bool:
        """Parse both strings and check the version against the constraint.

        Raises:
            SemverError: If either string is invalid.
        """
        from ..constraints.constraint import Constraint

        version = Version.parse(version_string)
        constraint = Constraint.parse(constraint_string)
        return version.is_satisfying(constraint)

    # ---- Construction -----------------------------------------------------------------

    @classmethod
    def min_version(cls) -> Version:
        return MIN_VERSION

    @classmethod
    def parse(cls, version_string: str, strict: bool = True) -> Version:
        """Parse a version string.

        Strict mode (the default) only accepts complete ``MAJOR.MINOR.PATCH``
        versions. With ``strict=False`` a leading ``v`` is allowed and the
        minor and patch numbers may be omitted (``v1.2`` -> ``1.2.0``).

        Raises:
            SemverError: If the string is empty or not a valid version.
        """
        version_string = version_string.strip()
        ensure(version_string != "", "versionString cannot be empty.")

        pattern = VERSION_REGEX if strict else LOOSE_VERSION_REGEX
        match = pattern.fullmatch(version_string)
        if match is None:
            raise SemverError(f"Invalid version: {version_string}.")

        minor = match.group("minor")
        patch = match.group("patch")
        return cls(
            int(match.group("major")),
            int(minor) if minor else 0,
            int(patch) if patch else 0,
            _parse_pre_release(match.group("pre_release")),
            match.group("build_meta"),
        )

    @classmethod
    def parse_or_none(cls, version_string: str, strict: bool = True) -> Version | None:
        try:
            return cls.parse(version_string, strict)
        except SemverError:
            return None

    @classmethod
    def create(
        cls,
        major: int,
        minor: int,
        patch: int,
        pre_release: str | None = None,
        build_meta: str | None = None,
    ) -> Version:
        """Build a version from its parts.

        Raises:
            SemverError: If a number is negative or ``pre_release`` is invalid.
        """
        return cls(major, minor, patch, _parse_pre_release(pre_release), build_meta)


MIN_VERSION = Version(0, 0, 0)
