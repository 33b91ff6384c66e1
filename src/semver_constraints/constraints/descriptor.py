"""Resolve partially specified versions (``1.x``, ``^0.2``, ``~1.2.3``) into comparators."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import SemverError
from ..models.version import MIN_VERSION, Version
from ..patterns import ONLY_NUMBER_REGEX, is_wildcard
from .comparator import GREATER_THAN_MIN, Comparator, Condition, Range
from .op import CARET_TOKEN, COMPARISON_TOKENS, TILDE_TOKENS, Op

# Lower than every other version, so a "<" check against it never holds.
_BELOW_MIN = Condition(Op.LESS_THAN, MIN_VERSION.copy(pre_release=""))


@dataclass(frozen=True)
class VersionDescriptor:
    """Version fields as matched in a constraint; a missing field counts as a wildcard."""

    major: str
    minor: str | None = None
    patch: str | None = None
    pre_release: str | None = None
    build_meta: str | None = None

    def __str__(self) -> str:
        result = self.major
        if self.minor is not None:
            result += f".{self.minor}"
        if self.patch is not None:
            result += f".{self.patch}"
        if self.pre_release is not None:
            result += f"-{self.pre_release}"
        if self.build_meta is not None:
            result += f"+{self.build_meta}"
        return result

    @property
    def is_major_wildcard(self) -> bool:
        return is_wildcard(self.major)

    @property
    def is_minor_wildcard(self) -> bool:
        return self.minor is None or is_wildcard(self.minor)

    @property
    def is_patch_wildcard(self) -> bool:
        return self.patch is None or is_wildcard(self.patch)

    @property
    def has_wildcard(self) -> bool:
        return self.is_major_wildcard or self.is_minor_wildcard or self.is_patch_wildcard

    def _to_int(self, value: str | None, name: str) -> int:
        if value is None or ONLY_NUMBER_REGEX.fullmatch(value) is None:
            raise SemverError(f"Invalid {name} number in: {self}")
        return int(value)

    @property
    def int_major(self) -> int:
        return self._to_int(self.major, "MAJOR")

    @property
    def int_minor(self) -> int:
        return self._to_int(self.minor, "MINOR")

    @property
    def int_patch(self) -> int:
        return self._to_int(self.patch, "PATCH")

    def _version(self) -> Version:
        return Version.create(
            self.int_major, self.int_minor, self.int_patch, self.pre_release, self.build_meta
        )

    def from_operator(self, operator: str) -> Comparator:
        """Resolve this descriptor under a constraint operator token.

        Raises:
            SemverError: If the operator is unknown or a required field is not numeric.
        """
        if operator == "" or operator in COMPARISON_TOKENS:
            return self.to_comparator(Op.from_token(operator))
        if operator in TILDE_TOKENS:
            return self._from_tilde()
        if operator == CARET_TOKEN:
            return self._from_caret()
        raise SemverError(f"Invalid constraint operator: {operator} in {self}")

    def to_comparator(self, operator: Op = Op.EQUAL) -> Comparator:
        """Resolve the descriptor under a plain comparison operator.

        Wildcards widen the descriptor into a range bracket that is then read
        with ``operator``.
        """
        if self.is_major_wildcard:
            if operator in (Op.GREATER_THAN, Op.LESS_THAN, Op.NOT_EQUAL):
                return _BELOW_MIN
            return GREATER_THAN_MIN

        if self.is_minor_wildcard:
            version = Version.create(self.int_major, 0, 0, self.pre_release, self.build_meta)
            return Range(
                Condition(Op.GREATER_THAN_OR_EQUAL, version),
                Condition(Op.LESS_THAN, version.get_next_major_version("")),
                operator,
            )

        if self.is_patch_wildcard:
            version = Version.create(
                self.int_major, self.int_minor, 0, self.pre_release, self.build_meta
            )
            return Range(
                Condition(Op.GREATER_THAN_OR_EQUAL, version),
                Condition(Op.LESS_THAN, version.get_next_minor_version("")),
                operator,
            )

        return Condition(operator, self._version())

    def _from_tilde(self) -> Comparator:
        if self.has_wildcard:
            return self.to_comparator()

        version = self._version()
        return Range(
            Condition(Op.GREATER_THAN_OR_EQUAL, version),
            Condition(Op.LESS_THAN, version.get_next_minor_version("")),
            Op.EQUAL,
        )

    def _from_caret(self) -> Comparator:
        if self.is_major_wildcard:
            return GREATER_THAN_MIN
        if self.is_minor_wildcard:
            return self._from_minor_caret()
        if self.is_patch_wildcard:
            return self._from_patch_caret()

        version = self._version()
        if self.major != "0":
            end = version.get_next_major_version("")
        elif self.minor != "0":
            end = version.get_next_minor_version("")
        elif self.patch != "0":
            end = version.get_next_patch_version("")
        else:
            end = Version.create(0, 0, 1, "")

        return Range(
            Condition(Op.GREATER_THAN_OR_EQUAL, version),
            Condition(Op.LESS_THAN, end),
            Op.EQUAL,
        )

    def _from_minor_caret(self) -> Comparator:
        if self.major == "0":
            return Range(
                GREATER_THAN_MIN,
                Condition(Op.LESS_THAN, Version.create(1, 0, 0, "")),
                Op.EQUAL,
            )
        return self.to_comparator()

    def _from_patch_caret(self) -> Comparator:
        if self.major == "0" and self.minor == "0":
            return Range(
                GREATER_THAN_MIN,
                Condition(Op.LESS_THAN, Version.create(0, 1, 0, "")),
                Op.EQUAL,
            )

        if self.major != "0":
            version = Version.create(self.int_major, self.int_minor, 0)
            return Range(
                Condition(Op.GREATER_THAN_OR_EQUAL, version),
                Condition(Op.LESS_THAN, version.get_next_major_version("")),
                Op.EQUAL,
            )

        return self.to_comparator()
