"""Comparison operators used by conditions and ranges."""

from __future__ import annotations

from enum import Enum

from ..errors import SemverError


class Op(str, Enum):
    EQUAL = "="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="

    @classmethod
    def from_token(cls, token: str) -> Op:
        """Read an operator token; ``=<``/``=>`` are alternative spellings and empty means ``=``.

        Raises:
            SemverError: If ``token`` is not a comparison operator.
        """
        op = _TOKENS.get(token)
        if op is None:
            raise SemverError(f"Invalid comparison operator: {token}")
        return op

    def negate(self) -> Op:
        return _NEGATIONS[self]


_TOKENS: dict[str, Op] = {
    "": Op.EQUAL,
    "=": Op.EQUAL,
    "!=": Op.NOT_EQUAL,
    "<": Op.LESS_THAN,
    "<=": Op.LESS_THAN_OR_EQUAL,
    "=<": Op.LESS_THAN_OR_EQUAL,
    ">": Op.GREATER_THAN,
    ">=": Op.GREATER_THAN_OR_EQUAL,
    "=>": Op.GREATER_THAN_OR_EQUAL,
}

COMPARISON_TOKENS = frozenset(_TOKENS) - {""}
TILDE_TOKENS = frozenset({"~", "~>"})
CARET_TOKEN = "^"

_NEGATIONS: dict[Op, Op] = {
    Op.EQUAL: Op.NOT_EQUAL,
    Op.NOT_EQUAL: Op.EQUAL,
    Op.LESS_THAN: Op.GREATER_THAN_OR_EQUAL,
    Op.LESS_THAN_OR_EQUAL: Op.GREATER_THAN,
    Op.GREATER_THAN: Op.LESS_THAN_OR_EQUAL,
    Op.GREATER_THAN_OR_EQUAL: Op.LESS_THAN,
}
