"""Regular expressions for the version and constraint grammars.

Built from the SemVer 2.0.0 grammar and extended with the X-range, operator
and hyphen-range forms accepted in constraint strings.
"""

from __future__ import annotations

import re

# <major>, <minor>, <patch>; ASCII digits only
NUMERIC = r"0|[1-9][0-9]*"

ALPHANUMERIC_OR_HYPHEN = r"[0-9a-zA-Z-]"

LETTER_OR_HYPHEN = r"[a-zA-Z-]"

# Identifier with at least one non-digit.
NON_NUMERIC = rf"[0-9]*{LETTER_OR_HYPHEN}{ALPHANUMERIC_OR_HYPHEN}*"

PRE_RELEASE_PART = rf"(?:{NUMERIC}|{NON_NUMERIC})"

PRE_RELEASE = rf"(?:{PRE_RELEASE_PART}(?:\.{PRE_RELEASE_PART})*)"

BUILD = rf"(?:{ALPHANUMERIC_OR_HYPHEN}+(?:\.{ALPHANUMERIC_OR_HYPHEN}+)*)"

VERSION_REGEX = re.compile(
    rf"(?P<major>{NUMERIC})\.(?P<minor>{NUMERIC})\.(?P<patch>{NUMERIC})"
    rf"(?:-(?P<pre_release>{PRE_RELEASE}))?"
    rf"(?:\+(?P<build_meta>{BUILD}))?"
)

LOOSE_VERSION_REGEX = re.compile(
    rf"v?(?P<major>{NUMERIC})(?:\.(?P<minor>{NUMERIC}))?(?:\.(?P<patch>{NUMERIC}))?"
    rf"(?:-(?P<pre_release>{PRE_RELEASE}))?"
    rf"(?:\+(?P<build_meta>{BUILD}))?"
)

ONLY_NUMBER_REGEX = re.compile(r"[0-9]+")

ONLY_ALPHANUMERIC_OR_HYPHEN_REGEX = re.compile(rf"{ALPHANUMERIC_OR_HYPHEN}+")

WILDCARDS = frozenset({"*", "x", "X"})

X_RANGE_NUMERIC = rf"{NUMERIC}|x|X|\*"

# Longer spellings first so that ">=" is never read as ">" followed by "=".
OPERATORS = r"!=|<=|=<|>=|=>|~>|<|>|=|\^|~"


def x_range_version(prefix: str = "") -> str:
    """Return the X-range pattern (``1.x``, ``1.2.*``, ``1.2.3-beta``) with prefixed group names."""
    return (
        rf"(?P<{prefix}major>{X_RANGE_NUMERIC})"
        rf"(?:\.(?P<{prefix}minor>{X_RANGE_NUMERIC})"
        rf"(?:\.(?P<{prefix}patch>{X_RANGE_NUMERIC})"
        rf"(?:-(?P<{prefix}pre_release>{PRE_RELEASE}))?"
        rf"(?:\+(?P<{prefix}build_meta>{BUILD}))?"
        r")?)?"
    )


# Operator condition: >=1.2.*
OPERATOR_CONDITION_REGEX = re.compile(
    rf"(?P<operator>{OPERATORS})?\s*v?{x_range_version()}"
)

# Hyphen range: 1.2.* - 2.0.0, bounded by whitespace or the ends of the text
HYPHEN_CONDITION_REGEX = re.compile(
    rf"(?<!\S)\s*v?{x_range_version('start_')}\s+-\s+v?{x_range_version('end_')}\s*(?!\S)"
)


def is_wildcard(text: str | None) -> bool:
    return text in WILDCARDS
