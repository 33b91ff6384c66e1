"""Tests for pre-release parsing, ordering and increment."""

import pytest

from semver_constraints import DEFAULT_PRE_RELEASE, PreRelease, SemverError


class TestParse:
    """Test pre-release validation."""

    @pytest.mark.parametrize("text", ["alpha.", "alpha..1", "alpha. ", "alpha$", "alpha.012", "01"])
    def test_invalid(self, text):
        """Test empty parts, bad characters and leading zeros are rejected."""
        with pytest.raises(SemverError):
            PreRelease.parse(text)

    def test_parse_or_none(self):
        """Test the non-raising parser returns None on invalid input."""
        assert PreRelease.parse_or_none("alpha.012") is None
        assert PreRelease.parse_or_none("alpha.12") == PreRelease(("alpha", "12"))

    def test_leading_zero_message_names_part(self):
        with pytest.raises(SemverError, match="'012'.*leading zero"):
            PreRelease.parse("alpha.012")

    def test_invalid_character_message_names_part(self):
        with pytest.raises(SemverError, match="'beta\\$'.*invalid character"):
            PreRelease.parse("alpha.beta$")

    def test_empty_is_default(self):
        """Test empty input yields the default '0' pre-release."""
        assert PreRelease.parse("") is DEFAULT_PRE_RELEASE
        assert str(PreRelease.parse("  ")) == "0"

    @pytest.mark.parametrize("text", ["0alpha-3.Beta.13", "0alpha", "0", "x-y-z.--", "rc.1"])
    def test_valid(self, text):
        assert str(PreRelease.parse(text)) == text

    def test_identity(self):
        assert PreRelease.parse("alpha.1.beta").identity() == "alpha"


class TestIncrement:
    """Test the last numeric identifier is bumped."""

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("alpha-3.Beta", "alpha-3.Beta.0"),
            ("alpha-3.13.Beta", "alpha-3.14.Beta"),
            ("alpha.5.Beta.7", "alpha.5.Beta.8"),
            ("0", "1"),
            ("9", "10"),
            ("alpha.9.beta", "alpha.10.beta"),
            ("alpha.10.0.beta", "alpha.10.1.beta"),
        ],
    )
    def test_increment(self, source, expected):
        assert str(PreRelease.parse(source).increment()) == expected

    def test_increment_returns_new_value(self):
        original = PreRelease.parse("alpha.1")
        original.increment()
        assert str(original) == "alpha.1"


class TestCompare:
    """Test SemVer precedence between pre-releases."""

    def test_numeric_lower_than_alphanumeric(self):
        assert PreRelease.compare("1", "alpha") == -1
        assert PreRelease.compare("alpha", "1") == 1

    def test_numeric_compared_as_integers(self):
        assert PreRelease.compare("beta.2", "beta.11") == -1

    def test_alphanumeric_compared_by_code_point(self):
        assert PreRelease.compare("alpha", "beta") == -1
        assert PreRelease.compare("Beta", "alpha") == -1

    def test_shorter_is_lower(self):
        assert PreRelease.compare("alpha", "alpha.1") == -1
        assert PreRelease.compare("alpha.1", "alpha") == 1

    def test_equal(self):
        assert PreRelease.compare(PreRelease.parse("rc.1"), "rc.1") == 0

    def test_ordering_operators(self):
        assert PreRelease.parse("alpha") < PreRelease.parse("alpha.1")
        assert PreRelease.parse("rc.1") >= PreRelease.parse("beta.11")
