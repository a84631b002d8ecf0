"""Tests for the infixcalc exception hierarchy."""

from __future__ import annotations

import pytest

from infixcalc.exceptions import ConfigError, InfixCalcError


class TestInfixCalcError:
    """Tests for the root exception."""

    def test_message_attribute(self) -> None:
        """The message is stored and used as the string form."""
        error = InfixCalcError("boom")
        assert error.message == "boom"
        assert str(error) == "boom"

    def test_is_exception(self) -> None:
        """Subclasses plain Exception."""
        with pytest.raises(Exception):
            raise InfixCalcError("boom")


class TestConfigError:
    """Tests for ConfigError."""

    def test_defaults(self) -> None:
        """Field and value are optional."""
        error = ConfigError("bad config")
        assert error.field is None
        assert error.value is None
        assert isinstance(error, InfixCalcError)

    def test_field_and_value(self) -> None:
        """Field and value are kept for reporting."""
        error = ConfigError("bad", field="output.precision", value=40)
        assert error.field == "output.precision"
        assert error.value == 40
