"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from soakflow.core.exceptions import (
    ConfigurationError,
    DiceRollError,
    GameEngineError,
    InvalidGameStateError,
    SoakFlowError,
)


class TestSoakFlowError:
    """Tests for the base exception."""

    def test_message_without_details(self) -> None:
        """The message is used as-is when no details are given."""
        error = SoakFlowError("Something broke")

        assert str(error) == "Something broke"
        assert error.details == {}

    def test_message_with_details(self) -> None:
        """Details are appended to the message."""
        error = SoakFlowError("Something broke", details={"actor": "abc"})

        assert str(error) == "Something broke [actor='abc']"

    def test_repr(self) -> None:
        """repr shows class, message and details."""
        error = SoakFlowError("Oops", details={"a": 1})

        assert repr(error) == "SoakFlowError(message='Oops', details={'a': 1})"


class TestDomainExceptions:
    """Tests for domain-specific exceptions."""

    @pytest.mark.parametrize(
        "exc_type",
        [GameEngineError, InvalidGameStateError, DiceRollError, ConfigurationError],
    )
    def test_all_inherit_from_base(self, exc_type: type[SoakFlowError]) -> None:
        """Every exception can be caught as SoakFlowError."""
        with pytest.raises(SoakFlowError):
            raise exc_type("failure")

    def test_invalid_state_context(self) -> None:
        """State context ends up in the details."""
        error = InvalidGameStateError(
            "Bad transition",
            current_state="start",
            expected_states=["preview_computed"],
        )

        assert error.details == {
            "current_state": "start",
            "expected_states": ["preview_computed"],
        }
        assert isinstance(error, GameEngineError)

    def test_dice_roll_expression(self) -> None:
        """The failing expression is kept in the details."""
        error = DiceRollError("Bad pool", expression="xd6")

        assert error.details["expression"] == "xd6"

    def test_configuration_key(self) -> None:
        """The failing config key is kept in the details."""
        error = ConfigurationError("Bad config", config_key="log_file")

        assert error.details["config_key"] == "log_file"
