from __future__ import annotations

from range_rover.util.errors import ConfigError, DomainError, Err, InvalidBoundError, RangeRoverError
from range_rover.util.ints import int16, uint8


def test_error_codes_int16() -> None:
    for err in Err:
        assert int16(err.value) == err.value


def test_error_codes_unique() -> None:
    assert len({err.value for err in Err}) == len(Err)


def test_invalid_bound_error() -> None:
    error = InvalidBoundError(5, 3)
    assert isinstance(error, RangeRoverError)
    assert error.code == Err.INVALID_BOUND
    assert str(error) == "Error code: INVALID_BOUND bound start 5 is greater than bound end 3"


def test_domain_error_is_value_error() -> None:
    error = DomainError(256, uint8)
    assert isinstance(error, ValueError)
    assert isinstance(error, RangeRoverError)
    assert error.code == Err.VALUE_OUT_OF_DOMAIN
    assert "256 does not fit into uint8" in str(error)


def test_config_error_lists_problems() -> None:
    error = ConfigError("Invalid logging config", ["missing 'log_level'", "missing 'log_stdout'"])
    assert error.code == Err.INVALID_CONFIG
    assert error.problems == ["missing 'log_level'", "missing 'log_stdout'"]
    assert error.error_msg == "Invalid logging config: missing 'log_level', missing 'log_stdout'"


def test_config_error_without_problems() -> None:
    first = ConfigError("Config not found")
    first.problems.append("late addition")
    second = ConfigError("Config not found")
    assert second.problems == []
    assert second.error_msg == "Config not found"
