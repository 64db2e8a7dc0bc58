"""Unit tests for ObservabilityConfig."""

import threading

import pytest

from querylog.exceptions import ImproperConfigurationError
from querylog.observability import (
    DEFAULT_MAX_PARAMETER_VALUE_LENGTH,
    DEFAULT_MAX_QUERY_STRING_LENGTH,
    DEFAULT_SLOW_QUERY_THRESHOLD_MS,
    UNLIMITED,
    ObservabilityConfig,
)


def test_defaults() -> None:
    config = ObservabilityConfig()
    assert config.slow_query_threshold_ms == DEFAULT_SLOW_QUERY_THRESHOLD_MS == 5000
    assert config.max_query_string_length == DEFAULT_MAX_QUERY_STRING_LENGTH == 500
    assert config.max_parameter_value_length == DEFAULT_MAX_PARAMETER_VALUE_LENGTH == 50


def test_accepts_valid_values() -> None:
    config = ObservabilityConfig()
    config.slow_query_threshold_ms = 0
    config.max_query_string_length = UNLIMITED
    config.max_parameter_value_length = 1
    assert config.as_dict() == {
        "slow_query_threshold_ms": 0,
        "max_query_string_length": -1,
        "max_parameter_value_length": 1,
    }


@pytest.mark.parametrize("value", [0, -2, -500])
def test_rejects_invalid_query_string_length(value: int) -> None:
    config = ObservabilityConfig(max_query_string_length=100)
    with pytest.raises(ImproperConfigurationError, match="max_query_string_length") as exc_info:
        config.max_query_string_length = value
    assert exc_info.value.setting == "max_query_string_length"
    assert config.max_query_string_length == 100


@pytest.mark.parametrize("value", [0, -2, True, "10", 1.5])
def test_rejects_invalid_parameter_value_length(value: object) -> None:
    config = ObservabilityConfig()
    with pytest.raises(ImproperConfigurationError):
        config.set_max_parameter_value_length(value)  # type: ignore[arg-type]
    assert config.max_parameter_value_length == DEFAULT_MAX_PARAMETER_VALUE_LENGTH


@pytest.mark.parametrize("value", [-1, -5000, None])
def test_rejects_negative_threshold(value: object) -> None:
    config = ObservabilityConfig(slow_query_threshold_ms=10)
    with pytest.raises(ImproperConfigurationError, match="should be >= 0"):
        config.slow_query_threshold_ms = value  # type: ignore[assignment]
    assert config.slow_query_threshold_ms == 10


def test_configuration_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        ObservabilityConfig(max_query_string_length=0)


def test_fluent_setters() -> None:
    config = (
        ObservabilityConfig()
        .set_slow_query_threshold_ms(250)
        .set_max_query_string_length(80)
        .set_max_parameter_value_length(UNLIMITED)
    )
    assert config == ObservabilityConfig(250, 80, UNLIMITED)


def test_replace_returns_new_instance() -> None:
    config = ObservabilityConfig()
    replaced = config.replace(max_query_string_length=42)
    assert replaced.max_query_string_length == 42
    assert config.max_query_string_length == DEFAULT_MAX_QUERY_STRING_LENGTH
    assert replaced is not config


def test_replace_rejects_unknown_field() -> None:
    with pytest.raises(TypeError, match="'fetch_size' is not a field"):
        ObservabilityConfig().replace(fetch_size=10)


def test_copy_and_equality() -> None:
    config = ObservabilityConfig(1, 2, 3)
    clone = config.copy()
    assert clone == config
    assert clone is not config
    clone.max_parameter_value_length = 4
    assert clone != config


def test_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(ObservabilityConfig())


def test_repr() -> None:
    assert repr(ObservabilityConfig()) == (
        "ObservabilityConfig(slow_query_threshold_ms=5000, max_query_string_length=500, "
        "max_parameter_value_length=50)"
    )


def test_concurrent_writers_never_leave_invalid_values() -> None:
    config = ObservabilityConfig()
    observed: set[int] = set()
    errors: list[BaseException] = []

    def write(values: "list[int]") -> None:
        for _ in range(500):
            for value in values:
                try:
                    config.max_query_string_length = value
                except ImproperConfigurationError:
                    pass
                except BaseException as exc:  # pragma: no cover
                    errors.append(exc)

    def read() -> None:
        for _ in range(2000):
            observed.add(config.max_query_string_length)

    threads = [
        threading.Thread(target=write, args=([10, 20, 0],)),
        threading.Thread(target=write, args=([UNLIMITED, -7],)),
        threading.Thread(target=read),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert not errors
    assert observed <= {DEFAULT_MAX_QUERY_STRING_LENGTH, 10, 20, UNLIMITED}
    assert config.max_query_string_length in {10, 20, UNLIMITED}
