"""Live configuration for the query logger."""

from typing import Any, Final

from mypy_extensions import mypyc_attr

from querylog.exceptions import ImproperConfigurationError

__all__ = (
    "DEFAULT_MAX_PARAMETER_VALUE_LENGTH",
    "DEFAULT_MAX_QUERY_STRING_LENGTH",
    "DEFAULT_SLOW_QUERY_THRESHOLD_MS",
    "UNLIMITED",
    "ObservabilityConfig",
)

DEFAULT_SLOW_QUERY_THRESHOLD_MS: Final = 5000
DEFAULT_MAX_QUERY_STRING_LENGTH: Final = 500
DEFAULT_MAX_PARAMETER_VALUE_LENGTH: Final = 50
UNLIMITED: Final = -1

OBSERVABILITY_CONFIG_SLOTS = ("_max_parameter_value_length", "_max_query_string_length", "_slow_query_threshold_ms")
OBSERVABILITY_CONFIG_FIELDS = ("slow_query_threshold_ms", "max_query_string_length", "max_parameter_value_length")


def _validate_threshold(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"Invalid slow_query_threshold_ms, should be >= 0, got {value!r}"
        raise ImproperConfigurationError(msg, setting="slow_query_threshold_ms")
    return value


def _validate_length(setting: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or (value <= 0 and value != UNLIMITED):
        msg = f"Invalid {setting}, should be > 0 or {UNLIMITED}, got {value!r}"
        raise ImproperConfigurationError(msg, setting=setting)
    return value


@mypyc_attr(allow_interpreted_subclasses=False)
class ObservabilityConfig:
    """Thresholds and truncation limits read by the query logger on every call.

    The logger keeps a reference to the instance it was given, so changes made
    here apply to the next logged query. Every field is stored as a single
    attribute and replaced in one assignment: a reader sees either the old or
    the new value, never anything in between. Fields are independent, so one
    logging call may observe a threshold and a length limit from different
    writes.

    Invalid values raise :class:`~querylog.exceptions.ImproperConfigurationError`
    and leave the current value in place.
    """

    __slots__ = OBSERVABILITY_CONFIG_SLOTS

    def __init__(
        self,
        slow_query_threshold_ms: int = DEFAULT_SLOW_QUERY_THRESHOLD_MS,
        max_query_string_length: int = DEFAULT_MAX_QUERY_STRING_LENGTH,
        max_parameter_value_length: int = DEFAULT_MAX_PARAMETER_VALUE_LENGTH,
    ) -> None:
        """Initialize the configuration.

        Args:
            slow_query_threshold_ms: Successful queries slower than this are
                reported as slow. Must be ``>= 0``.
            max_query_string_length: Character budget for the rendered query
                text, ``-1`` for no limit.
            max_parameter_value_length: Character budget for each rendered
                parameter value, ``-1`` for no limit.
        """
        self._slow_query_threshold_ms = _validate_threshold(slow_query_threshold_ms)
        self._max_query_string_length = _validate_length("max_query_string_length", max_query_string_length)
        self._max_parameter_value_length = _validate_length("max_parameter_value_length", max_parameter_value_length)

    @property
    def slow_query_threshold_ms(self) -> int:
        return self._slow_query_threshold_ms

    @slow_query_threshold_ms.setter
    def slow_query_threshold_ms(self, value: int) -> None:
        self._slow_query_threshold_ms = _validate_threshold(value)

    @property
    def max_query_string_length(self) -> int:
        return self._max_query_string_length

    @max_query_string_length.setter
    def max_query_string_length(self, value: int) -> None:
        self._max_query_string_length = _validate_length("max_query_string_length", value)

    @property
    def max_parameter_value_length(self) -> int:
        return self._max_parameter_value_length

    @max_parameter_value_length.setter
    def max_parameter_value_length(self, value: int) -> None:
        self._max_parameter_value_length = _validate_length("max_parameter_value_length", value)

    def set_slow_query_threshold_ms(self, value: int) -> "ObservabilityConfig":
        self.slow_query_threshold_ms = value
        return self

    def set_max_query_string_length(self, value: int) -> "ObservabilityConfig":
        self.max_query_string_length = value
        return self

    def set_max_parameter_value_length(self, value: int) -> "ObservabilityConfig":
        self.max_parameter_value_length = value
        return self

    def as_dict(self) -> "dict[str, int]":
        return {name: getattr(self, name) for name in OBSERVABILITY_CONFIG_FIELDS}

    def copy(self) -> "ObservabilityConfig":
        """Return an independent copy with the current values."""
        return type(self)(**self.as_dict())

    def replace(self, **kwargs: Any) -> "ObservabilityConfig":
        """Return a new configuration with some fields changed.

        Args:
            **kwargs: Fields to update

        Raises:
            TypeError: If a keyword is not a configuration field.
            ImproperConfigurationError: If a value is out of range.

        Returns:
            New ObservabilityConfig instance; ``self`` is not modified.
        """
        for key in kwargs:
            if key not in OBSERVABILITY_CONFIG_FIELDS:
                msg = f"{key!r} is not a field in {type(self).__name__}"
                raise TypeError(msg)
        current_kwargs = self.as_dict()
        current_kwargs.update(kwargs)
        return type(self)(**current_kwargs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObservabilityConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self.as_dict().items())
        return f"{type(self).__name__}({fields})"
