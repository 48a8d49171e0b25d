"""Parser configuration loaded from environment variables.

Defaults follow the Osmosis polygon filter format. Alternate marker
conventions can be supplied directly or through the environment.

Fail-fast validation:
    ``from_env()`` (and ``validated()``) raise ``ConfigValidationError``
    if a marker is empty or the closure precision is out of range.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from osmosis_geojson.core.constants import (
    DEFAULT_CLOSURE_PRECISION_DIGITS,
    DEFAULT_END_MARKER,
    DEFAULT_SUBTRACT_MARKER,
    MAX_CLOSURE_PRECISION_DIGITS,
)
from osmosis_geojson.core.exceptions import ConversionError


class ConfigValidationError(ConversionError):
    """Raised when configuration values are invalid.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable parser configuration.

    Attributes:
        end_marker: Line that terminates a ring and, repeated, the file.
        subtract_marker: Ring-header prefix marking the ring as a hole.
        closure_precision_digits: Fractional digits compared when checking
            whether a ring's first and last positions coincide.
    """

    end_marker: str = DEFAULT_END_MARKER
    subtract_marker: str = DEFAULT_SUBTRACT_MARKER
    closure_precision_digits: int = DEFAULT_CLOSURE_PRECISION_DIGITS

    @classmethod
    def from_env(cls) -> ParserConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or empty.
            ValueError: If ``POLY_CLOSURE_PRECISION_DIGITS`` is not an integer.
        """
        config = cls(
            end_marker=os.getenv("POLY_END_MARKER", DEFAULT_END_MARKER),
            subtract_marker=os.getenv("POLY_SUBTRACT_MARKER", DEFAULT_SUBTRACT_MARKER),
            closure_precision_digits=int(
                os.getenv(
                    "POLY_CLOSURE_PRECISION_DIGITS",
                    str(DEFAULT_CLOSURE_PRECISION_DIGITS),
                )
            ),
        )
        return config.validated()

    def validated(self) -> ParserConfig:
        """Return ``self`` after checking value ranges."""
        _validate(self)
        return self


def _validate(config: ParserConfig) -> None:
    """Validate configuration values.  Raises ``ConfigValidationError``."""
    if not config.end_marker.strip():
        raise ConfigValidationError(
            "POLY_END_MARKER",
            config.end_marker,
            "must not be empty",
        )

    if not config.subtract_marker:
        raise ConfigValidationError(
            "POLY_SUBTRACT_MARKER",
            config.subtract_marker,
            "must not be empty",
        )

    if config.end_marker.strip().startswith(config.subtract_marker):
        raise ConfigValidationError(
            "POLY_SUBTRACT_MARKER",
            config.subtract_marker,
            f"must not prefix the end marker {config.end_marker!r}",
        )

    if not 0 <= config.closure_precision_digits <= MAX_CLOSURE_PRECISION_DIGITS:
        raise ConfigValidationError(
            "POLY_CLOSURE_PRECISION_DIGITS",
            config.closure_precision_digits,
            f"must be between 0 and {MAX_CLOSURE_PRECISION_DIGITS}",
        )
