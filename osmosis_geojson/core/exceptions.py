"""Converter exception taxonomy.

Every domain exception inherits from ``ConversionError`` and carries the
stage it was raised in plus a machine-readable code, so the command-line
driver (or any embedding application) can report failures consistently.

Taxonomy categories
-------------------
- ``ValidationError``: malformed input or invalid geometry.
- ``ConfigValidationError`` (in ``core.config``): bad configuration values.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all converter errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred
            (e.g. ``"parse_poly"``, ``"validate_geometry"``).
        code: Machine-readable error code (e.g. ``"POLY_PARSE_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "conversion"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


class ValidationError(ConversionError):
    """Input or geometry validation failure."""


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------


class PolyParseError(ValidationError):
    """Raised when a polygon filter line sequence cannot be parsed.

    This is the single error type callers need to catch; subclasses only
    refine ``code`` for diagnostics.

    Attributes:
        line_number: 1-based number of the offending line, ``0`` when the
            failure is not tied to a line.
    """

    default_stage = "parse_poly"
    default_code = "POLY_PARSE_FAILED"

    def __init__(self, message: str = "", *, line_number: int = 0, **kwargs: str) -> None:
        self.line_number = line_number
        super().__init__(message, **kwargs)

    def to_error_dict(self) -> dict[str, object]:
        payload = super().to_error_dict()
        payload["line_number"] = self.line_number
        return payload


class MalformedInputError(PolyParseError):
    """An empty or absent line where content was required."""

    default_code = "POLY_MALFORMED_INPUT"


class InvalidRingClosureError(PolyParseError):
    """A ring reached its end marker with too few vertices to close."""

    default_code = "POLY_RING_INVALID"


class PolyFileNotFoundError(PolyParseError):
    """The polygon filter file does not exist."""

    default_code = "POLY_FILE_NOT_FOUND"


# ---------------------------------------------------------------------------
# Geometry validation errors
# ---------------------------------------------------------------------------


class GeometryValidationError(ValidationError):
    """A parsed feature has out-of-range coordinates or invalid topology."""

    default_stage = "validate_geometry"
    default_code = "GEOMETRY_INVALID"
