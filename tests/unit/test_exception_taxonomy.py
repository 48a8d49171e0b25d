"""Tests for the converter exception taxonomy.

Validates:
- ConversionError base class and structured attributes
- Category classification
- ``to_error_dict()`` produces stable payload keys
- All parser and config exceptions are ConversionError subclasses
"""

from __future__ import annotations

from typing import ClassVar

from osmosis_geojson.core.config import ConfigValidationError
from osmosis_geojson.core.exceptions import (
    ConversionError,
    GeometryValidationError,
    InvalidRingClosureError,
    MalformedInputError,
    PolyFileNotFoundError,
    PolyParseError,
    ValidationError,
)


class TestConversionErrorBase:
    """ConversionError base class behavior."""

    def test_default_attributes(self) -> None:
        err = ConversionError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.category == "conversion"

    def test_custom_attributes(self) -> None:
        err = ConversionError("fail", stage="write_output", code="WRITE_FAILED")
        assert err.stage == "write_output"
        assert err.code == "WRITE_FAILED"

    def test_str_is_message(self) -> None:
        assert str(ConversionError("human-readable error")) == "human-readable error"

    def test_to_error_dict_keys(self) -> None:
        d = ConversionError("x", stage="s", code="C").to_error_dict()
        assert set(d.keys()) == {"category", "code", "stage", "message"}
        assert d["message"] == "x"


class TestParseErrors:
    """Parse errors share one generic base and refine the code."""

    SUBCLASSES: ClassVar[list[type[PolyParseError]]] = [
        MalformedInputError,
        InvalidRingClosureError,
        PolyFileNotFoundError,
    ]

    def test_subclasses_are_poly_parse_errors(self) -> None:
        for cls in self.SUBCLASSES:
            assert issubclass(cls, PolyParseError)
            assert issubclass(cls, ValidationError)

    def test_codes_are_distinct(self) -> None:
        codes = {cls.default_code for cls in [PolyParseError, *self.SUBCLASSES]}
        assert len(codes) == 4

    def test_stage_is_parse_poly(self) -> None:
        for cls in self.SUBCLASSES:
            assert cls("x").stage == "parse_poly"

    def test_line_number_in_error_dict(self) -> None:
        err = MalformedInputError("Processing terminated at line 3", line_number=3)
        d = err.to_error_dict()
        assert d["line_number"] == 3
        assert d["code"] == "POLY_MALFORMED_INPUT"
        assert d["category"] == "validation"

    def test_code_override(self) -> None:
        err = InvalidRingClosureError("x", code="CUSTOM")
        assert err.code == "CUSTOM"
        assert err.line_number == 0


class TestAllExceptionsAreConversionError:
    def test_hierarchy(self) -> None:
        for cls in (GeometryValidationError, ConfigValidationError, PolyParseError):
            assert issubclass(cls, ConversionError)

    def test_config_error_message(self) -> None:
        err = ConfigValidationError("POLY_END_MARKER", "", "must not be empty")
        assert err.message == "Invalid configuration POLY_END_MARKER='': must not be empty"
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert err.category == "conversion"
