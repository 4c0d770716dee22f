"""Tests for conviction.core.exceptions module."""

from __future__ import annotations

import pytest

from conviction.core.exceptions import (
    ConfigException,
    ConvictionException,
    ConvictionMismatchError,
    ValidationException,
)


class TestConvictionException:
    """Tests for base ConvictionException."""

    def test_create_with_message(self):
        exc = ConvictionException("Something went wrong")
        assert str(exc) == "Something went wrong"
        assert exc.message == "Something went wrong"
        assert exc.details == {}

    def test_to_dict_class_name(self):
        exc = ConfigException("bad", missing_vars=["CONVICTION_ALPHA"])
        assert exc.to_dict() == {
            "error": "ConfigException",
            "message": "bad",
            "details": {"missing_vars": ["CONVICTION_ALPHA"]},
        }

    @pytest.mark.parametrize(
        "exc",
        [
            ConfigException("c"),
            ValidationException("v"),
            ConvictionMismatchError(1.0, 2.0),
        ],
    )
    def test_hierarchy(self, exc):
        assert isinstance(exc, ConvictionException)


class TestValidationException:
    def test_field_and_value(self):
        exc = ValidationException("bad time", field="time", value=-1)
        assert exc.details == {"field": "time", "value": "-1"}
        assert exc.field == "time"
        assert exc.value == -1


class TestConvictionMismatchError:
    def test_carries_both_values(self):
        exc = ConvictionMismatchError(1.5, 1.25)
        assert exc.embedded == 1.5
        assert exc.replayed == 1.25
        assert "1.5" in exc.message and "1.25" in exc.message
