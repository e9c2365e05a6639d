"""Error class hierarchy tests."""

import pytest

from pyisoduration._errors import (
    BadFormatError,
    DurationError,
    NoMonthError,
    NumericConversionError,
)


class TestDurationErrorBase:
    def test_str_returns_user_message(self):
        err = DurationError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = DurationError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = DurationError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = DurationError("user msg", wrapped=cause)
        assert err.wrapped is cause

    def test_is_exception(self):
        assert isinstance(DurationError("test"), Exception)


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        BadFormatError,
        NoMonthError,
        NumericConversionError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_duration_error(self, cls):
        assert issubclass(cls, DurationError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"

    def test_kinds_are_distinct(self):
        assert not issubclass(NoMonthError, BadFormatError)
        assert not issubclass(BadFormatError, NumericConversionError)
