"""Unit tests for the HttpExtensionError hierarchy."""

import pytest

from gym_http.errors import (
    INVALID_CAST_MESSAGE,
    ArgumentNullError,
    EmptyFormDataError,
    HttpExtensionError,
    InvalidCastError,
    InvalidMethodError,
    UnsupportedFormDataError,
)


class TestErrorSubclasses:
    @pytest.mark.parametrize(
        "cls, builtin, code",
        [
            (InvalidMethodError, ValueError, "invalid_method"),
            (EmptyFormDataError, ValueError, "empty_form_data"),
            (UnsupportedFormDataError, TypeError, "unsupported_form_data"),
        ],
        ids=["invalid_method", "empty_form_data", "unsupported_form_data"],
    )
    def test_codes_and_bases(self, cls, builtin, code):
        e = cls("boom")
        assert isinstance(e, HttpExtensionError)
        assert isinstance(e, builtin)
        assert e.error_code == code
        assert e.message == "boom"

    def test_argument_null_names_parameter(self):
        e = ArgumentNullError("data")
        assert isinstance(e, ValueError)
        assert e.param_name == "data"
        assert e.field == "data"
        assert "data" in str(e)
        assert e.error_code == "argument_null"

    def test_invalid_cast_fixed_message(self):
        e = InvalidCastError()
        assert isinstance(e, TypeError)
        assert str(e) == INVALID_CAST_MESSAGE
        assert str(e) == "当前的 WebResponse 对象不支持对 HttpWebResponse 类型的转换"
        assert e.error_code == "invalid_cast"


class TestErrorToDict:
    def test_basic(self):
        e = InvalidMethodError("bad verb")
        assert e.to_dict() == {"error": "bad verb", "code": "invalid_method"}

    @pytest.mark.parametrize(
        "kwargs, key, value",
        [
            ({"field": "method"}, "field", "method"),
            ({"details": {"item": "'x'"}}, "details", {"item": "'x'"}),
        ],
        ids=["with_field", "with_details"],
    )
    def test_optional_key_present(self, kwargs, key, value):
        e = UnsupportedFormDataError("invalid", **kwargs)
        assert e.to_dict()[key] == value

    def test_no_optional_keys_when_absent(self):
        d = EmptyFormDataError("empty").to_dict()
        assert "field" not in d
        assert "details" not in d
