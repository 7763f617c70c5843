"""
Error hierarchy for the HTTP helpers.

HttpExtensionError is the base for every error raised locally. Each subclass
also derives from the builtin a caller would naturally catch (ValueError for
bad arguments, TypeError for bad types).

Transport errors from httpx are never wrapped; they propagate as raised.
"""

from __future__ import annotations

from typing import Any, Optional

INVALID_CAST_MESSAGE = "当前的 WebResponse 对象不支持对 HttpWebResponse 类型的转换"


class HttpExtensionError(Exception):
    """Base error. All locally raised errors inherit from this."""

    error_code: str = "http_extension_error"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.field is not None:
            payload["field"] = self.field
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ArgumentNullError(HttpExtensionError, ValueError):
    error_code = "argument_null"

    def __init__(self, param_name: str) -> None:
        super().__init__(
            f"Value cannot be None. (Parameter '{param_name}')", field=param_name
        )
        self.param_name = param_name


class InvalidCastError(HttpExtensionError, TypeError):
    error_code = "invalid_cast"

    def __init__(self, message: str = INVALID_CAST_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class InvalidMethodError(HttpExtensionError, ValueError):
    error_code = "invalid_method"


class EmptyFormDataError(HttpExtensionError, ValueError):
    error_code = "empty_form_data"


class UnsupportedFormDataError(HttpExtensionError, TypeError):
    error_code = "unsupported_form_data"
