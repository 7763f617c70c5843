"""Fluent helpers for building, sending and reading httpx requests."""

from gym_http.content_types import (
    FORM_DATA,
    FORM_URL_ENCODED,
    HTML,
    JAVASCRIPT,
    JSON,
    XML,
)
from gym_http.errors import (
    ArgumentNullError,
    EmptyFormDataError,
    HttpExtensionError,
    InvalidCastError,
    InvalidMethodError,
    UnsupportedFormDataError,
)
from gym_http.form_data import encode_form_data
from gym_http.headers import RequestHeader, ResponseHeader
from gym_http.http_extension import (
    aget_response_string,
    create_request,
    get_response_string,
    parse_method,
    push_data_async,
    set_content_type,
    set_method,
    set_request_header,
    set_response_header,
    to_http_response,
)
from gym_http.infrastructure.http_client import HttpClient

__all__ = [
    "FORM_DATA",
    "FORM_URL_ENCODED",
    "JSON",
    "XML",
    "HTML",
    "JAVASCRIPT",
    "ArgumentNullError",
    "EmptyFormDataError",
    "HttpExtensionError",
    "InvalidCastError",
    "InvalidMethodError",
    "UnsupportedFormDataError",
    "encode_form_data",
    "RequestHeader",
    "ResponseHeader",
    "aget_response_string",
    "create_request",
    "get_response_string",
    "parse_method",
    "push_data_async",
    "set_content_type",
    "set_method",
    "set_request_header",
    "set_response_header",
    "to_http_response",
    "HttpClient",
]
