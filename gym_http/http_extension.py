"""
Convenience helpers over httpx request and response objects.

Request helpers mutate the httpx.Request they are given and return that same
instance so calls can be chained:

    request = set_content_type(create_request(url, "post"), FORM_URL_ENCODED)
    response = await push_data_async(request, {"name": "x"}, client=client)
    text = get_response_string(response)

Nothing here owns a connection; sending goes through HttpClient or a caller
supplied httpx.AsyncClient, and transport errors propagate untouched.
"""

from __future__ import annotations

import codecs
import re
from typing import Any, Optional, Protocol, Union

import httpx

from gym_http.config import get_settings
from gym_http.errors import InvalidCastError, InvalidMethodError
from gym_http.form_data import (
    FormData,
    charset_name,
    encode_form_data,
    resolve_encoding,
)
from gym_http.headers import HeaderName, header_name
from gym_http.infrastructure.http_client import HttpClient
from gym_http.utils.logger import get_logger

log = get_logger(__name__)

# RFC 9110 token: 1*tchar
_METHOD_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

# Methods whose requests cannot carry form data
_BODYLESS_METHODS = frozenset({"GET", "HEAD"})

# Longest marks first: the UTF-32 LE mark starts with the UTF-16 LE one
_BYTE_ORDER_MARKS = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


class _Sender(Protocol):
    async def send(self, request: httpx.Request, **kwargs: Any) -> httpx.Response: ...


class _Readable(Protocol):
    def read(self) -> bytes: ...


def _decode_default(body: bytes) -> str:
    """Decode as UTF-8 unless a byte order mark says otherwise."""
    for mark, encoding in _BYTE_ORDER_MARKS:
        if body.startswith(mark):
            return body[len(mark) :].decode(encoding, errors="replace")
    return body.decode("utf-8", errors="replace")


def get_response_string(response: _Readable) -> str:
    """
    Read the whole response body and return it as text.

    Works on anything with a blocking ``read()`` returning bytes: an
    httpx.Response, a urllib response, a binary file object. The declared
    charset is ignored; the body is decoded as UTF-8 unless it starts with
    a byte order mark.
    """
    return _decode_default(response.read())


async def aget_response_string(response: httpx.Response) -> str:
    """Async counterpart of get_response_string for streamed responses."""
    return _decode_default(await response.aread())


def to_http_response(response: Any) -> httpx.Response:
    """Return ``response`` unchanged if it is an httpx.Response.

    Raises:
        InvalidCastError: for any other response object.
    """
    if isinstance(response, httpx.Response):
        return response
    raise InvalidCastError(details={"type": type(response).__name__})


def parse_method(method: str) -> str:
    """Normalize an HTTP method name to its canonical upper-case form."""
    candidate = (method or "").strip()
    if not _METHOD_TOKEN.fullmatch(candidate):
        raise InvalidMethodError(
            f"invalid HTTP method: {method!r}", field="method"
        )
    return candidate.upper()


def create_request(url: Union[httpx.URL, str], method: str = "GET") -> httpx.Request:
    """Build an empty request to start a chain of setters."""
    return httpx.Request(parse_method(method), url)


def set_content_type(
    request: httpx.Request, content_type: str, encoding: Optional[str] = None
) -> httpx.Request:
    """
    Set ``Content-Type`` to ``content_type`` with a charset parameter.

    Args:
        request: The request to update.
        content_type: A MIME type, usually one of gym_http.content_types.
        encoding: Codec name for the charset; None means the default (UTF-8).

    Returns:
        The same request.
    """
    request.headers["Content-Type"] = (
        f"{content_type}; charset={charset_name(encoding)}"
    )
    return request


def set_method(request: httpx.Request, method: str) -> httpx.Request:
    """Set the request method (GET, POST, PUT, DELETE ...)."""
    request.method = parse_method(method)
    return request


def set_request_header(
    request: httpx.Request, header: HeaderName, value: str
) -> httpx.Request:
    request.headers[header_name(header)] = value
    return request


def set_response_header(
    request: httpx.Request, header: HeaderName, value: str
) -> httpx.Request:
    request.headers[header_name(header)] = value
    return request


def _with_body(request: httpx.Request, body: bytes) -> httpx.Request:
    headers = request.headers.copy()
    headers.pop("Content-Length", None)
    headers.pop("Transfer-Encoding", None)
    return httpx.Request(
        request.method,
        request.url,
        headers=headers,
        content=body,
        extensions=request.extensions,
    )


async def push_data_async(
    request: httpx.Request,
    data: Optional[FormData],
    encoding: Optional[str] = None,
    *,
    client: Optional[_Sender] = None,
) -> httpx.Response:
    """
    Send ``data`` as the request body and return the response.

    Args:
        request: Supplies method, URL, headers and extensions for the send.
        data: A string sent verbatim, or named fields (mapping, (name, value)
            pairs, pydantic model) joined as ``name=value&name=value``.
            Nothing is percent-escaped.
        encoding: Codec used to encode the body; None means the default (UTF-8).
        client: HttpClient or httpx.AsyncClient to send with. When omitted a
            one-shot HttpClient is opened and closed around the call.

    Returns:
        The response. ``response.request`` is the request actually sent,
        carrying the encoded body.

    Raises:
        ArgumentNullError: data is None.
        EmptyFormDataError: data has no fields.
        UnsupportedFormDataError: data is neither a string nor named fields.
        InvalidMethodError: the request method is GET or HEAD, which carry no body.
        httpx.HTTPError: transport failures, unwrapped.
    """
    body_text = encode_form_data(data)
    if request.method in _BODYLESS_METHODS:
        raise InvalidMethodError(
            f"cannot send a content-body with a {request.method} request",
            field="method",
        )
    codec = resolve_encoding(encoding)
    outgoing = _with_body(request, body_text.encode(codec))

    log.debug(
        "form_data_pushed",
        method=outgoing.method,
        host=outgoing.url.host,
        path=outgoing.url.path,
        body_bytes=len(outgoing.content),
        encoding=codec,
    )

    if client is None:
        async with HttpClient(timeout=get_settings().timeout) as one_shot:
            response = await one_shot.send(outgoing)
    else:
        response = await client.send(outgoing)

    log.debug("form_data_response", status_code=response.status_code)
    return response
