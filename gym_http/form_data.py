"""
Form body construction for push_data_async.

A body is either a string, sent verbatim, or a set of named fields joined as
``name=value`` pairs with ``&``. Names and values are NOT percent-escaped:
callers that need reserved characters must escape them first or pass a
pre-built string.
"""

from __future__ import annotations

import codecs
import re
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel

from gym_http.config import get_settings
from gym_http.errors import (
    ArgumentNullError,
    EmptyFormDataError,
    UnsupportedFormDataError,
)

FormFields = Union[Mapping[str, Any], Iterable[tuple[str, Any]], BaseModel]
FormData = Union[str, FormFields]


def resolve_encoding(encoding: Optional[str]) -> str:
    """Return the canonical codec name, falling back to the configured default.

    Raises LookupError for names the codec registry does not know.
    """
    return codecs.lookup(encoding or get_settings().default_encoding).name


# Codec registry names that differ from their IANA preferred charset label
_WEB_CHARSETS = {
    "ascii": "us-ascii",
    "euc_jp": "euc-jp",
    "euc_kr": "euc-kr",
    "iso2022_jp": "iso-2022-jp",
    "iso2022_kr": "iso-2022-kr",
    "mac-roman": "macintosh",
    "utf-16-le": "utf-16le",
    "utf-16-be": "utf-16be",
    "utf-32-le": "utf-32le",
    "utf-32-be": "utf-32be",
}

_ISO8859 = re.compile(r"iso8859-(\d+)")
_WINDOWS_CODEPAGE = re.compile(r"cp(125\d)")


def charset_name(encoding: Optional[str]) -> str:
    """Return the IANA charset label for ``encoding``, e.g. for Content-Type.

    ``latin-1`` becomes ``iso-8859-1`` and ``cp1252`` becomes ``windows-1252``;
    codecs whose registry name is already the web label pass through.
    """
    codec = resolve_encoding(encoding)
    if match := _ISO8859.fullmatch(codec):
        return f"iso-8859-{match.group(1)}"
    if match := _WINDOWS_CODEPAGE.fullmatch(codec):
        return f"windows-{match.group(1)}"
    return _WEB_CHARSETS.get(codec, codec)


def _field_value(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return ""
    return str(value)


def _iter_fields(data: FormFields) -> list[tuple[str, Any]]:
    if isinstance(data, BaseModel):
        return list(data.model_dump().items())
    if isinstance(data, Mapping):
        return list(data.items())
    if isinstance(data, (bytes, bytearray, memoryview)) or not isinstance(
        data, Iterable
    ):
        raise UnsupportedFormDataError(
            f"cannot build form fields from {type(data).__name__}",
            field="data",
        )

    fields = []
    for item in data:
        pair = (
            tuple(item)
            if isinstance(item, Iterable) and not isinstance(item, (str, bytes))
            else ()
        )
        if len(pair) != 2:
            raise UnsupportedFormDataError(
                "form field pairs must be (name, value) tuples",
                field="data",
                details={"item": repr(item)},
            )
        fields.append(pair)
    return fields


def encode_form_data(data: Optional[FormData]) -> str:
    """
    Build the form body string for ``data``.

    Args:
        data: A string (used as-is), a mapping, an iterable of (name, value)
            pairs or a pydantic model. Field order is insertion, pair or
            declaration order respectively.

    Returns:
        The body text, e.g. ``"name=x&age=1"``.

    Raises:
        ArgumentNullError: data is None.
        EmptyFormDataError: data has no fields.
        UnsupportedFormDataError: data is not a string or named fields.
    """
    if data is None:
        raise ArgumentNullError("data")
    if isinstance(data, str):
        return data

    fields = _iter_fields(data)
    if not fields:
        raise EmptyFormDataError("form data has no fields to send", field="data")

    return "&".join(f"{name}={_field_value(value)}" for name, value in fields)
