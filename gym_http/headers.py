"""
Named HTTP headers for the header setters.

RequestHeader lists the headers a client sends; ResponseHeader lists the
headers a server sends. Values are the wire names, so either enum member or
a plain string can be handed to httpx.Headers.
"""

from enum import Enum
from typing import Union


class RequestHeader(Enum):
    """Headers that may appear on an HTTP request"""

    CACHE_CONTROL = "Cache-Control"
    CONNECTION = "Connection"
    DATE = "Date"
    KEEP_ALIVE = "Keep-Alive"
    PRAGMA = "Pragma"
    TRAILER = "Trailer"
    TRANSFER_ENCODING = "Transfer-Encoding"
    UPGRADE = "Upgrade"
    VIA = "Via"
    WARNING = "Warning"
    ALLOW = "Allow"
    CONTENT_LENGTH = "Content-Length"
    CONTENT_TYPE = "Content-Type"
    CONTENT_ENCODING = "Content-Encoding"
    CONTENT_LANGUAGE = "Content-Language"
    CONTENT_LOCATION = "Content-Location"
    CONTENT_MD5 = "Content-MD5"
    CONTENT_RANGE = "Content-Range"
    EXPIRES = "Expires"
    LAST_MODIFIED = "Last-Modified"
    ACCEPT = "Accept"
    ACCEPT_CHARSET = "Accept-Charset"
    ACCEPT_ENCODING = "Accept-Encoding"
    ACCEPT_LANGUAGE = "Accept-Language"
    AUTHORIZATION = "Authorization"
    COOKIE = "Cookie"
    EXPECT = "Expect"
    FROM = "From"
    HOST = "Host"
    IF_MATCH = "If-Match"
    IF_MODIFIED_SINCE = "If-Modified-Since"
    IF_NONE_MATCH = "If-None-Match"
    IF_RANGE = "If-Range"
    IF_UNMODIFIED_SINCE = "If-Unmodified-Since"
    MAX_FORWARDS = "Max-Forwards"
    PROXY_AUTHORIZATION = "Proxy-Authorization"
    REFERER = "Referer"
    RANGE = "Range"
    TE = "TE"
    TRANSLATE = "Translate"
    USER_AGENT = "User-Agent"


class ResponseHeader(Enum):
    """Headers that may appear on an HTTP response"""

    CACHE_CONTROL = "Cache-Control"
    CONNECTION = "Connection"
    DATE = "Date"
    KEEP_ALIVE = "Keep-Alive"
    PRAGMA = "Pragma"
    TRAILER = "Trailer"
    TRANSFER_ENCODING = "Transfer-Encoding"
    UPGRADE = "Upgrade"
    VIA = "Via"
    WARNING = "Warning"
    ALLOW = "Allow"
    CONTENT_LENGTH = "Content-Length"
    CONTENT_TYPE = "Content-Type"
    CONTENT_ENCODING = "Content-Encoding"
    CONTENT_LANGUAGE = "Content-Language"
    CONTENT_LOCATION = "Content-Location"
    CONTENT_MD5 = "Content-MD5"
    CONTENT_RANGE = "Content-Range"
    EXPIRES = "Expires"
    LAST_MODIFIED = "Last-Modified"
    ACCEPT_RANGES = "Accept-Ranges"
    AGE = "Age"
    ETAG = "ETag"
    LOCATION = "Location"
    PROXY_AUTHENTICATE = "Proxy-Authenticate"
    RETRY_AFTER = "Retry-After"
    SERVER = "Server"
    SET_COOKIE = "Set-Cookie"
    VARY = "Vary"
    WWW_AUTHENTICATE = "WWW-Authenticate"


HeaderName = Union[RequestHeader, ResponseHeader, str]


def header_name(header: HeaderName) -> str:
    """Return the wire name for an enum member or a plain string."""
    if isinstance(header, (RequestHeader, ResponseHeader)):
        return header.value
    return header
