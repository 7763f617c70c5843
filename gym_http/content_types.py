"""Content-type strings for common request bodies."""

FORM_DATA = "multipart/form-data"
FORM_URL_ENCODED = "application/x-www-form-urlencoded"
JSON = "application/json"
XML = "application/xml"
HTML = "application/html"
JAVASCRIPT = "application/javascript"

__all__ = [
    "FORM_DATA",
    "FORM_URL_ENCODED",
    "JSON",
    "XML",
    "HTML",
    "JAVASCRIPT",
]
