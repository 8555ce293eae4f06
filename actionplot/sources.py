"""Opening timeline CSV text from a local file or over HTTP."""

from __future__ import annotations

import io
from typing import TextIO
from urllib.parse import urlsplit

import requests

_HTTP_SCHEMES = ("http", "https")
_REQUEST_TIMEOUT = 30


class SourceError(Exception):
    """A source of CSV text could not be opened."""


def create_file_reader(path: str) -> TextIO:
    """Open a local file as UTF-8 text ready for CSV reading."""
    try:
        return open(path, encoding="utf-8", newline="")
    except OSError as exc:
        raise SourceError(f"IO error: {exc}") from exc


def create_http_reader(url: str) -> TextIO:
    """Fetch the body at the URL and return it as UTF-8 text.

    Raises SourceError when the request fails or the status is not 2xx.
    """
    try:
        response = requests.get(url, timeout=_REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        raise SourceError(f"Request error: {exc}") from exc

    if not 200 <= response.status_code < 300:
        raise SourceError(f"HTTP status error: {response.status_code} {response.reason or ''}".rstrip())

    return io.TextIOWrapper(io.BytesIO(response.content), encoding="utf-8", newline="")


def _is_http_url(src: str) -> bool:
    parts = urlsplit(src)
    return parts.scheme in _HTTP_SCHEMES and bool(parts.netloc)


def create_reader(src: str) -> TextIO:
    """Open ``src`` over HTTP when it is an http(s) URL, otherwise as a file path."""
    if _is_http_url(src):
        try:
            return create_http_reader(src)
        except SourceError as exc:
            raise SourceError(f"Error creating HTTP reader: {exc}") from exc
    try:
        return create_file_reader(src)
    except SourceError as exc:
        raise SourceError(f"Error creating file reader: {exc}") from exc