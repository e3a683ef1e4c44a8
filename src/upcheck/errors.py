# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl
from collections.abc import Iterator
from enum import Enum

import httpx


class UpCheckError(Exception):
    """Base class for errors raised by upcheck."""


class ConfigurationError(UpCheckError):
    """Invalid configuration detected before any probing starts."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    SSL_ERROR = "SSL_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    INVALID_URL = "INVALID_URL"
    CRASH = "CRASH"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


_CATEGORY_LABELS: dict[ErrorCategory, str] = {
    ErrorCategory.TIMEOUT: "timeout",
    ErrorCategory.CONNECTION_ERROR: "connection error",
    ErrorCategory.DNS_ERROR: "dns resolution failure",
    ErrorCategory.SSL_ERROR: "tls error",
    ErrorCategory.PROTOCOL_ERROR: "protocol error",
    ErrorCategory.INVALID_URL: "invalid url",
    ErrorCategory.CRASH: "probe crashed",
    ErrorCategory.UNKNOWN_ERROR: "request failed",
}


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx wraps the low-level socket/ssl error, so the whole cause chain is
    inspected before falling back to the httpx class of the outer exception.
    """
    chain = list(_exception_chain(exc))

    def _any(*types: type[BaseException]) -> bool:
        return any(isinstance(item, types) for item in chain)

    if _any(httpx.TimeoutException, TimeoutError):
        return ErrorCategory.TIMEOUT
    if _any(socket.gaierror, socket.herror):
        return ErrorCategory.DNS_ERROR
    if _any(ssl.SSLError, ssl.CertificateError):
        return ErrorCategory.SSL_ERROR
    if _any(httpx.InvalidURL, httpx.UnsupportedProtocol):
        return ErrorCategory.INVALID_URL
    if _any(httpx.RemoteProtocolError, httpx.LocalProtocolError, httpx.DecodingError, httpx.TooManyRedirects):
        return ErrorCategory.PROTOCOL_ERROR
    if _any(httpx.NetworkError, httpx.ProxyError, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR
    return ErrorCategory.UNKNOWN_ERROR


def category_label(category: ErrorCategory) -> str:
    """Short user-facing label for a category."""
    return _CATEGORY_LABELS.get(category, "request failed")


def describe_failure(exc: BaseException, category: ErrorCategory | None = None) -> str:
    """Human-readable failure message: ``<label>: <detail>``."""
    label = category_label(category or categorize_exception(exc))
    detail = str(exc).strip()
    if not detail or detail.lower() == label:
        return label
    return f"{label}: {detail}"


__all__ = [
    "ConfigurationError",
    "ErrorCategory",
    "UpCheckError",
    "categorize_exception",
    "category_label",
    "describe_failure",
]
