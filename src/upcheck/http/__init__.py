# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .models import Headers, HttpRequest, HttpResponse
from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .httpx_client import HttpxClient
from .probe import probe
from .retry import RetryResult, attempt_with_retry

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "RetryResult",
    "StubHttpClient",
    "attempt_with_retry",
    "create_default_http_client",
    "probe",
]
