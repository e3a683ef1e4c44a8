# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
upcheck package entrypoint.

This package probes a batch of URLs concurrently and reports, per target,
whether it answered over HTTP, with its status code or failure cause and the
cumulative latency across retries. HTTP behavior is abstracted behind an
injectable client interface, and domain objects are modeled with typed
dataclasses.
"""

from .config import ProbeSettings, load_probe_settings
from .errors import ConfigurationError, ErrorCategory, UpCheckError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    attempt_with_retry,
    create_default_http_client,
    probe,
)
from .log import setup_logging
from .models import Failure, Outcome, ProbeResult, ScanReport, Success
from .runtime import UpCheck
from .scan import Dispatcher, ResultChannel, ScanEngine, collect
from .targets import read_targets
from .version import __version__

__all__ = [
    "ConfigurationError",
    "Dispatcher",
    "ErrorCategory",
    "Failure",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "Outcome",
    "ProbeResult",
    "ProbeSettings",
    "ResultChannel",
    "ScanEngine",
    "ScanReport",
    "StubHttpClient",
    "Success",
    "UpCheck",
    "UpCheckError",
    "attempt_with_retry",
    "collect",
    "create_default_http_client",
    "load_probe_settings",
    "probe",
    "read_targets",
    "setup_logging",
    "__version__",
]
