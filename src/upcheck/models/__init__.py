# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for upcheck."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .probe import Failure, Outcome, ProbeResult, Success, Verdict
from .report import ScanReport

__all__ = [
    "Failure",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "Outcome",
    "ProbeResult",
    "ScanReport",
    "Success",
    "Verdict",
]
