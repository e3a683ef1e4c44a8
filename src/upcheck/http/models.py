# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across upcheck."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    timeout: float | None = None
    allow_redirects: bool = True


@dataclass
class HttpResponse:
    """
    Normalized HTTP response.

    ``status_code`` is set whenever the server answered, whatever the status
    class; ``ok`` is False only when no response was obtained.
    """

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory | None = None
    meta: dict[str, Any] = field(default_factory=dict)
