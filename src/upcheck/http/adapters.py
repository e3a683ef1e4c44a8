# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

import threading
from collections.abc import Sequence

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests and offline runs.

    Each URL maps to one response or a sequence of responses; a sequence is
    replayed one entry per request and its last entry repeats once exhausted.
    """

    def __init__(self, responses: dict[str, HttpResponse | Sequence[HttpResponse]] | None = None):
        self._responses: dict[str, list[HttpResponse]] = {}
        self._lock = threading.Lock()
        self.requests: list[HttpRequest] = []
        for url, response in (responses or {}).items():
            self.add(url, response)

    def add(self, url: str, response: HttpResponse | Sequence[HttpResponse]) -> None:
        scripted = [response] if isinstance(response, HttpResponse) else list(response)
        with self._lock:
            self._responses[url] = scripted

    def calls_for(self, url: str) -> int:
        with self._lock:
            return sum(1 for req in self.requests if req.url == url)

    def request(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
            scripted = self._responses.get(request.url)
            if not scripted:
                return HttpResponse(ok=False, status_code=None, error_message="No stubbed response configured")
            if len(scripted) > 1:
                return scripted.pop(0)
            return scripted[0]

    def close(self) -> None:
        return None
