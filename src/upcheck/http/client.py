# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""The request seam between probe workers and the network."""

from typing import Protocol

from ..config import ProbeSettings, load_probe_settings
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """
    One client instance is shared by all workers of a run, so ``request`` is
    called concurrently and must not raise for transport failures: those come
    back as an HttpResponse with ``ok=False``.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None: ...


def create_default_http_client(settings: ProbeSettings | None = None) -> HttpClient:
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_probe_settings())
