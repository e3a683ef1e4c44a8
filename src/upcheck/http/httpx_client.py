# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import socket
import threading
from contextlib import suppress
from typing import Any

import httpx

from ..config import ProbeSettings, load_probe_settings
from ..errors import ErrorCategory, categorize_exception, describe_failure
from .client import HttpClient
from .models import HttpRequest, HttpResponse

_STREAM_EVENTS = frozenset({"connection.connect_tcp.complete", "connection.start_tls.complete"})


def _shutdown_stream(stream: Any) -> None:
    sock = stream.get_extra_info("socket") if stream is not None else None
    if sock is None:
        return
    with suppress(OSError):
        sock.shutdown(socket.SHUT_RDWR)


class AttemptDeadline:
    """
    Whole-attempt deadline for one request.

    httpx timeouts apply per phase and per socket read, so a server dripping
    bytes can hold a request open indefinitely. The deadline records every
    network stream the request opens (through httpcore's ``trace`` extension)
    and shuts their sockets down once ``timeout`` seconds have passed, which
    makes the blocked read fail straight away.
    """

    def __init__(self, timeout: float):
        self.timeout = timeout
        self.expired = False
        self._lock = threading.Lock()
        self._streams: list[Any] = []
        self._timer = threading.Timer(timeout, self._expire)
        self._timer.daemon = True

    def __enter__(self) -> AttemptDeadline:
        self._timer.start()
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self._timer.cancel()

    def trace(self, event_name: str, info: dict[str, Any]) -> None:
        if event_name not in _STREAM_EVENTS:
            return
        stream = info.get("return_value")
        with self._lock:
            self._streams.append(stream)
            expired = self.expired
        if expired:
            _shutdown_stream(stream)

    def _expire(self) -> None:
        with self._lock:
            self.expired = True
            streams = list(self._streams)
        for stream in streams:
            _shutdown_stream(stream)


class HttpxClient(HttpClient):
    """
    Synchronous httpx client wrapper shared by every probe worker.

    The connection pool is sized to the worker count so that a bounded run
    never queues on the pool itself. Every attempt asks for ``Connection:
    close`` so it opens its own connection, which the attempt deadline can
    then cut.
    """

    def __init__(self, settings: ProbeSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_probe_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
            limits=httpx.Limits(
                max_connections=self.settings.concurrency_limit,
                max_keepalive_connections=self.settings.concurrency_limit,
            ),
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        headers.setdefault("Connection", "close")
        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        with AttemptDeadline(timeout) as deadline:
            try:
                # Only the status line and headers are needed; the body is never read.
                with self._client.stream(
                    request.method,
                    request.url,
                    headers=headers,
                    timeout=timeout,
                    follow_redirects=request.allow_redirects,
                    extensions={"trace": deadline.trace},
                ) as resp:
                    return HttpResponse(
                        ok=True,
                        status_code=resp.status_code,
                        headers=dict(resp.headers),
                        url=str(resp.url),
                        meta={"redirects": len(resp.history)},
                    )
            except Exception as exc:  # noqa: BLE001
                if deadline.expired:
                    return HttpResponse(
                        ok=False,
                        error_message=f"timeout: no response within {timeout}s",
                        error_type=type(exc).__name__,
                        error_category=ErrorCategory.TIMEOUT,
                    )
                category = categorize_exception(exc)
                return HttpResponse(
                    ok=False,
                    error_message=describe_failure(exc, category),
                    error_type=type(exc).__name__,
                    error_category=category,
                )

    def close(self) -> None:
        self._client.close()
