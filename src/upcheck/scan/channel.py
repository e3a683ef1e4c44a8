# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Multi-producer/single-consumer result channel."""

from __future__ import annotations

import queue
from collections.abc import Iterator

from ..models.probe import ProbeResult

_CLOSED = object()


class ResultChannel:
    """
    Thread-safe channel carrying ProbeResults from many workers to one reader.

    Iterating blocks until the next result arrives and stops once ``close()``
    has been called and every result sent before it has been drained.
    """

    def __init__(self) -> None:
        self._queue: queue.Queue[object] = queue.Queue()

    def send(self, result: ProbeResult) -> None:
        self._queue.put(result)

    def close(self) -> None:
        self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[ProbeResult]:
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                return
            yield item  # type: ignore[misc]
