# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Drain a result stream into a complete result list."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..models.probe import ProbeResult


def collect(
    stream: Iterable[ProbeResult],
    *,
    on_result: Callable[[ProbeResult], None] | None = None,
) -> list[ProbeResult]:
    """Accumulate results in arrival order until the stream completes."""
    results: list[ProbeResult] = []
    for result in stream:
        results.append(result)
        if on_result is not None:
            on_result(result)
    return results
