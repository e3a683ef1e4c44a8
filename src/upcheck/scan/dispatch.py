# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Concurrent dispatch of probe units onto a bounded worker pool."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from ..config import ProbeSettings, load_probe_settings
from ..errors import ErrorCategory, describe_failure
from ..http.client import HttpClient
from ..http.retry import RetryResult, attempt_with_retry
from ..models.probe import Failure, ProbeResult
from .channel import ResultChannel

logger = logging.getLogger(__name__)

RetryFn = Callable[..., RetryResult]


def _crash_result(target: str, exc: BaseException | None, elapsed: float) -> ProbeResult:
    if exc is None:
        message = "probe crashed: unit exited without reporting"
    else:
        message = describe_failure(exc, ErrorCategory.CRASH)
    return ProbeResult(
        target=target,
        outcome=Failure(message=message, category=ErrorCategory.CRASH),
        elapsed=elapsed,
        attempts=0,
    )


class _DispatchRun:
    """Bookkeeping for one dispatch call: every index is reported exactly once."""

    def __init__(self, targets: list[str], channel: ResultChannel):
        self.targets = targets
        self.channel = channel
        self._lock = threading.Lock()
        self._reported: set[int] = set()

    def emit(self, index: int, result: ProbeResult) -> bool:
        with self._lock:
            if index in self._reported:
                return False
            self._reported.add(index)
        self.channel.send(result)
        return True

    def unreported(self) -> list[int]:
        with self._lock:
            return [idx for idx in range(len(self.targets)) if idx not in self._reported]


class Dispatcher:
    """
    Runs one probe unit per target and funnels results into a ResultChannel.

    At most ``settings.concurrency_limit`` units execute at once; with no limit
    each target gets its own worker. The channel is closed once every target
    has reported, which is the consumer's signal to stop draining.
    """

    def __init__(
        self,
        client: HttpClient,
        settings: ProbeSettings | None = None,
        *,
        retry_fn: RetryFn = attempt_with_retry,
    ):
        self.client = client
        self.settings = settings or load_probe_settings()
        self._retry_fn = retry_fn

    def pool_size(self, target_count: int) -> int:
        limit = self.settings.concurrency_limit
        size = target_count if limit is None else min(limit, target_count)
        return max(1, size)

    def dispatch(self, targets: Sequence[str]) -> ResultChannel:
        """Start probing in the background and return the channel results arrive on."""
        run = _DispatchRun(list(targets), ResultChannel())
        driver = threading.Thread(target=self._drive, args=(run,), name="upcheck-dispatcher", daemon=True)
        driver.start()
        return run.channel

    def _drive(self, run: _DispatchRun) -> None:
        try:
            if run.targets:
                with ThreadPoolExecutor(
                    max_workers=self.pool_size(len(run.targets)),
                    thread_name_prefix="upcheck-probe",
                ) as pool:
                    for index, target in enumerate(run.targets):
                        try:
                            pool.submit(self._run_unit, run, index, target)
                        except Exception as exc:  # noqa: BLE001
                            logger.exception("Could not schedule probe for %s", target)
                            run.emit(index, _crash_result(target, exc, 0.0))
        except Exception:  # noqa: BLE001
            logger.exception("Dispatcher failed while waiting for probe units")
        finally:
            for index in run.unreported():
                logger.error("Probe unit for %s never reported; recording a failure", run.targets[index])
                run.emit(index, _crash_result(run.targets[index], None, 0.0))
            run.channel.close()

    def _run_unit(self, run: _DispatchRun, index: int, target: str) -> None:
        start = time.monotonic()
        try:
            retried = self._retry_fn(
                self.client,
                target,
                timeout=self.settings.timeout,
                retry_budget=self.settings.max_retries,
            )
            result = ProbeResult(
                target=target,
                outcome=retried.outcome,
                elapsed=retried.elapsed,
                attempts=retried.attempts,
            )
        except Exception as exc:  # noqa: BLE001
            logger.exception("Probe unit for %s crashed: %s", target, exc)
            result = _crash_result(target, exc, time.monotonic() - start)
        run.emit(index, result)
