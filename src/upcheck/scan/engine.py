# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan engine: dispatch every target and collect one result per target."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from ..config import ProbeSettings, load_probe_settings
from ..http.client import HttpClient
from ..models import ProbeResult, ScanReport
from .collect import collect
from .dispatch import Dispatcher

logger = logging.getLogger(__name__)


class ScanEngine:
    """Coordinates the Dispatcher and the Collector for a single batch run."""

    def __init__(
        self,
        client: HttpClient,
        settings: ProbeSettings | None = None,
        dispatcher: Dispatcher | None = None,
    ):
        self.settings = settings or load_probe_settings()
        self.dispatcher = dispatcher or Dispatcher(client, self.settings)

    def run(self, targets: Sequence[str]) -> ScanReport:
        targets = list(targets)
        logger.info(
            "Probing %d targets (workers=%s, timeout=%ss, retries=%d)",
            len(targets),
            self.settings.concurrency_limit or "unbounded",
            self.settings.timeout,
            self.settings.max_retries,
        )
        start = time.monotonic()
        results = collect(self.dispatcher.dispatch(targets), on_result=self._log_result)
        report = ScanReport(results=results, duration=time.monotonic() - start)

        if report.total != len(targets):
            logger.error("Collected %d results for %d targets", report.total, len(targets))
        logger.info("Finished: %d up, %d down in %.2fs", report.up, report.down, report.duration)
        return report

    @staticmethod
    def _log_result(result: ProbeResult) -> None:
        status, detail, elapsed = result.verdict()
        logger.debug("%s is %s (%s) after %d attempt(s), %.3fs", result.target, status, detail, result.attempts, elapsed)
