# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level upcheck facade for batch availability checks."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .config import ProbeSettings, load_probe_settings
from .http.client import HttpClient, create_default_http_client
from .models import ScanReport
from .scan.engine import ScanEngine

logger = logging.getLogger(__name__)


class UpCheck:
    """
    Convenience wrapper that wires settings, a shared HTTP client and the scan engine.

    Settings are resolved once here and then passed down explicitly; nothing
    re-reads configuration while a batch is running.
    """

    def __init__(self, settings: ProbeSettings | None = None, http_client: HttpClient | None = None):
        self.settings = settings or load_probe_settings()
        self.http_client = http_client or create_default_http_client(self.settings)
        self.scan_engine = ScanEngine(self.http_client, self.settings)

    def check(self, targets: Sequence[str]) -> ScanReport:
        return self.scan_engine.run(targets)

    def close(self) -> None:
        """Release pooled connections; a client that fails to close is logged, not raised."""
        close = getattr(self.http_client, "close", None)
        if close is None:
            return
        try:
            close()
        except Exception:  # noqa: BLE001
            logger.warning("Closing the HTTP client failed", exc_info=True)

    def __enter__(self) -> UpCheck:
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()
