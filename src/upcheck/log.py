# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Logging setup for the upcheck command line.

Worker threads log through module loggers under ``upcheck.*``; the thread
name is part of the format so interleaved retries can be told apart.
``UPCHECK_LOG_LEVEL`` picks the level when no explicit one is passed.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "UPCHECK_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s [%(threadName)s] %(name)s: %(message)s"


def resolve_log_level(level: str | None = None) -> int:
    name = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)


__all__ = ["resolve_log_level", "setup_logging"]
