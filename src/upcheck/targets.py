# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Target list loading."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .errors import ConfigurationError

DEFAULT_TARGETS_FILE = "websites.txt"


def parse_targets(lines: Iterable[str]) -> list[str]:
    """One URL per line; blank lines and ``#`` comments are skipped, duplicates kept."""
    targets: list[str] = []
    for line in lines:
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        targets.append(text)
    return targets


def read_targets(path: str | Path = DEFAULT_TARGETS_FILE) -> list[str]:
    try:
        with open(path, encoding="utf-8") as handle:
            return parse_targets(handle)
    except OSError as exc:
        raise ConfigurationError(f"Unable to read targets from {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Unable to read targets from {path}: not valid UTF-8 (byte {exc.start})") from exc
