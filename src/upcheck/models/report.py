# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass for batch scan reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .probe import ProbeResult


@dataclass
class ScanReport:
    results: list[ProbeResult] = field(default_factory=list)
    duration: float = 0.0

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def up(self) -> int:
        return sum(1 for result in self.results if result.is_up)

    @property
    def down(self) -> int:
        return self.total - self.up

    def verdicts(self) -> list[tuple[str, str, Any, float]]:
        return [(result.target, *result.verdict()) for result in self.results]

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "up": self.up,
            "down": self.down,
            "duration": round(self.duration, 6),
            "results": [result.to_dict() for result in self.results],
        }
