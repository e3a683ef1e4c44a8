# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe outcome and result models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

from ..errors import ErrorCategory

Verdict = Union[tuple[Literal["up"], int, float], tuple[Literal["down"], str, float]]


@dataclass(frozen=True)
class Success:
    """The target answered with an HTTP status, whatever its class."""

    status_code: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """No HTTP response could be obtained."""

    message: str
    category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success, Failure]


@dataclass(frozen=True)
class ProbeResult:
    """Final, retry-resolved outcome for one target."""

    target: str
    outcome: Outcome
    elapsed: float
    attempts: int = 1

    @property
    def is_up(self) -> bool:
        return isinstance(self.outcome, Success)

    def verdict(self) -> Verdict:
        if isinstance(self.outcome, Success):
            return ("up", self.outcome.status_code, self.elapsed)
        return ("down", self.outcome.message, self.elapsed)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "target": self.target,
            "status": "up" if self.is_up else "down",
            "elapsed": round(self.elapsed, 6),
            "attempts": self.attempts,
        }
        if isinstance(self.outcome, Success):
            data["status_code"] = self.outcome.status_code
        else:
            data["error"] = self.outcome.message
            data["error_category"] = self.outcome.category.value
        return data
