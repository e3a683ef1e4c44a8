# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Retry policy wrapped around the single-attempt probe."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..models.probe import Failure, Outcome
from .client import HttpClient
from .probe import probe

logger = logging.getLogger(__name__)

ProbeFn = Callable[[HttpClient, str, float], Outcome]


@dataclass(frozen=True)
class RetryResult:
    outcome: Outcome
    elapsed: float
    attempts: int


def attempt_with_retry(
    client: HttpClient,
    target: str,
    *,
    timeout: float,
    retry_budget: int,
    probe_fn: ProbeFn = probe,
) -> RetryResult:
    """
    Probe ``target`` up to ``retry_budget + 1`` times, stopping at the first success.

    Retries are issued immediately, without backoff. ``elapsed`` covers every
    attempt made, failed ones included.
    """
    if retry_budget < 0:
        raise ValueError(f"retry_budget must not be negative, got {retry_budget}")

    max_attempts = retry_budget + 1
    start = time.monotonic()
    outcome = probe_fn(client, target, timeout)
    attempts = 1
    while isinstance(outcome, Failure) and attempts < max_attempts:
        logger.debug("Attempt %d/%d for %s failed: %s", attempts, max_attempts, target, outcome.message)
        outcome = probe_fn(client, target, timeout)
        attempts += 1
    elapsed = time.monotonic() - start

    if isinstance(outcome, Failure) and attempts > 1:
        logger.debug("Retries exhausted for %s after %d attempts", target, attempts)
    return RetryResult(outcome=outcome, elapsed=elapsed, attempts=attempts)
