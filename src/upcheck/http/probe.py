# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-attempt reachability probe."""

from __future__ import annotations

import logging

from ..errors import ErrorCategory, categorize_exception, describe_failure
from ..models.probe import Failure, Outcome, Success
from .client import HttpClient
from .models import HttpRequest

logger = logging.getLogger(__name__)


def probe(client: HttpClient, target: str, timeout: float) -> Outcome:
    """
    Issue one GET against ``target`` bounded by ``timeout``.

    Any HTTP answer counts as reachable, including 3xx/4xx/5xx. Transport
    failures and exceptions escaping the client become a Failure; nothing is
    raised and nothing is retried here.
    """
    try:
        response = client.request(HttpRequest(url=target, method="GET", timeout=timeout))
    except Exception as exc:  # noqa: BLE001
        category = categorize_exception(exc)
        logger.debug("Probe of %s raised %s", target, type(exc).__name__)
        return Failure(message=describe_failure(exc, category), category=category)

    if response.status_code is not None:
        return Success(status_code=response.status_code)

    return Failure(
        message=response.error_message or "no response received",
        category=response.error_category or ErrorCategory.UNKNOWN_ERROR,
    )
