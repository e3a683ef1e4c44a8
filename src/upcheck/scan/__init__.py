# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan orchestration exports."""

from .channel import ResultChannel
from .collect import collect
from .dispatch import Dispatcher
from .engine import ScanEngine

__all__ = ["Dispatcher", "ResultChannel", "ScanEngine", "collect"]
