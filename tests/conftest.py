# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_upcheck_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("UPCHECK_"):
            monkeypatch.delenv(name, raising=False)
