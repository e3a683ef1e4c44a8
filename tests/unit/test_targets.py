# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from upcheck.errors import ConfigurationError
from upcheck.targets import parse_targets, read_targets


def test_parse_targets_skips_blanks_and_comments_keeps_duplicates():
    lines = ["http://a.test\n", "\n", "  # staging\n", " http://b.test \n", "http://a.test"]
    assert parse_targets(lines) == ["http://a.test", "http://b.test", "http://a.test"]


def test_read_targets_from_file(tmp_path):
    path = tmp_path / "websites.txt"
    path.write_text("https://example.com\nhttp://localhost:8080/health\n", encoding="utf-8")
    assert read_targets(path) == ["https://example.com", "http://localhost:8080/health"]


def test_read_targets_missing_file_is_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError, match="Unable to read targets"):
        read_targets(tmp_path / "missing.txt")


def test_read_targets_undecodable_file_is_configuration_error(tmp_path):
    path = tmp_path / "websites.txt"
    path.write_bytes(b"http://a.test\n\xff\xfe\n")
    with pytest.raises(ConfigurationError, match="not valid UTF-8"):
        read_targets(path)
