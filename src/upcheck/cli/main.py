# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""upcheck CLI."""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from collections.abc import Callable
from typing import Any

from ..config import ProbeSettings, load_probe_settings, parse_count
from ..errors import ConfigurationError
from ..log import setup_logging
from ..models import ProbeResult, ScanReport
from ..runtime import UpCheck
from ..targets import DEFAULT_TARGETS_FILE, read_targets

_PROMPTS: tuple[tuple[str, str, str], ...] = (
    ("workers", "number of worker threads", "Please enter the number of worker threads (press Enter to use default {default} threads):"),
    ("timeout", "timeout", "Please enter the timeout duration in seconds (press Enter to use default {default} seconds):"),
    ("max_retries", "maximum retries", "Please enter the maximum retries per website (press Enter to use default {default} retries):"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Concurrent HTTP endpoint availability checker")
    parser.add_argument(
        "targets_file",
        nargs="?",
        default=DEFAULT_TARGETS_FILE,
        help=f"File with one URL per line (default: {DEFAULT_TARGETS_FILE})",
    )
    parser.add_argument("--workers", help="Maximum probes in flight at once; 0 means one per target")
    parser.add_argument("--timeout", help="Per-attempt timeout in seconds")
    parser.add_argument("--retries", help="Maximum re-attempts after a failed probe")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Prompt for workers, timeout and retries before probing",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly lines",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument(
        "--no-redirects",
        action="store_true",
        help="Report redirect responses instead of following them",
    )
    parser.add_argument("--log-level", help="Logging level (default: $UPCHECK_LOG_LEVEL or WARNING)")
    return parser


def prompt_settings(
    settings: ProbeSettings,
    *,
    input_fn: Callable[[str], str] = input,
) -> ProbeSettings:
    """Ask for the numeric options one by one; an empty answer keeps the current value."""
    overrides: dict[str, int] = {}
    for field_name, label, prompt in _PROMPTS:
        default = getattr(settings, field_name)
        print(prompt.format(default=default))
        overrides[field_name] = parse_count(input_fn(""), default=default, name=label)
    return dataclasses.replace(settings, **overrides)


def resolve_settings(args: argparse.Namespace, *, input_fn: Callable[[str], str] = input) -> ProbeSettings:
    settings = load_probe_settings()
    settings = dataclasses.replace(
        settings,
        workers=parse_count(args.workers, default=settings.workers, name="--workers"),
        timeout=parse_count(args.timeout, default=settings.timeout, name="--timeout"),
        max_retries=parse_count(args.retries, default=settings.max_retries, name="--retries"),
    )
    if args.ignore_ssl_errors:
        settings = dataclasses.replace(settings, verify_ssl=False)
    if args.no_redirects:
        settings = dataclasses.replace(settings, allow_redirects=False)
    if args.interactive:
        settings = prompt_settings(settings, input_fn=input_fn)
    return settings


def format_elapsed(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.2f}ms"
    return f"{seconds:.2f}s"


def format_result(result: ProbeResult) -> str:
    status, detail, elapsed = result.verdict()
    if status == "up":
        return f"The website {result.target} is up! Status code: {detail}, Response time: {format_elapsed(elapsed)}"
    return f"The website {result.target} is down! Error: {detail}, Response time: {format_elapsed(elapsed)}"


def _print_json(data: dict[str, Any] | Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(report: ScanReport) -> None:
    for result in report.results:
        print(format_result(result))
    print(f"[upcheck] {report.up} up, {report.down} down, {report.total} total in {format_elapsed(report.duration)}")


def main(argv: list[str] | None = None, *, input_fn: Callable[[str], str] = input) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        targets = read_targets(args.targets_file)
        settings = resolve_settings(args, input_fn=input_fn)
    except ConfigurationError as exc:
        print(f"upcheck: configuration error: {exc}", file=sys.stderr)
        return 2

    print(f"Checking {len(targets)} websites...", file=sys.stderr)
    with UpCheck(settings=settings) as checker:
        report = checker.check(targets)

    if args.json:
        _print_json(report)
    else:
        _pretty_print(report)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
