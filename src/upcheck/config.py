# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for upcheck."""

import os
from dataclasses import dataclass

from .errors import ConfigurationError
from .version import __version__

DEFAULT_USER_AGENT = f"upcheck/{__version__}"
DEFAULT_WORKERS = 4
DEFAULT_TIMEOUT = 5
DEFAULT_MAX_RETRIES = 3


def parse_count(raw: str | None, *, default: int, name: str) -> int:
    """
    Parse a non-negative integer option.

    Empty or missing input selects ``default``; anything else that is not a
    non-negative integer raises ConfigurationError.
    """
    if raw is None or not raw.strip():
        return default
    text = raw.strip()
    try:
        value = int(text)
    except ValueError:
        raise ConfigurationError(f"{name} must be a whole number, got {text!r}") from None
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value}")
    return value


def _int_env(name: str, default: int) -> int:
    return parse_count(os.getenv(name), default=default, name=name)


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ProbeSettings:
    """Run-wide probe configuration, built once at startup."""

    workers: int = DEFAULT_WORKERS
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        if self.workers < 0:
            raise ConfigurationError(f"workers must not be negative, got {self.workers}")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        if self.max_retries < 0:
            raise ConfigurationError(f"max_retries must not be negative, got {self.max_retries}")

    @property
    def concurrency_limit(self) -> int | None:
        """Bound on in-flight probes; ``None`` when unbounded (workers == 0)."""
        return self.workers or None

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            workers=_int_env("UPCHECK_WORKERS", DEFAULT_WORKERS),
            timeout=_int_env("UPCHECK_TIMEOUT", DEFAULT_TIMEOUT),
            max_retries=_int_env("UPCHECK_RETRIES", DEFAULT_MAX_RETRIES),
            user_agent=os.getenv("UPCHECK_USER_AGENT", DEFAULT_USER_AGENT),
            allow_redirects=_bool_env("UPCHECK_REDIRECTS", True),
            verify_ssl=_bool_env("UPCHECK_VERIFY_SSL", True),
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()
