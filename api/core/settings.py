"""
Environment-backed configuration.

Values are read on every call so a warm serverless container picks up
changed environment variables without a redeploy.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_PAGE_SIZE = 100
DEFAULT_MAX_RECORDS = 10000
DEFAULT_TIMEOUT_S = 30.0


class ConfigError(RuntimeError):
    pass


def _env_str(*names: str) -> str:
    # First non-empty value wins; later names are legacy aliases.
    for name in names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def nocodb_url() -> str:
    return _env_str("NOCODB_API_URL", "NOCODB_URL")


def nocodb_table_id() -> str:
    return _env_str("NOCODB_TABLE_ID", "TABLE_ID")


def nocodb_token() -> str:
    return _env_str("NOCODB_API_TOKEN", "NOCODB_TOKEN")


def page_size() -> int:
    return _env_int("NOCODB_PAGE_SIZE", DEFAULT_PAGE_SIZE)


def max_records() -> int:
    return _env_int("NOCODB_MAX_RECORDS", DEFAULT_MAX_RECORDS)


def timeout_s() -> float:
    return _env_float("NOCODB_TIMEOUT_S", DEFAULT_TIMEOUT_S)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


@dataclass(frozen=True)
class NocoDBSettings:
    base_url: str
    table_id: str
    token: str
    page_size: int = DEFAULT_PAGE_SIZE
    max_records: int = DEFAULT_MAX_RECORDS
    timeout_s: float = DEFAULT_TIMEOUT_S


def nocodb_settings() -> NocoDBSettings:
    """
    Collect NocoDB settings, failing if URL, table id or token is missing.
    """
    base_url = nocodb_url()
    table_id = nocodb_table_id()
    token = nocodb_token()
    if not base_url or not table_id or not token:
        raise ConfigError("NocoDB credentials not configured")

    return NocoDBSettings(
        base_url=base_url,
        table_id=table_id,
        token=token,
        page_size=page_size(),
        max_records=max_records(),
        timeout_s=timeout_s(),
    )
