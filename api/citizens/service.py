"""
Citizens service (orchestration).

This is where we:
- read NocoDB settings from the environment
- walk the table page by page (offset pagination) with a safety cap
- wrap the collected records in the response envelope
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from core import nocodb, settings

from . import schemas

logger = logging.getLogger(__name__)


def utc_timestamp(now: datetime | None = None) -> str:
    """
    ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T10:00:00.000Z.
    """
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def fetch_all_citizens(config: settings.NocoDBSettings) -> list[dict[str, Any]]:
    """
    Fetch every record of the configured table, one page at a time.

    Stops on the first short page, or once the offset reaches
    `config.max_records`. Upstream errors propagate and abort the request.
    """
    all_records: list[dict[str, Any]] = []
    offset = 0
    limit = config.page_size

    while True:
        records = await nocodb.list_records(
            base_url=config.base_url,
            table_id=config.table_id,
            token=config.token,
            limit=limit,
            offset=offset,
            timeout_s=config.timeout_s,
        )
        all_records.extend(records)

        if len(records) < limit:
            break
        offset += limit

        if offset >= config.max_records:
            logger.warning("Reached maximum records limit (%s)", config.max_records)
            break

    logger.info("Successfully fetched %s records", len(all_records))
    return all_records


async def get_citizens() -> schemas.CitizensResponse:
    config = settings.nocodb_settings()
    citizens = await fetch_all_citizens(config)
    return schemas.CitizensResponse(
        success=True,
        citizens=citizens,
        total=len(citizens),
        timestamp=utc_timestamp(),
    )
