"""
NocoDB HTTP client helpers.

Used endpoint:
- GET {base_url}{table_id}/records?limit=&offset=  -> {"list": [...], "pageInfo": {...}}

Older NocoDB versions answer with {"records": [...]} instead of {"list": [...]}.
"""

from __future__ import annotations

from typing import Any

import httpx


# NocoDB failures are explicit and separable from other runtime errors.
class NocoDBError(RuntimeError):
    pass


class UpstreamStatusError(NocoDBError):
    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"NocoDB request failed: {status_code} {body}".strip())
        self.status_code = status_code
        self.body = body


def _client(*, timeout_s: float, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    # Moved or http->https NocoDB hosts answer with a redirect first.
    return httpx.AsyncClient(timeout=timeout_s, follow_redirects=True, transport=transport)


def records_url(base_url: str, table_id: str) -> str:
    # The base URL is a prefix (e.g. ".../api/v2/tables/"), not a path root.
    return f"{base_url}{table_id}/records"


def extract_records(data: Any) -> list[dict[str, Any]]:
    if not isinstance(data, dict):
        return []
    records = data.get("list")
    if records is None:
        records = data.get("records")
    return records if isinstance(records, list) else []


async def list_records(
    *,
    base_url: str,
    table_id: str,
    token: str,
    limit: int,
    offset: int = 0,
    timeout_s: float = 30.0,
) -> list[dict[str, Any]]:
    """
    Fetch one page of records from a NocoDB table.
    """
    url = records_url(base_url, table_id)
    try:
        async with _client(timeout_s=timeout_s) as client:
            resp = await client.get(
                url,
                params={"limit": limit, "offset": offset},
                headers={
                    "xc-token": token,
                    "Content-Type": "application/json",
                },
            )
    except httpx.HTTPError as exc:
        raise NocoDBError(f"NocoDB request failed: {exc}") from exc

    if not resp.is_success:
        # Avoid dumping huge bodies; include a small snippet.
        raise UpstreamStatusError(resp.status_code, resp.text[:300])

    try:
        data = resp.json()
    except ValueError as exc:
        raise NocoDBError("NocoDB returned a non-JSON body.") from exc

    return extract_records(data)
