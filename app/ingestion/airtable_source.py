"""Airtable table source implementation."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from app.core.config import AirtableConfig
from app.core.errors import FetchError
from app.core.logging import get_logger
from app.schemas.raw import RawRecord, TableQuery
from .base import BaseTableSource

log = get_logger("ingestion.airtable")

SORT_PARAMS = {"sort[0][field]": "order", "sort[0][direction]": "asc"}
DEFAULT_TIMEOUT = 15.0


class AirtableSource(BaseTableSource):
    """Reads whole tables from one Airtable base.

    A shared client can be injected so several reads reuse one connection
    pool; otherwise each fetch opens and closes its own client.
    """

    name = "airtable"

    def __init__(
        self,
        config: AirtableConfig,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.config = config
        self.client = client
        self.timeout = timeout

    def table_url(self, table: str) -> str:
        return f"{self.config.api_url}/{self.config.base_id}/{table}"

    async def fetch(self, query: TableQuery) -> List[RawRecord]:
        url = self.table_url(query.table)
        params = dict(SORT_PARAMS) if query.sort else None
        headers = {"Authorization": f"Bearer {self.config.api_key}"}

        try:
            if self.client is not None:
                resp = await self.client.get(url, params=params, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.get(url, params=params, headers=headers)
        except httpx.HTTPError as exc:
            log.bind(table=query.table).error(f"Airtable transport error: {exc!r}")
            raise FetchError(query.table, f"Connection error: {exc}") from exc

        if not resp.is_success:
            message = self._error_message(resp)
            log.bind(table=query.table).error(f"Airtable fetch error: {message}")
            raise FetchError(query.table, message, status_code=resp.status_code)

        records = self._extract_records(query.table, resp)
        log.debug(f"Fetched {len(records)} records from {query.table} (sorted={query.sort})")
        return records

    @staticmethod
    def _error_message(resp: httpx.Response) -> str:
        """Best available diagnostic for a failed read.

        The body is decoded defensively: a non-JSON body degrades to a
        status-based message instead of hiding the HTTP failure.
        """
        fallback = f"HTTP {resp.status_code} {resp.reason_phrase}".strip()
        try:
            body = resp.json()
        except ValueError:
            return f"Airtable returned a non-JSON error: {resp.reason_phrase or fallback}"

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            return error.get("message") or error.get("type") or fallback
        if isinstance(error, str) and error:
            return error
        return fallback

    @staticmethod
    def _extract_records(table: str, resp: httpx.Response) -> List[RawRecord]:
        try:
            data: Any = resp.json()
        except ValueError as exc:
            raise FetchError(table, "Airtable returned a non-JSON response", resp.status_code) from exc

        records = data.get("records") if isinstance(data, dict) else None
        if not isinstance(records, list):
            raise FetchError(table, "Airtable response is missing a 'records' list", resp.status_code)

        results: List[Dict[str, Any]] = []
        for rec in records:
            fields = rec.get("fields") if isinstance(rec, dict) else None
            results.append(dict(fields) if isinstance(fields, dict) else {})
        return results
