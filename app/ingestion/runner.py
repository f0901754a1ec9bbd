"""Concurrent fan-out of table reads."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Sequence

from app.core.errors import ContentError, FetchError
from app.core.logging import get_logger
from app.schemas.raw import RawRecord, TableQuery
from .base import BaseTableSource

log = get_logger("ingestion.runner")


class TableRunner:
    """Reads several tables at once and returns them keyed by table name.

    All reads are awaited until settled. If any failed, the first failure in
    query order is raised, so the caller never sees a partial result.
    """

    def __init__(self, source: BaseTableSource):
        self.source = source

    async def run(self, queries: Sequence[TableQuery]) -> Dict[str, List[RawRecord]]:
        results = await asyncio.gather(
            *(self.source.fetch(query) for query in queries),
            return_exceptions=True,
        )

        failures: List[ContentError] = []
        aggregated: Dict[str, List[RawRecord]] = {}
        for query, result in zip(queries, results):
            if isinstance(result, ContentError):
                failures.append(result)
            elif isinstance(result, Exception):
                # Source implementations other than AirtableSource may raise anything
                failures.append(FetchError(query.table, str(result) or result.__class__.__name__))
                log.bind(table=query.table).opt(exception=result).error("Unexpected error reading table")
            elif isinstance(result, BaseException):
                raise result
            else:
                aggregated[query.table] = result

        if failures:
            for failure in failures:
                log.bind(table=failure.table or "-").error(f"Table read failed: {failure.to_dict()}")
            raise failures[0]

        log.info(
            "Fetched tables: "
            + ", ".join(f"{table}={len(records)}" for table, records in aggregated.items())
        )
        return aggregated
