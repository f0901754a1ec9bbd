"""Abstract table source interface for ingestion."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from app.schemas.raw import RawRecord, TableQuery


class BaseTableSource(ABC):
    """Abstract base class for anything that can read a named table."""

    name: str

    @abstractmethod
    async def fetch(self, query: TableQuery) -> List[RawRecord]:
        """Return the table's field mappings in store order, or raise FetchError."""
