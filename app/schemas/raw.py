"""Upstream (Airtable) request and record schemas"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

# One row reduced to its field values; record id and createdTime are dropped.
RawRecord = Dict[str, Any]


class TableQuery(BaseModel):
    """A read request for one named table"""

    model_config = ConfigDict(frozen=True)

    table: str = Field(min_length=1)
    sort: bool = False
