"""Collection definition used when bootstrapping a database."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .IndexStructure import IndexStructure


class CollectionStructure(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: StrictStr = Field(..., min_length=1, max_length=128, description="Collection name")
    idx: list[IndexStructure] | None = Field(default=None, description="Indexes to ensure on the collection")
