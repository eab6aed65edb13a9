"""Summary of an executed bulk write."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BulkResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    acknowledged: bool = Field(default=True, description="Write was acknowledged by the server")
    inserted_count: int = Field(default=0, ge=0)
    matched_count: int = Field(default=0, ge=0)
    modified_count: int = Field(default=0, ge=0)
    deleted_count: int = Field(default=0, ge=0)
    upserted_count: int = Field(default=0, ge=0)
    upserted_ids: dict[int, Any] = Field(default_factory=dict, description="Operation index -> upserted _id")
