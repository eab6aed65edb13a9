"""Index definition used when bootstrapping a collection."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class IndexStructure(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: StrictStr = Field(..., min_length=1, max_length=128, description="Index name")
    spec: dict[str, Literal[1, -1]] = Field(..., min_length=1, description="Key specification (1 or -1 per key)")
    options: dict[str, Any] | None = Field(default=None, min_length=1, description="Extra create_index options")
