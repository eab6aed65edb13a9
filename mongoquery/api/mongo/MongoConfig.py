"""Mongo wrapper configuration with Pydantic validation."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator

from .Protocol import Protocol
from .ReadPreferenceMode import ReadPreferenceMode


class MongoConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    debug: StrictBool = Field(default=False, description="Log connection lifecycle messages")
    pool_size: StrictInt = Field(default=5, ge=1, le=100, description="Size of the connection pool")
    host: StrictStr = Field(default="127.0.0.1:27017", min_length=1, max_length=1024, description="Host (and port)")
    user: StrictStr = Field(..., min_length=1, max_length=256, description="User to authenticate with")
    password: StrictStr = Field(..., min_length=1, max_length=256, description="Password for user")
    db: StrictStr = Field(..., min_length=1, max_length=128, description="Database to run queries against")
    auth_db: StrictStr = Field(default="admin", min_length=1, max_length=128, description="Authentication database")
    replset: StrictStr | None = Field(default=None, min_length=1, max_length=128, description="Replica set name")
    protocol: Protocol = Field(default=Protocol.STANDARD, description="Connection string protocol")
    read_preference: ReadPreferenceMode = Field(default=ReadPreferenceMode.NEAREST, description="Read preference")
    retry_reads: StrictBool = Field(default=True, description="Retry reads on transient errors")
    retry_writes: StrictBool = Field(default=True, description="Retry writes on transient errors")

    @field_validator("host", "user", "password", "db", "auth_db", "replset")
    @classmethod
    def validate_not_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("must not be blank")
        return v
