from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class JobCreate(BaseModel):
    # Stored as sent: description, min_price, max_price and the rest pass through
    model_config = ConfigDict(extra="allow")

    title: str | None = None
    category: str | None = None
    deadline: str | None = None
    # Normally {"email", "name", "photo"}; jobs are listed by buyer.email
    buyer: Any = None
    bid_count: int = Field(0, ge=0)


class JobUpdate(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str | None = None
    category: str | None = None
    deadline: str | None = None
    buyer: Any = None
    # The default is not validated, so an explicit null is rejected
    bid_count: int = Field(None, ge=0)
