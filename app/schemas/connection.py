from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ConnectionCreate(BaseModel):
    receiver_email: str = Field(min_length=1)


class ConnectionRead(BaseModel):
    id: int
    sender_email: str
    receiver_email: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
