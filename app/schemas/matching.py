from __future__ import annotations

from pydantic import BaseModel, Field

from app.schemas.user import UserPublic


class TopicMatchesResponse(BaseModel):
    mode: str
    requester_topics: list[str] = Field(default_factory=list)
    # Keys keep the requester's topic order.
    matches: dict[str, list[UserPublic]] = Field(default_factory=dict)
    total_users: int = 0
