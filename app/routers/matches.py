from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.routers.dependencies import get_session_context
from app.schemas.matching import TopicMatchesResponse
from app.schemas.user import UserPublic
from app.services.errors import UserNotFoundError
from app.services.matching_service import build_topic_matches
from app.services.session_context import SessionContext


router = APIRouter(prefix="/matches", tags=["matches"])


@router.get("", response_model=TopicMatchesResponse)
def read_my_matches(
    mode: Literal["exact", "substring"] | None = Query(default=None),
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_session_context),
) -> TopicMatchesResponse:
    try:
        result = build_topic_matches(db, ctx, mode=mode)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from exc

    return TopicMatchesResponse(
        mode=result.mode,
        requester_topics=result.requester_topics,
        matches={
            topic: [UserPublic.model_validate(user) for user in users]
            for topic, users in result.groups.items()
        },
        total_users=result.total_users,
    )
