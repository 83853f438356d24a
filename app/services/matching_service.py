from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from app.models.user import User
from app.services.errors import UserNotFoundError
from app.services.session_context import SessionContext
from app.services.topic_grouper import group_by_topic
from app.services.topic_matcher import find_users_sharing_any_topic, resolve_match_mode
from app.services.user_store import get_by_email


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TopicMatches:
    mode: str
    requester_topics: list[str]
    groups: dict[str, list[User]] = field(default_factory=dict)

    @property
    def total_users(self) -> int:
        return len({user.id for users in self.groups.values() for user in users})


def build_topic_matches(db: Session, ctx: SessionContext, *, mode: str | None = None) -> TopicMatches:
    resolved = resolve_match_mode(mode)
    requester = get_by_email(db, ctx.email)
    if requester is None:
        raise UserNotFoundError(ctx.email)

    topics = requester.topics
    if not topics:
        logger.info("matches.skip user_id=%s reason=no_topics", ctx.user_id)
        return TopicMatches(mode=resolved, requester_topics=[])

    matched = find_users_sharing_any_topic(db, topics, requester.email, mode=resolved)
    groups = group_by_topic(topics, matched)
    result = TopicMatches(mode=resolved, requester_topics=topics, groups=groups)
    logger.info(
        "matches.built user_id=%s mode=%s topics=%s matched=%s grouped_users=%s",
        ctx.user_id,
        resolved,
        len(topics),
        len(matched),
        result.total_users,
    )
    return result
