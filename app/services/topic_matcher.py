# topic_matcher.py
import logging
from typing import Sequence
from sqlalchemy.orm import Session
from app.config import TopicMatchMode, settings
from app.models.user import User
from app.services.topic_codec import clean_topics
from app.services.user_store import find_by_any_topic_exact, find_by_any_topic_substring


logger = logging.getLogger(__name__)

MATCH_MODES: tuple[str, ...] = ("exact", "substring")


def resolve_match_mode(mode: str | None) -> TopicMatchMode:
    value = (mode or settings.topic_match_mode).strip().lower()
    if value not in MATCH_MODES:
        raise ValueError(f"unknown topic match mode: {mode!r}")
    return value  # type: ignore[return-value]


def find_users_sharing_any_topic(
    db: Session,
    requester_topics: Sequence[str],
    exclude_email: str,
    *,
    mode: str | None = None,
) -> list[User]:
    """Other users sharing at least one of ``requester_topics``.

    Matching is one-directional: only the requester's topics drive the query.
    An empty topic list returns no one instead of everyone.
    """

    topics = clean_topics(requester_topics)
    if not topics:
        return []

    resolved = resolve_match_mode(mode)
    if resolved == "substring":
        matched = find_by_any_topic_substring(db, topics, exclude_email)
    else:
        matched = find_by_any_topic_exact(db, topics, exclude_email)
    logger.debug("topic_matcher mode=%s topics=%s matched=%s", resolved, len(topics), len(matched))
    return matched
