from __future__ import annotations

import logging
from typing import Iterable, Sequence

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.errors import DataAccessError, data_access
from app.models.user import User
from app.models.user_topic import UserTopic
from app.services.errors import EmailAlreadyRegisteredError
from app.services.topic_codec import clean_topics, join_topics
from app.utils.password_hash import hash_password, verify_password


logger = logging.getLogger(__name__)


def normalize_email(value: str | None) -> str:
    return (value or "").strip().lower()


def get_by_email(db: Session, email: str) -> User | None:
    normalized = normalize_email(email)
    if not normalized:
        return None
    with data_access():
        return db.query(User).filter(User.email == normalized).first()


def get_by_id(db: Session, user_id: int) -> User | None:
    with data_access():
        return db.query(User).filter(User.id == user_id).first()


def list_users(db: Session) -> list[User]:
    with data_access():
        return db.query(User).order_by(User.id).all()


def find_by_any_topic_substring(db: Session, topics: Sequence[str], exclude_email: str) -> list[User]:
    """Users whose stored topics text contains any of ``topics`` as a substring.

    Legacy LIKE '%topic%' semantics: case-sensitive containment over the joined
    text column, so "Science" also finds "Computer Science".
    """

    labels = clean_topics(topics)
    if not labels:
        return []

    # LIKE ignores ASCII case on sqlite and most MySQL collations, so it only narrows the
    # candidates; the containment check below decides.
    clauses = [User.topics_interested.contains(label, autoescape=True) for label in labels]
    with data_access():
        candidates = (
            db.query(User)
            .filter(or_(*clauses))
            .filter(User.email != normalize_email(exclude_email))
            .order_by(User.id)
            .all()
        )
    return [user for user in candidates if any(label in (user.topics_interested or "") for label in labels)]


def find_by_any_topic_exact(db: Session, topics: Sequence[str], exclude_email: str) -> list[User]:
    """Users holding a user_topics row equal to any of ``topics``."""

    labels = clean_topics(topics)
    if not labels:
        return []

    with data_access():
        matching_ids = select(UserTopic.user_id).where(UserTopic.topic.in_(labels))
        return (
            db.query(User)
            .filter(User.id.in_(matching_ids))
            .filter(User.email != normalize_email(exclude_email))
            .order_by(User.id)
            .all()
        )


def create_user(db: Session, email: str, password: str) -> User:
    normalized = normalize_email(email)
    if get_by_email(db, normalized) is not None:
        raise EmailAlreadyRegisteredError(normalized)

    user = User(email=normalized, password=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # Lost a race with a concurrent signup for the same address.
        db.rollback()
        raise EmailAlreadyRegisteredError(normalized) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise DataAccessError("Database insert failed") from exc
    db.refresh(user)
    logger.info("user.created id=%s email=%s", user.id, user.email)
    return user


def authenticate(db: Session, email: str, password: str) -> User | None:
    user = get_by_email(db, email)
    if user is None or not verify_password(password, user.password):
        return None
    return user


def _save(db: Session, user: User) -> User:
    with data_access(db, action="update"):
        db.add(user)
        db.commit()
        db.refresh(user)
    return user


def upsert_profile(
    db: Session,
    user: User,
    *,
    first_name: str,
    last_name: str,
    age: int,
    gender: str | None,
    occupation: str | None = None,
) -> User:
    user.first_name = first_name.strip()
    user.last_name = last_name.strip()
    user.age = age
    user.gender = gender
    if occupation is not None:
        user.occupation = occupation.strip()
    return _save(db, user)


def set_topics(db: Session, user: User, topics: Iterable[str]) -> User:
    """Replace the user's topics in both the joined text column and user_topics."""

    labels = clean_topics(topics)
    with data_access(db, action="update"):
        user.topics_interested = join_topics(labels)
        user.topic_rows.clear()
        # Flush the deletes first so re-adding the same topic does not trip the unique constraint.
        db.flush()
        user.topic_rows.extend(UserTopic(topic=label, position=idx) for idx, label in enumerate(labels))
        db.add(user)
        db.commit()
        db.refresh(user)
    logger.info("user.topics id=%s count=%s", user.id, len(labels))
    return user


def set_study_time(db: Session, user: User, slots: Iterable[str]) -> User:
    user.preferred_study_time = join_topics(clean_topics(slots))
    return _save(db, user)


def set_difficulty(db: Session, user: User, level: str) -> User:
    user.study_difficulty_level = level.strip()
    return _save(db, user)


def save_socials(db: Session, user: User, linkedin: str | None, github: str | None, personal: str | None) -> User:
    user.linkedin_url = (linkedin or "").strip()
    user.github_url = (github or "").strip()
    user.personal_website_url = (personal or "").strip()
    return _save(db, user)


def mark_setup_complete(db: Session, user: User) -> User:
    user.setup_complete = True
    return _save(db, user)


def update_password(db: Session, user: User, new_password: str) -> User:
    user.password = hash_password(new_password)
    return _save(db, user)
