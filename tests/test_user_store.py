from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.db.errors import DataAccessError
from app.models.user_topic import UserTopic
from app.services import user_store
from app.services.errors import EmailAlreadyRegisteredError


def test_create_user_normalizes_email_and_hashes_password(db) -> None:
    user = user_store.create_user(db, "  Alice@Example.COM ", "Secret123")

    assert user.email == "alice@example.com"
    assert user.password != "Secret123"
    assert user.setup_complete is False
    assert user_store.get_by_email(db, "ALICE@example.com").id == user.id


def test_create_user_rejects_duplicate_email(db) -> None:
    user_store.create_user(db, "bob@example.com", "Secret123")

    with pytest.raises(EmailAlreadyRegisteredError):
        user_store.create_user(db, "BOB@example.com", "Other123")


def test_authenticate(db) -> None:
    user_store.create_user(db, "carol@example.com", "Secret123")

    assert user_store.authenticate(db, "carol@example.com", "Secret123") is not None
    assert user_store.authenticate(db, "carol@example.com", "wrong") is None
    assert user_store.authenticate(db, "nobody@example.com", "Secret123") is None


def test_set_topics_writes_text_and_rows(db) -> None:
    user = user_store.create_user(db, "dave@example.com", "Secret123")

    user_store.set_topics(db, user, ["Physics", " Biology ", "Physics", ""])

    assert user.topics_interested == "Physics, Biology"
    assert user.topics == ["Physics", "Biology"]
    rows = db.query(UserTopic).filter(UserTopic.user_id == user.id).order_by(UserTopic.position).all()
    assert [r.topic for r in rows] == ["Physics", "Biology"]


def test_set_topics_replaces_previous_topics(db) -> None:
    user = user_store.create_user(db, "erin@example.com", "Secret123")
    user_store.set_topics(db, user, ["Physics", "Biology"])

    user_store.set_topics(db, user, ["Biology", "History"])

    assert user.topics == ["Biology", "History"]
    rows = db.query(UserTopic).filter(UserTopic.user_id == user.id).all()
    assert sorted(r.topic for r in rows) == ["Biology", "History"]


def test_onboarding_fields_round_trip(db) -> None:
    user = user_store.create_user(db, "frank@example.com", "Secret123")

    user_store.upsert_profile(db, user, first_name=" Frank ", last_name="Blue", age=21, gender="Male", occupation="Student")
    user_store.set_study_time(db, user, ["Weekday Evening", "Weekend Morning"])
    user_store.set_difficulty(db, user, "Intermediate")
    user_store.save_socials(db, user, "linkedin.com/in/frank", None, "")
    user_store.mark_setup_complete(db, user)

    fresh = user_store.get_by_email(db, "frank@example.com")
    assert fresh.first_name == "Frank"
    assert fresh.age == 21
    assert fresh.preferred_study_time == "Weekday Evening, Weekend Morning"
    assert fresh.study_times == ["Weekday Evening", "Weekend Morning"]
    assert fresh.study_difficulty_level == "Intermediate"
    assert fresh.linkedin_url == "linkedin.com/in/frank"
    assert fresh.github_url == ""
    assert fresh.setup_complete is True


def test_update_password(db) -> None:
    user = user_store.create_user(db, "gina@example.com", "Secret123")

    user_store.update_password(db, user, "Newpass456")

    assert user_store.authenticate(db, "gina@example.com", "Newpass456") is not None
    assert user_store.authenticate(db, "gina@example.com", "Secret123") is None


def test_storage_failure_surfaces_as_data_access_error(db, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_query(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(Session, "query", broken_query)

    with pytest.raises(DataAccessError):
        user_store.find_by_any_topic_substring(db, ["Biology"], "z@x.com")
    with pytest.raises(DataAccessError):
        user_store.get_by_email(db, "anyone@example.com")


def test_list_users_in_storage_order(db) -> None:
    first = user_store.create_user(db, "first@example.com", "Secret123")
    second = user_store.create_user(db, "second@example.com", "Secret123")

    assert [u.id for u in user_store.list_users(db)] == [first.id, second.id]
