from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from app.db.errors import DataAccessError
from app.services import matching_service


def _user_with_topics(client, email: str, topics: list[str]) -> dict[str, str]:
    password = "SecretPass123"
    assert client.post("/auth/register", json={"email": email, "password": password}).status_code == 201
    token = client.post("/auth/login", json={"email": email, "password": password}).json()["access_token"]
    headers = {"Authorization": f"Bearer {token}"}
    if topics:
        assert client.put("/users/me/topics", json={"topics": topics}, headers=headers).status_code == 200
    return headers


def test_matches_grouped_by_requester_topics(client) -> None:
    _user_with_topics(client, "a@x.com", ["Biology"])
    _user_with_topics(client, "b@x.com", ["Chemistry", "Biology"])
    _user_with_topics(client, "c@x.com", ["History"])
    me = _user_with_topics(client, "z@x.com", ["Biology", "Chemistry"])

    r = client.get("/matches", headers=me)
    assert r.status_code == 200
    body = r.json()
    assert body["mode"] == "exact"
    assert body["requester_topics"] == ["Biology", "Chemistry"]
    assert list(body["matches"].keys()) == ["Biology", "Chemistry"]
    assert [u["email"] for u in body["matches"]["Biology"]] == ["a@x.com", "b@x.com"]
    assert [u["email"] for u in body["matches"]["Chemistry"]] == ["b@x.com"]
    assert body["total_users"] == 2
    # Match cards never carry social links.
    assert "github_url" not in body["matches"]["Biology"][0]


def test_requester_never_matches_themselves(client) -> None:
    me = _user_with_topics(client, "me@x.com", ["Physics"])

    body = client.get("/matches", headers=me).json()
    assert body["matches"] == {}
    assert body["total_users"] == 0


def test_requester_without_topics_gets_empty_map(client) -> None:
    _user_with_topics(client, "a@x.com", ["Biology"])
    me = _user_with_topics(client, "new@x.com", [])

    body = client.get("/matches", headers=me).json()
    assert body["requester_topics"] == []
    assert body["matches"] == {}


def test_mode_query_parameter(client) -> None:
    _user_with_topics(client, "a@x.com", ["Physics"])
    me = _user_with_topics(client, "me@x.com", ["Physics"])

    assert client.get("/matches", params={"mode": "substring"}, headers=me).json()["mode"] == "substring"
    assert client.get("/matches", params={"mode": "fuzzy"}, headers=me).status_code == 422


def test_storage_failure_returns_503(client, monkeypatch: pytest.MonkeyPatch) -> None:
    me = _user_with_topics(client, "me@x.com", ["Physics"])

    def broken(*args, **kwargs):
        raise DataAccessError("Database query failed") from OperationalError("SELECT", {}, Exception("down"))

    monkeypatch.setattr(matching_service, "find_users_sharing_any_topic", broken)

    r = client.get("/matches", headers=me)
    assert r.status_code == 503
