from __future__ import annotations


def _register_and_login(client, email: str, password: str = "SecretPass123") -> dict[str, str]:
    r = client.post("/auth/register", json={"email": email, "password": password})
    assert r.status_code == 201
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


def test_onboarding_flow(client) -> None:
    headers = _register_and_login(client, "onboard@example.com")

    r = client.put(
        "/users/me/profile",
        json={"first_name": "Ada", "last_name": "Lovelace", "age": 22, "gender": "Female", "occupation": "Student"},
        headers=headers,
    )
    assert r.status_code == 200
    assert r.json()["first_name"] == "Ada"

    r = client.put("/users/me/topics", json={"topics": ["Mathematics", "Computer Science"]}, headers=headers)
    assert r.status_code == 200
    assert r.json()["topics"] == ["Mathematics", "Computer Science"]

    r = client.put("/users/me/study-time", json={"slots": ["Weekday Evening"]}, headers=headers)
    assert r.status_code == 200
    assert r.json()["study_times"] == ["Weekday Evening"]

    r = client.put("/users/me/difficulty", json={"level": "Advanced"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["study_difficulty_level"] == "Advanced"

    r = client.put(
        "/users/me/socials",
        json={"linkedin_url": "https://linkedin.com/in/ada", "github_url": "github.com/ada"},
        headers=headers,
    )
    assert r.status_code == 200
    assert r.json()["github_url"] == "github.com/ada"
    assert r.json()["personal_website_url"] == ""

    r = client.post("/users/me/setup-complete", headers=headers)
    assert r.status_code == 200
    assert r.json()["setup_complete"] is True


def test_profile_validation(client) -> None:
    headers = _register_and_login(client, "young@example.com")

    too_young = client.put(
        "/users/me/profile",
        json={"first_name": "Kid", "last_name": "Doe", "age": 12},
        headers=headers,
    )
    assert too_young.status_code == 422

    too_old = client.put(
        "/users/me/profile",
        json={"first_name": "Old", "last_name": "Doe", "age": 121},
        headers=headers,
    )
    assert too_old.status_code == 422

    blank_name = client.put(
        "/users/me/profile",
        json={"first_name": "  ", "last_name": "Doe", "age": 20},
        headers=headers,
    )
    assert blank_name.status_code == 422

    bad_url = client.put("/users/me/socials", json={"github_url": "not a url"}, headers=headers)
    assert bad_url.status_code == 422

    no_topics = client.put("/users/me/topics", json={"topics": ["", " "]}, headers=headers)
    assert no_topics.status_code == 422


def test_change_password(client) -> None:
    headers = _register_and_login(client, "pw@example.com")

    wrong = client.put(
        "/users/me/password",
        json={"current_password": "Nope12345", "new_password": "Fresh123"},
        headers=headers,
    )
    assert wrong.status_code == 400

    ok = client.put(
        "/users/me/password",
        json={"current_password": "SecretPass123", "new_password": "Fresh123"},
        headers=headers,
    )
    assert ok.status_code == 204

    assert client.post("/auth/login", json={"email": "pw@example.com", "password": "Fresh123"}).status_code == 200


def test_other_profile_hides_socials_until_connected(client) -> None:
    alice = _register_and_login(client, "alice@example.com")
    bob = _register_and_login(client, "bob@example.com")
    client.put("/users/me/socials", json={"github_url": "github.com/bob"}, headers=bob)

    r = client.get("/users/bob@example.com", headers=alice)
    assert r.status_code == 200
    assert r.json()["email"] == "bob@example.com"
    assert r.json()["socials"] is None

    sent = client.post("/connections", json={"receiver_email": "bob@example.com"}, headers=alice)
    assert sent.status_code == 201
    accepted = client.post(f"/connections/{sent.json()['id']}/accept", headers=bob)
    assert accepted.status_code == 200

    r = client.get("/users/BOB@example.com", headers=alice)
    assert r.json()["socials"]["github_url"] == "github.com/bob"


def test_unknown_profile_is_404(client) -> None:
    headers = _register_and_login(client, "lonely@example.com")

    assert client.get("/users/ghost@example.com", headers=headers).status_code == 404
