"""Field rules shared by the request schemas."""

from __future__ import annotations

import re

MIN_AGE = 13
MAX_AGE = 120
MIN_PASSWORD_LENGTH = 6

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}$")
PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Z])(?=.*[a-z])(?=.*\d).{%d,}$" % MIN_PASSWORD_LENGTH)
URL_PATTERN = re.compile(r"^(https?://)?(www\.)?[a-zA-Z0-9-]+(\.[a-zA-Z]{2,})+(/.*)?$")


def is_valid_email(email: str | None) -> bool:
    if not email or not email.strip():
        return False
    return bool(EMAIL_PATTERN.match(email.strip()))


def is_valid_password(password: str | None) -> bool:
    """At least six characters with one uppercase letter, one lowercase letter and one digit."""
    if not password or not password.strip():
        return False
    return bool(PASSWORD_PATTERN.match(password))


def is_valid_name(name: str | None) -> bool:
    return bool(name and name.strip())


def is_valid_age(age: int) -> bool:
    return MIN_AGE <= age <= MAX_AGE


def is_valid_url(url: str | None) -> bool:
    # Social links are optional.
    if not url or not url.strip():
        return True
    return bool(URL_PATTERN.match(url.strip()))
