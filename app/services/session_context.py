from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionContext:
    """Identity of the caller, resolved once per request from the bearer token."""

    user_id: int
    email: str
