from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

from app.services.topic_codec import clean_topics


class HasTopics(Protocol):
    @property
    def topics(self) -> list[str]: ...


U = TypeVar("U", bound=HasTopics)


def group_by_topic(requester_topics: Sequence[str], matched: Sequence[U]) -> dict[str, list[U]]:
    """Partition matched users under each requester topic they hold.

    Membership here is exact, even when the matcher ran in substring mode, so a
    user found through "Science" is not listed under "Science" unless that exact
    label is one of theirs. Keys follow ``requester_topics`` order; topics with no
    users are left out, and a user appears under every topic they share.
    """

    grouped: dict[str, list[U]] = {}
    if not matched:
        return grouped

    held = [(user, set(user.topics)) for user in matched]
    for topic in clean_topics(requester_topics):
        users = [user for user, topics in held if topic in topics]
        if users:
            grouped[topic] = users
    return grouped
