from __future__ import annotations

from typing import Iterable


# Persisted form of every multi-valued preference column.
TOPIC_SEPARATOR = ", "


def clean_topics(topics: Iterable[str] | None) -> list[str]:
    """Trim labels and drop blanks and repeats, keeping first-seen order."""
    if not topics:
        return []
    result: list[str] = []
    seen: set[str] = set()
    for item in topics:
        label = (item or "").strip()
        if not label or label in seen:
            continue
        seen.add(label)
        result.append(label)
    return result


def join_topics(topics: Iterable[str] | None) -> str:
    if not topics:
        return ""
    return TOPIC_SEPARATOR.join(label.strip() for label in topics if label and label.strip())


def parse_topics(raw: str | None) -> list[str]:
    """Split a stored preference string back into labels.

    Leading, trailing or doubled separators only produce empty pieces, which are
    dropped. A label that itself contains a comma does not survive the round trip.
    """
    if not raw or not raw.strip():
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]
