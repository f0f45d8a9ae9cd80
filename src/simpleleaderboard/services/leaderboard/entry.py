"""Leaderboard entry model and its wire representations."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

# Rendered for an entry that has no timestamp; the backend assigns one.
ABSENT_TIMESTAMP = ""


def format_score(score: float) -> str:
    """Render a score with '.' as decimal point and no grouping.

    Examples:
        1234.5 -> "1234.5"
        10     -> "10.0"
    """
    return repr(float(score))


def _format_timestamp(timestamp: datetime | None) -> str:
    if timestamp is None:
        return ABSENT_TIMESTAMP
    return timestamp.isoformat()


def _parse_timestamp(raw: Any) -> datetime | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw
    text = str(raw)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass(frozen=True)
class Entry:
    """A single leaderboard submission.

    Attributes:
        name: Display name of the player
        score: Points the player acquired
        id: Backend identifier, set when referring to an existing record
        timestamp: When the score was achieved; None lets the backend decide
    """

    name: str
    score: float
    id: str | None = None
    timestamp: datetime | None = None

    def __str__(self) -> str:
        return (
            f"(Id: {self.id or ''} Name: {self.name}, "
            f"Score: {format_score(self.score)}, "
            f"Timestamp: {_format_timestamp(self.timestamp)})"
        )

    def to_field_map(self) -> dict[str, str]:
        """Flatten the entry into form fields for a POST request."""
        return {
            "_id": self.id or "",
            "name": self.name,
            "score": format_score(self.score),
            "timestamp": _format_timestamp(self.timestamp),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Entry:
        """Build an entry from one object of a GET response.

        Raises:
            ValueError: If the name is missing or the score is not numeric.
        """
        name = _first_present(data, "name", "Name")
        if name is None:
            raise ValueError(f"Entry has no name: {dict(data)!r}")

        raw_score = _first_present(data, "score", "Score")
        try:
            score = float(raw_score)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid score for {name!r}: {raw_score!r}") from e

        entry_id = _first_present(data, "_id", "id")
        return cls(
            name=str(name),
            score=score,
            id=str(entry_id) if entry_id else None,
            timestamp=_parse_timestamp(_first_present(data, "timestamp", "Timestamp")),
        )


def parse_entries(body: str | None) -> list[Entry]:
    """Decode a GET response body (a JSON array) into entries.

    Returns an empty list for a missing or empty body.

    Raises:
        ValueError: If the body is not a JSON array of entry objects.
    """
    if not body:
        return []

    data = json.loads(body)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of entries, got {type(data).__name__}")

    entries = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError(f"Expected an entry object, got {item!r}")
        entries.append(Entry.from_dict(item))
    return entries
