"""Activity notifications shown under the header bell."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


@dataclass
class Notification:
    """Someone did something to an item in one of the modules."""

    id: str
    actor: str
    action: str
    module: str
    item_text: str
    created_at: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Notification":
        """Build a notification from its JSON form; raise ValueError if malformed."""
        return cls(
            id=str(_require(data, "id")),
            actor=str(_require(data, "actor")),
            action=str(_require(data, "action")),
            module=str(_require(data, "module")),
            item_text=str(_require(data, "item_text")),
            created_at=float(_require(data, "created_at")),
        )


@dataclass
class NotificationStatus:
    """The latest notifications and how many are unread."""

    notifications: list[Notification] = field(default_factory=list)
    unread_count: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NotificationStatus":
        """Build a status from its JSON form; raise ValueError if malformed."""
        unread = int(_require(data, "unread_count"))
        if unread < 0:
            raise ValueError(f"unread_count must not be negative: {unread}")
        return cls(
            notifications=[
                Notification.from_dict(item) for item in _require(data, "notifications")
            ],
            unread_count=unread,
        )