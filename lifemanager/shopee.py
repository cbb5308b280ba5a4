"""Shopee pick-up packages and the results of reading a screenshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


@dataclass
class OcrResult:
    """One package read from a screenshot.

    ``due_date`` is YYYY-MM-DD; ``date_is_estimate`` is true for a delivery
    estimate and false for a pick-up deadline.
    """

    title: Optional[str] = None
    store: Optional[str] = None
    code: Optional[str] = None
    due_date: Optional[str] = None
    date_is_estimate: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OcrResult":
        """Build a result from its JSON form; raise ValueError if it is malformed."""
        return cls(
            title=data.get("title"),
            store=data.get("store"),
            code=data.get("code"),
            due_date=data.get("due_date"),
            date_is_estimate=bool(_require(data, "date_is_estimate")),
        )


@dataclass(kw_only=True)
class ShopeePackage:
    """A package waiting to be picked up from a store."""

    id: str
    title: str
    store: Optional[str] = None
    code: Optional[str] = None
    due_date: Optional[str] = None
    date_is_estimate: bool = False
    picked_up: bool = False
    created_at: float
    completed_by: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShopeePackage":
        """Build a package from its JSON form; raise ValueError if it is malformed."""
        return cls(
            id=str(_require(data, "id")),
            title=str(_require(data, "title")),
            store=data.get("store"),
            code=data.get("code"),
            due_date=data.get("due_date"),
            date_is_estimate=bool(_require(data, "date_is_estimate")),
            picked_up=bool(_require(data, "picked_up")),
            created_at=float(_require(data, "created_at")),
            completed_by=data.get("completed_by"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the package."""
        return {
            "id": self.id,
            "title": self.title,
            "store": self.store,
            "code": self.code,
            "due_date": self.due_date,
            "date_is_estimate": self.date_is_estimate,
            "picked_up": self.picked_up,
            "created_at": self.created_at,
            "completed_by": self.completed_by,
        }