"""Watchlist items, external media search results and franchise links."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class MediaType(Enum):
    """Kind of media on the watchlist."""

    MOVIE = "Movie"
    SERIES = "Series"
    ANIME = "Anime"

    @classmethod
    def parse(cls, text: str) -> "MediaType":
        """Parse a media type name; anything unknown is a movie."""
        for member in cls:
            if member.value == text:
                return member
        return cls.MOVIE

    def label(self) -> str:
        return self.value


class WatchStatus(Enum):
    """Viewing progress of an item."""

    UNWATCHED = "unwatched"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "WatchStatus":
        """Parse a status; anything unknown is unwatched."""
        for member in cls:
            if member.value == text:
                return member
        return cls.UNWATCHED


_STATUS_WIRE = {
    WatchStatus.UNWATCHED: "Unwatched",
    WatchStatus.IN_PROGRESS: "InProgress",
    WatchStatus.COMPLETED: "Completed",
}
_STATUS_FROM_WIRE = {wire: status for status, wire in _STATUS_WIRE.items()}


class FranchiseRelation(Enum):
    """How one watchlist item relates to another."""

    SEQUEL = "sequel"
    PREQUEL = "prequel"
    SPINOFF = "spinoff"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "FranchiseRelation":
        """Parse a relation; anything unknown is a sequel."""
        for member in cls:
            if member.value == text:
                return member
        return cls.SEQUEL

    def label(self) -> str:
        return _RELATION_LABELS[self]


_RELATION_LABELS = {
    FranchiseRelation.SEQUEL: "Sequel",
    FranchiseRelation.PREQUEL: "Prequel",
    FranchiseRelation.SPINOFF: "Spin-off",
}


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _media_type_from_wire(text: Any) -> MediaType:
    for member in MediaType:
        if member.value == text:
            return member
    raise ValueError(f"unknown media type: {text!r}")


@dataclass(kw_only=True)
class WatchItem:
    """A movie, series or anime on the watchlist."""

    id: str
    text: str
    media_type: MediaType
    status: WatchStatus = WatchStatus.UNWATCHED
    done: bool
    total_seasons: Optional[int] = None
    total_episodes: Optional[int] = None
    poster_url: Optional[str] = None
    tmdb_id: Optional[int] = None
    jikan_id: Optional[int] = None
    overview: Optional[str] = None
    trailer_url: Optional[str] = None
    season_data: Optional[str] = None
    """JSON map of season number to episode count, e.g. {"1":13,"2":22}."""
    created_at: float
    completed_by: Optional[str] = None
    current_season: Optional[int] = None
    current_episode: Optional[int] = None
    episodes_watched: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WatchItem":
        """Build an item from its JSON form; raise ValueError if it is malformed."""
        raw_status = data.get("status")
        if raw_status is None:
            status = WatchStatus.UNWATCHED
        elif raw_status in _STATUS_FROM_WIRE:
            status = _STATUS_FROM_WIRE[raw_status]
        else:
            raise ValueError(f"unknown watch status: {raw_status!r}")
        return cls(
            id=str(_require(data, "id")),
            text=str(_require(data, "text")),
            media_type=_media_type_from_wire(_require(data, "media_type")),
            status=status,
            done=bool(_require(data, "done")),
            total_seasons=data.get("total_seasons"),
            total_episodes=data.get("total_episodes"),
            poster_url=data.get("poster_url"),
            tmdb_id=data.get("tmdb_id"),
            jikan_id=data.get("jikan_id"),
            overview=data.get("overview"),
            trailer_url=data.get("trailer_url"),
            season_data=data.get("season_data"),
            created_at=float(_require(data, "created_at")),
            completed_by=data.get("completed_by"),
            current_season=data.get("current_season"),
            current_episode=data.get("current_episode"),
            episodes_watched=data.get("episodes_watched"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the item."""
        return {
            "id": self.id,
            "text": self.text,
            "media_type": self.media_type.value,
            "status": _STATUS_WIRE[self.status],
            "done": self.done,
            "total_seasons": self.total_seasons,
            "total_episodes": self.total_episodes,
            "poster_url": self.poster_url,
            "tmdb_id": self.tmdb_id,
            "jikan_id": self.jikan_id,
            "overview": self.overview,
            "trailer_url": self.trailer_url,
            "season_data": self.season_data,
            "created_at": self.created_at,
            "completed_by": self.completed_by,
            "current_season": self.current_season,
            "current_episode": self.current_episode,
            "episodes_watched": self.episodes_watched,
        }


@dataclass
class MediaSearchResult:
    """A title found through an external media search."""

    external_id: str
    title: str
    poster_url: Optional[str]
    year: Optional[str]
    total_seasons: Optional[int]
    total_episodes: Optional[int]
    media_type: MediaType


@dataclass
class StreamingProvider:
    """Where a title can be streamed, rented or bought."""

    name: str
    logo_url: str
    provider_type: str
    link: Optional[str] = None


@dataclass
class MediaRecommendation:
    """A recommended title and whether it is already listed."""

    external_id: str
    title: str
    poster_url: Optional[str]
    year: Optional[str]
    already_in_list: bool


@dataclass
class ExploreDetail:
    """Details shown for a title while exploring."""

    overview: Optional[str]
    trailer_url: Optional[str]
    providers: list[StreamingProvider]
    total_seasons: Optional[int]
    total_episodes: Optional[int]
    recommendations: list[MediaSearchResult] = field(default_factory=list)


@dataclass
class WatchSettings:
    """User preferences for streaming providers."""

    streaming_providers: list[str] = field(default_factory=list)
    filter_by_provider: bool = False


@dataclass
class FranchiseLink:
    """A link from one watchlist item to a related one."""

    id: str
    from_item_id: str
    to_item_id: str
    to_item_title: str
    to_item_status: WatchStatus
    relation: FranchiseRelation
    sort_order: int