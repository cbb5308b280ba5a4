"""Pages of the app, the header title, the tab bar and the sync trigger."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Page(Enum):
    """Screens the app can show."""

    TODOS = "todos"
    GROCERIES = "groceries"
    SHOPEE = "shopee"
    WATCHLIST = "watchlist"
    PERIOD = "period"
    WATCH_SETTINGS = "watch_settings"


_TITLES = {
    Page.TODOS: "TO-DOS",
    Page.GROCERIES: "GROCERIES",
    Page.SHOPEE: "SHOPEE PICK-UPS",
    Page.WATCHLIST: "WATCHLIST",
    Page.PERIOD: "CYCLE TRACKER",
}


def page_title(page: Page) -> str:
    """Title shown in the header for a page."""
    return _TITLES.get(page, "LIFE MANAGER")


_ACTIVE_COLOR = "text-neon-cyan text-glow-cyan"
_INACTIVE_COLOR = "text-cyber-dim"


@dataclass(frozen=True)
class Tab:
    """One entry of the bottom tab bar."""

    page: Page
    label: str
    icon: str
    active: bool

    @property
    def color(self) -> str:
        return _ACTIVE_COLOR if self.active else _INACTIVE_COLOR


_TABS = (
    (Page.TODOS, "Todos", "check-square"),
    (Page.GROCERIES, "Grocery", "shopping-cart"),
    (Page.SHOPEE, "Shopee", "package"),
    (Page.WATCHLIST, "Watch", "tv"),
    (Page.PERIOD, "Cycle", "flower"),
)


def tabs(current: Page) -> list[Tab]:
    """The tab bar entries in order, with the current page marked active."""
    return [
        Tab(page=page, label=label, icon=icon, active=page is current)
        for page, label, icon in _TABS
    ]


@dataclass(frozen=True)
class SyncTrigger:
    """Counter that pages watch; bumping it asks them to fetch again."""

    value: int = 0

    def bump(self) -> "SyncTrigger":
        """The next trigger value."""
        return SyncTrigger(self.value + 1)