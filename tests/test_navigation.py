import pytest

from lifemanager.navigation import Page, SyncTrigger, Tab, page_title, tabs


@pytest.mark.parametrize("page,title", [
    (Page.TODOS, "TO-DOS"),
    (Page.GROCERIES, "GROCERIES"),
    (Page.SHOPEE, "SHOPEE PICK-UPS"),
    (Page.WATCHLIST, "WATCHLIST"),
    (Page.PERIOD, "CYCLE TRACKER"),
    (Page.WATCH_SETTINGS, "LIFE MANAGER"),
])
def test_page_title(page, title):
    assert page_title(page) == title


def test_tab_labels_in_order():
    assert [t.label for t in tabs(Page.TODOS)] == ["Todos", "Grocery", "Shopee", "Watch", "Cycle"]


def test_exactly_one_active_tab():
    for page in (Page.TODOS, Page.GROCERIES, Page.SHOPEE, Page.WATCHLIST, Page.PERIOD):
        active = [t for t in tabs(page) if t.active]
        assert [t.page for t in active] == [page]
        assert active[0].color == "text-neon-cyan text-glow-cyan"


def test_no_active_tab_on_settings_page():
    bar = tabs(Page.WATCH_SETTINGS)
    assert not any(t.active for t in bar)
    assert {t.color for t in bar} == {"text-cyber-dim"}


def test_tab_color_property():
    tab = Tab(page=Page.SHOPEE, label="Shopee", icon="package", active=False)
    assert tab.color == "text-cyber-dim"


def test_sync_trigger_bump():
    trigger = SyncTrigger()
    bumped = trigger.bump().bump()
    assert trigger.value == 0
    assert bumped == SyncTrigger(2)
    assert bumped.bump().value == bumped.value + 1