# lifemanager

The data models and view logic behind a small household organiser. It covers
pick-up parcels, a film and series watchlist, activity notifications, and a
menstrual-cycle tracker with daily mood check-ins.

You pass the package plain data and it gives back plain results, so any front
end or service can build on it.

## Installation

```
pip install .
```

To install with the test tools as well:

```
pip install ".[test]"
```

## Modules

- `lifemanager.shopee` has `OcrResult` and `ShopeePackage`. Both can be built
  from dictionaries with `from_dict`, and `ShopeePackage.to_dict` converts a
  package back. A missing required field raises `ValueError`.
- `lifemanager.shopee_matching` compares parcels read from a screenshot with
  the packages you already have:
  - `find_matching_package` returns the first package still waiting for
    pick-up that a reading refers to. Titles match when one contains the
    other, ignoring 【 】 brackets. Otherwise the store and the code must both
    be present and agree.
  - `plan_ocr_import` returns a list of `AddPackage` and `UpdateCode` actions.
  - `optional_field` turns an empty form value into `None`.
- `lifemanager.watchlist` has these types:
  - `MediaType`, `WatchStatus` and `FranchiseRelation`. Their `parse` methods
    fall back to a default for unknown text.
  - `WatchItem`, with `from_dict` and `to_dict`.
  - `MediaSearchResult`, `StreamingProvider`, `MediaRecommendation`,
    `ExploreDetail`, `WatchSettings` and `FranchiseLink`.
- `lifemanager.notification` has `Notification` and `NotificationStatus`,
  each with `from_dict`.
- `lifemanager.cycle` has the types `Cycle`, `CycleSettings`, `CyclePhase`,
  `PhaseInfo`, `MoodEntry` and `PhaseInsight`. It also has these functions:
  - `current_phase`
  - `birth_control_phase`
  - `predict_next_start`
  - `cycle_variance`
  - `phase_for_date`
  - `compute_insights`, which weights each earlier cycle by a further
    factor of 0.8.
- `lifemanager.period_dashboard` has:
  - `summarize`, which returns a `PeriodSummary` with the phase, the
    prediction, the countdown and the irregular and overdue flags.
  - `pms_banner`, which returns a `PmsBanner`.
  - `countdown_text`, `stat_level` and `mood_emoji`.
- `lifemanager.period_calendar` has:
  - `month_grid`, the Monday-first grid of dates.
  - `calendar_days`, which returns `CalendarDay` cells that carry the phase
    and the logged mood.
  - `month_label`, `shift_month` and `phase_tint`.
- `lifemanager.period_forms` has:
  - `CheckIn`, the state of the daily check-in, with `can_save` and
    `notes_preview`.
  - `deviation_bar` and `toggle_symptom`.
  - `clamp_cycle_length`, which keeps the value within 21 to 45 days, and
    `clamp_period_duration`, which keeps it within 2 to 10 days.
  - `visible_history` and `total_entries`.
- `lifemanager.display` has `SyncStatus`, `format_sync_time`, `sync_label`,
  `sync_dot`, `progress_percent`, `progress_color` and `chip_palette`.
- `lifemanager.swipe` has `SwipeTracker`, which turns touch start, move and end
  events into a `SwipeOutcome`. A swipe counts past `THRESHOLD` pixels.
- `lifemanager.navigation` has:
  - `Page`, and `page_title` for the header text of each page.
  - `tabs`, which returns the `Tab` entries of the bottom bar.
  - `SyncTrigger`, a counter whose `bump` returns the next value.

## Examples

```python
from datetime import date
from lifemanager.cycle import Cycle, CycleSettings, current_phase, predict_next_start

settings = CycleSettings()
cycles = [
    Cycle(id="b", start_date=date(2024, 3, 1)),
    Cycle(id="a", start_date=date(2024, 2, 2)),
]

info = current_phase(cycles[0].start_date, date(2024, 3, 14), settings)
print(info.phase.label(), info.cycle_day)
print(predict_next_start(cycles, settings))  # 2024-03-29
```

Give cycles with the most recent start date first.

```python
from lifemanager.shopee import OcrResult, ShopeePackage
from lifemanager.shopee_matching import plan_ocr_import

packages = [ShopeePackage(id="1", title="Phone case", created_at=0.0)]
results = [OcrResult(title="【Phone case】", code="A12")]
print(plan_ocr_import(packages, results))  # [UpdateCode(package_id='1', code='A12')]
```

## What the package does not do

- It has no user interface, no storage, no server and no network access. It
  does not fetch, cache or save data. It only models data and computes
  results from what you give it.
- It has no model for to-do or grocery checklist items.

## Running the tests

```
pytest
```