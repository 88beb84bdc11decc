"""Export persistent simulation events as CSV, JSON and JSON Lines, with summaries."""

from collections import Counter
from collections.abc import Iterable
from typing import Optional

from nebula4x.date import Date
from nebula4x.entities import INVALID_ID, EventCategory, EventLevel, Id, SimEvent
from nebula4x.game_state import GameState
from nebula4x.jsonio import stringify
from nebula4x.strings import csv_escape

__all__ = [
    "events_to_csv",
    "events_to_json",
    "events_to_jsonl",
    "events_summary_to_json",
    "events_summary_to_csv",
]

_LEVEL_LABELS = {
    EventLevel.INFO: "info",
    EventLevel.WARN: "warn",
    EventLevel.ERROR: "error",
}

_CATEGORY_LABELS = {
    EventCategory.GENERAL: "general",
    EventCategory.RESEARCH: "research",
    EventCategory.SHIPYARD: "shipyard",
    EventCategory.CONSTRUCTION: "construction",
    EventCategory.MOVEMENT: "movement",
    EventCategory.COMBAT: "combat",
    EventCategory.INTEL: "intel",
    EventCategory.EXPLORATION: "exploration",
}

_CSV_HEADER = (
    "day,date,seq,level,category,"
    "faction_id,faction,"
    "faction_id2,faction2,"
    "system_id,system,"
    "ship_id,ship,"
    "colony_id,colony,"
    "message\n"
)

_SUMMARY_CSV_HEADER = (
    "count,day_min,day_max,date_min,date_max,"
    "info,warn,error,"
    "general,research,shipyard,construction,movement,combat,intel,exploration\n"
)


def _level_label(level: EventLevel) -> str:
    return _LEVEL_LABELS.get(level, "info")


def _category_label(category: EventCategory) -> str:
    return _CATEGORY_LABELS.get(category, "general")


def _name_in(table: dict, entity_id: Id) -> str:
    if entity_id == INVALID_ID:
        return ""
    entity = table.get(entity_id)
    return entity.name if entity is not None else ""


def _present(events: Iterable[Optional[SimEvent]]):
    return (ev for ev in events if ev is not None)


def _event_to_object(state: GameState, ev: SimEvent) -> dict:
    return {
        "day": ev.day,
        "date": str(Date(ev.day)),
        "seq": ev.seq,
        "level": _level_label(ev.level),
        "category": _category_label(ev.category),
        "faction_id": ev.faction_id,
        "faction": _name_in(state.factions, ev.faction_id),
        "faction_id2": ev.faction_id2,
        "faction2": _name_in(state.factions, ev.faction_id2),
        "system_id": ev.system_id,
        "system": _name_in(state.systems, ev.system_id),
        "ship_id": ev.ship_id,
        "ship": _name_in(state.ships, ev.ship_id),
        "colony_id": ev.colony_id,
        "colony": _name_in(state.colonies, ev.colony_id),
        "message": ev.message,
    }


def events_to_csv(state: GameState, events: Iterable[Optional[SimEvent]]) -> str:
    """Render events as CSV rows in the given order, with names resolved from ``state``."""
    lines = [_CSV_HEADER]
    for ev in _present(events):
        row = [
            str(ev.day),
            csv_escape(str(Date(ev.day))),
            str(ev.seq),
            csv_escape(_level_label(ev.level).upper()),
            csv_escape(_category_label(ev.category).upper()),
            str(ev.faction_id),
            csv_escape(_name_in(state.factions, ev.faction_id)),
            str(ev.faction_id2),
            csv_escape(_name_in(state.factions, ev.faction_id2)),
            str(ev.system_id),
            csv_escape(_name_in(state.systems, ev.system_id)),
            str(ev.ship_id),
            csv_escape(_name_in(state.ships, ev.ship_id)),
            str(ev.colony_id),
            csv_escape(_name_in(state.colonies, ev.colony_id)),
            csv_escape(ev.message),
        ]
        lines.append(",".join(row) + "\n")
    return "".join(lines)


def events_to_json(state: GameState, events: Iterable[Optional[SimEvent]]) -> str:
    """Render events as an indented JSON array of objects, ending with a newline."""
    objects = [_event_to_object(state, ev) for ev in _present(events)]
    return stringify(objects, 2) + "\n"


def events_to_jsonl(state: GameState, events: Iterable[Optional[SimEvent]]) -> str:
    """Render events as JSON Lines, one compact object per line, ending with a newline."""
    out = "".join(stringify(_event_to_object(state, ev), 0) + "\n" for ev in _present(events))
    return out or "\n"


class _Summary:
    def __init__(self, events: Iterable[Optional[SimEvent]]) -> None:
        self.count = 0
        self.day_min = 0
        self.day_max = 0
        self.levels: Counter = Counter()
        self.categories: Counter = Counter()
        for ev in _present(events):
            self.count += 1
            if self.count == 1:
                self.day_min = self.day_max = ev.day
            else:
                self.day_min = min(self.day_min, ev.day)
                self.day_max = max(self.day_max, ev.day)
            self.levels[ev.level] += 1
            self.categories[ev.category] += 1


def events_summary_to_json(events: Iterable[Optional[SimEvent]]) -> str:
    """Summarise events (count, day range, per-level and per-category counts) as JSON."""
    summary = _Summary(events)
    if summary.count == 0:
        day_range = {"day_min": None, "day_max": None, "date_min": None, "date_max": None}
    else:
        day_range = {
            "day_min": summary.day_min,
            "day_max": summary.day_max,
            "date_min": str(Date(summary.day_min)),
            "date_max": str(Date(summary.day_max)),
        }
    out = {
        "count": summary.count,
        "range": day_range,
        "levels": {label: summary.levels[level] for level, label in _LEVEL_LABELS.items()},
        "categories": {
            label: summary.categories[cat] for cat, label in _CATEGORY_LABELS.items()
        },
    }
    return stringify(out, 2) + "\n"


def events_summary_to_csv(events: Iterable[Optional[SimEvent]]) -> str:
    """Summarise events as a CSV header and one data row; range fields are blank when empty."""
    summary = _Summary(events)
    fields = [str(summary.count)]
    if summary.count == 0:
        fields += ["", "", "", ""]
    else:
        fields += [
            str(summary.day_min),
            str(summary.day_max),
            csv_escape(str(Date(summary.day_min))),
            csv_escape(str(Date(summary.day_max))),
        ]
    fields += [str(summary.levels[level]) for level in _LEVEL_LABELS]
    fields += [str(summary.categories[cat]) for cat in _CATEGORY_LABELS]
    return _SUMMARY_CSV_HEADER + ",".join(fields) + "\n"