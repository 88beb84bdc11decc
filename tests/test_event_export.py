import pytest

from nebula4x.entities import (
    Colony,
    EventCategory,
    EventLevel,
    Faction,
    Ship,
    SimEvent,
    StarSystem,
)
from nebula4x.event_export import (
    events_summary_to_csv,
    events_summary_to_json,
    events_to_csv,
    events_to_json,
    events_to_jsonl,
)
from nebula4x.game_state import GameState
from nebula4x.jsonio import parse


@pytest.fixture
def state():
    s = GameState()
    s.factions[1] = Faction(id=1, name="Terrans")
    s.systems[10] = StarSystem(id=10, name="Sol")
    s.ships[42] = Ship(id=42, name="SC-1", faction_id=1, system_id=10)
    s.colonies[7] = Colony(id=7, name="Earth", faction_id=1)
    s.events.append(
        SimEvent(
            seq=5,
            day=10,
            level=EventLevel.WARN,
            category=EventCategory.MOVEMENT,
            faction_id=1,
            system_id=10,
            ship_id=42,
            colony_id=7,
            message="Test,comma",
        )
    )
    s.events.append(
        SimEvent(
            seq=6,
            day=11,
            level=EventLevel.INFO,
            category=EventCategory.RESEARCH,
            faction_id=1,
            message='He said "ok"',
        )
    )
    return s


def test_csv_header_dates_and_escaping(state):
    csv = events_to_csv(state, state.events)
    assert "day,date,seq,level,category" in csv
    assert "2200-01-11" in csv
    assert '"Test,comma"' in csv
    assert '"He said ""ok"""' in csv


def test_csv_row_contents(state):
    lines = events_to_csv(state, state.events).splitlines()
    assert len(lines) == 3
    assert lines[1] == '10,2200-01-11,5,WARN,MOVEMENT,1,Terrans,0,,10,Sol,42,SC-1,7,Earth,"Test,comma"'


def test_json_fields(state):
    text = events_to_json(state, state.events)
    assert text.endswith("\n")
    arr = parse(text)
    assert len(arr) == 2
    o0 = arr[0]
    assert o0["day"] == 10
    assert o0["date"] == "2200-01-11"
    assert o0["seq"] == 5
    assert o0["level"] == "warn"
    assert o0["category"] == "movement"
    assert o0["faction"] == "Terrans"
    assert o0["system"] == "Sol"
    assert o0["ship"] == "SC-1"
    assert o0["colony"] == "Earth"
    assert o0["message"] == "Test,comma"
    assert arr[1]["message"] == 'He said "ok"'
    assert arr[1]["faction2"] == ""


def test_jsonl_lines(state):
    text = events_to_jsonl(state, state.events)
    assert text.endswith("\n")
    lines = [line for line in text.split("\n") if line]
    assert len(lines) == 2
    first = parse(lines[0])
    assert first["seq"] == 5
    assert first["message"] == "Test,comma"
    second = parse(lines[1])
    assert second["seq"] == 6
    assert second["message"] == 'He said "ok"'


def test_summary_json(state):
    text = events_summary_to_json(state.events)
    assert text.endswith("\n")
    summary = parse(text)
    assert summary["count"] == 2
    assert summary["range"]["day_min"] == 10
    assert summary["range"]["date_min"] == "2200-01-11"
    assert summary["range"]["day_max"] == 11
    assert summary["range"]["date_max"] == "2200-01-12"
    assert summary["levels"] == {"info": 1, "warn": 1, "error": 0}
    assert summary["categories"]["movement"] == 1
    assert summary["categories"]["research"] == 1
    assert summary["categories"]["combat"] == 0


def test_summary_csv(state):
    csv = events_summary_to_csv(state.events)
    assert "count,day_min,day_max,date_min,date_max" in csv
    assert "2200-01-11" in csv
    assert "2200-01-12" in csv
    assert "2,10,11" in csv
    assert ",1,1,0," in csv


def test_empty_outputs(state):
    assert events_to_jsonl(state, []) == "\n"
    assert parse(events_to_json(state, [])) == []
    assert events_to_csv(state, []).count("\n") == 1


def test_empty_summary_json_has_null_range():
    summary = parse(events_summary_to_json([]))
    assert summary["count"] == 0
    assert summary["range"] == {
        "day_min": None,
        "day_max": None,
        "date_min": None,
        "date_max": None,
    }


def test_empty_summary_csv_blank_range():
    lines = events_summary_to_csv([]).splitlines()
    assert lines[1] == "0,,,,,0,0,0,0,0,0,0,0,0,0,0"


def test_none_entries_are_skipped(state):
    events = [None, state.events[0], None]
    assert len(parse(events_to_json(state, events))) == 1
    assert parse(events_summary_to_json(events))["count"] == 1


def test_unknown_ids_resolve_to_empty_names(state):
    ev = SimEvent(seq=1, day=0, faction_id=99, system_id=98, message="x")
    obj = parse(events_to_json(state, [ev]))[0]
    assert obj["faction"] == ""
    assert obj["system"] == ""
    assert obj["date"] == "2200-01-01"
    assert obj["level"] == "info"
    assert obj["category"] == "general"