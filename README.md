# nebula4x

Building blocks for a turn-based 4X space strategy game: the game-state data
model, a small JSON reader and writer with helpful error messages, crash-safe
file writes, and export of the event log to CSV, JSON and JSON Lines.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `nebula4x.date`: `Date`, a frozen, ordered count of days since 2200-01-01
  (`days_since_epoch`). `Date.from_ymd(year, month, day)` and
  `Date.parse_iso_ymd("YYYY-MM-DD")` raise `ValueError` on invalid input;
  `add_days`, `to_ymd` (returns a `YMD` named tuple) and `str()` giving the
  ISO form, e.g. `str(Date(10)) == "2200-01-11"`.
- `nebula4x.vec2`: `Vec2`, a frozen 2D vector with `+`, `-`, multiplication by
  a number, `length()` and `normalized()` (a near-zero vector normalizes to
  zero).
- `nebula4x.entities`: dataclasses for the world (`Body`, `Ship`, `Colony`,
  `Faction`, `Contact`, `StarSystem`, `JumpPoint`, `BuildOrder`,
  `InstallationBuildOrder`), for static content (`ComponentDef`, `ShipDesign`,
  `InstallationDef`), the enums `BodyType`, `ShipRole`, `ComponentType`, and
  the event record `SimEvent` with `EventLevel` and `EventCategory`. Ids are
  plain integers; `INVALID_ID` (0) means "not set".
- `nebula4x.orders`: ship orders (`MoveToPoint`, `MoveToBody`,
  `TravelViaJump`, `AttackShip`, `WaitDays`, `LoadMineral`, `UnloadMineral`)
  and `ShipOrders`, a queue with an optional repeat template.
- `nebula4x.game_state`: `TechEffect`, `TechDef`, `ContentDB`, `GameState`
  and `allocate_id(state)`, which hands out the next id and advances
  `state.next_id`.
- `nebula4x.jsonio`: `parse(text)` and `stringify(value, indent=2)`.
  `parse` takes `str` or UTF-8 `bytes`, ignores a leading byte order mark,
  decodes `\uXXXX` escapes including surrogate pairs, and reads every number
  as a `float`. On bad input it raises `JsonParseError` (a `ValueError`)
  whose message gives the offset, the line and column (CRLF counts as one
  line break) and a caret under the failing spot; the error also carries
  `position`, `line` and `column`. `stringify` sorts object keys, writes
  whole numbers without a fraction, and gives compact output when `indent`
  is 0.
- `nebula4x.file_io`: `read_text_file(path)`, `write_text_file(path,
  contents)` and `ensure_dir(path)`. Writing creates parent directories, goes
  to a temporary sibling file and then renames it into place, and removes the
  temporary file if anything fails. Failures raise `OSError`.
- `nebula4x.event_export`: `events_to_csv(state, events)`,
  `events_to_json(state, events)`, `events_to_jsonl(state, events)`,
  `events_summary_to_json(events)` and `events_summary_to_csv(events)`.
  Events are written in the order given; `None` entries are skipped. Rows
  carry the ids and the faction, system, ship and colony names looked up in
  `state`. Summaries give the count, the day and date range (null or blank
  when empty), and counts per level and per category.
- `nebula4x.strings`: `to_lower` (ASCII letters only) and `csv_escape`.
- `nebula4x.log`: a minimal thread-safe logger writing `[LEVEL] message` to
  standard error, with `Level`, `set_level`, `level`, `debug`, `info`, `warn`
  and `error`. The default level is `Level.INFO`; `Level.OFF` silences it.

## Example

```python
from nebula4x.entities import EventCategory, EventLevel, Faction, SimEvent
from nebula4x.event_export import events_to_csv, events_summary_to_json
from nebula4x.game_state import GameState

state = GameState()
state.factions[1] = Faction(id=1, name="Terrans")
state.events.append(
    SimEvent(seq=1, day=10, level=EventLevel.WARN,
             category=EventCategory.MOVEMENT, faction_id=1,
             message="Fleet arrived, awaiting orders")
)

print(events_to_csv(state, state.events))
print(events_summary_to_json(state.events))
```

The CSV row carries the date `2200-01-11`, the level `WARN`, the faction name
`Terrans`, and the message in quotes because it contains a comma.

## What this package does not do

This package holds the data model and its supporting tools only. It does not
advance the game: there is no simulation tick, no movement, combat, research
or production, and no handling of orders beyond storing them. It does not
save or load a `GameState` as a file, generate scenarios, load component,
design or technology content from data files, or validate content or game
state. It has no command line program and no graphical interface.