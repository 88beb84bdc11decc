"""Static content, technology definitions and the save-game state."""

from dataclasses import dataclass, field

from nebula4x.date import Date
from nebula4x.entities import (
    INVALID_ID,
    Body,
    Colony,
    ComponentDef,
    Faction,
    Id,
    InstallationDef,
    JumpPoint,
    Ship,
    ShipDesign,
    SimEvent,
    StarSystem,
)
from nebula4x.orders import ShipOrders

__all__ = ["TechEffect", "TechDef", "ContentDB", "GameState", "allocate_id"]


@dataclass
class TechEffect:
    """An effect of researching a tech, such as ``unlock_component``."""

    type: str = ""
    value: str = ""
    amount: float = 0.0


@dataclass
class TechDef:
    id: str = ""
    name: str = ""
    cost: float = 0.0
    prereqs: list[str] = field(default_factory=list)
    effects: list[TechEffect] = field(default_factory=list)


@dataclass
class ContentDB:
    """Static content loaded from data files."""

    components: dict[str, ComponentDef] = field(default_factory=dict)
    designs: dict[str, ShipDesign] = field(default_factory=dict)
    installations: dict[str, InstallationDef] = field(default_factory=dict)
    techs: dict[str, TechDef] = field(default_factory=dict)


@dataclass
class GameState:
    """Everything that a save game holds."""

    save_version: int = 12
    date: Date = Date()
    next_id: Id = 1
    next_event_seq: int = 1
    systems: dict[Id, StarSystem] = field(default_factory=dict)
    bodies: dict[Id, Body] = field(default_factory=dict)
    jump_points: dict[Id, JumpPoint] = field(default_factory=dict)
    ships: dict[Id, Ship] = field(default_factory=dict)
    colonies: dict[Id, Colony] = field(default_factory=dict)
    factions: dict[Id, Faction] = field(default_factory=dict)
    custom_designs: dict[str, ShipDesign] = field(default_factory=dict)
    ship_orders: dict[Id, ShipOrders] = field(default_factory=dict)
    events: list[SimEvent] = field(default_factory=list)
    selected_system: Id = INVALID_ID


def allocate_id(state: GameState) -> Id:
    """Hand out the next unused entity id and advance the counter."""
    new_id = state.next_id
    state.next_id += 1
    return new_id