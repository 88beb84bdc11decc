"""World entities, static content definitions and the persistent event record."""

from dataclasses import dataclass, field
from enum import Enum

from nebula4x.vec2 import Vec2

__all__ = [
    "Id",
    "INVALID_ID",
    "BodyType",
    "ShipRole",
    "ComponentType",
    "Body",
    "ComponentDef",
    "ShipDesign",
    "InstallationDef",
    "Ship",
    "BuildOrder",
    "InstallationBuildOrder",
    "Colony",
    "Contact",
    "Faction",
    "JumpPoint",
    "StarSystem",
    "EventLevel",
    "EventCategory",
    "SimEvent",
]

Id = int

#: The id that means "no entity".
INVALID_ID: Id = 0


class BodyType(Enum):
    STAR = 0
    PLANET = 1
    MOON = 2
    ASTEROID = 3
    GAS_GIANT = 4


class ShipRole(Enum):
    FREIGHTER = 0
    SURVEYOR = 1
    COMBATANT = 2
    UNKNOWN = 3


class ComponentType(Enum):
    ENGINE = 0
    CARGO = 1
    SENSOR = 2
    REACTOR = 3
    WEAPON = 4
    ARMOR = 5
    UNKNOWN = 6


@dataclass
class Body:
    """A star, planet or other body on a circular orbit around its system origin."""

    id: Id = INVALID_ID
    name: str = ""
    type: BodyType = BodyType.PLANET
    system_id: Id = INVALID_ID
    orbit_radius_mkm: float = 0.0
    orbit_period_days: float = 0.0
    orbit_phase_radians: float = 0.0
    position_mkm: Vec2 = Vec2()


@dataclass
class ComponentDef:
    """A ship component loaded from content; type-specific stats are 0 when not applicable."""

    id: str = ""
    name: str = ""
    type: ComponentType = ComponentType.UNKNOWN
    mass_tons: float = 0.0
    speed_km_s: float = 0.0
    cargo_tons: float = 0.0
    sensor_range_mkm: float = 0.0
    power: float = 0.0
    weapon_damage: float = 0.0
    weapon_range_mkm: float = 0.0
    hp_bonus: float = 0.0


@dataclass
class ShipDesign:
    """A named list of components together with the stats derived from them."""

    id: str = ""
    name: str = ""
    role: ShipRole = ShipRole.UNKNOWN
    components: list[str] = field(default_factory=list)
    mass_tons: float = 0.0
    speed_km_s: float = 0.0
    cargo_tons: float = 0.0
    sensor_range_mkm: float = 0.0
    max_hp: float = 0.0
    weapon_damage: float = 0.0
    weapon_range_mkm: float = 0.0


@dataclass
class InstallationDef:
    """A colony installation: production, construction, shipbuilding, sensors or research."""

    id: str = ""
    name: str = ""
    produces_per_day: dict[str, float] = field(default_factory=dict)
    construction_points_per_day: float = 0.0
    construction_cost: float = 0.0
    build_costs: dict[str, float] = field(default_factory=dict)
    build_rate_tons_per_day: float = 0.0
    build_costs_per_ton: dict[str, float] = field(default_factory=dict)
    sensor_range_mkm: float = 0.0
    research_points_per_day: float = 0.0


@dataclass
class Ship:
    id: Id = INVALID_ID
    name: str = ""
    faction_id: Id = INVALID_ID
    system_id: Id = INVALID_ID
    position_mkm: Vec2 = Vec2()
    design_id: str = ""
    speed_km_s: float = 0.0
    cargo: dict[str, float] = field(default_factory=dict)
    hp: float = 0.0


@dataclass
class BuildOrder:
    design_id: str = ""
    tons_remaining: float = 0.0


@dataclass
class InstallationBuildOrder:
    installation_id: str = ""
    quantity_remaining: int = 0
    minerals_paid: bool = False
    cp_remaining: float = 0.0


@dataclass
class Colony:
    id: Id = INVALID_ID
    name: str = ""
    faction_id: Id = INVALID_ID
    body_id: Id = INVALID_ID
    population_millions: float = 100.0
    minerals: dict[str, float] = field(default_factory=dict)
    installations: dict[str, int] = field(default_factory=dict)
    shipyard_queue: list[BuildOrder] = field(default_factory=list)
    construction_queue: list[InstallationBuildOrder] = field(default_factory=list)


@dataclass
class Contact:
    """The last known snapshot of a detected ship."""

    ship_id: Id = INVALID_ID
    system_id: Id = INVALID_ID
    last_seen_day: int = 0
    last_seen_position_mkm: Vec2 = Vec2()
    last_seen_name: str = ""
    last_seen_design_id: str = ""
    last_seen_faction_id: Id = INVALID_ID


@dataclass
class Faction:
    id: Id = INVALID_ID
    name: str = ""
    research_points: float = 0.0
    active_research_id: str = ""
    active_research_progress: float = 0.0
    research_queue: list[str] = field(default_factory=list)
    known_techs: list[str] = field(default_factory=list)
    unlocked_components: list[str] = field(default_factory=list)
    unlocked_installations: list[str] = field(default_factory=list)
    discovered_systems: list[Id] = field(default_factory=list)
    ship_contacts: dict[Id, Contact] = field(default_factory=dict)


@dataclass
class JumpPoint:
    """One end of a bidirectional link between two star systems."""

    id: Id = INVALID_ID
    name: str = ""
    system_id: Id = INVALID_ID
    position_mkm: Vec2 = Vec2()
    linked_jump_id: Id = INVALID_ID


@dataclass
class StarSystem:
    id: Id = INVALID_ID
    name: str = ""
    galaxy_pos: Vec2 = Vec2()
    bodies: list[Id] = field(default_factory=list)
    ships: list[Id] = field(default_factory=list)
    jump_points: list[Id] = field(default_factory=list)


class EventLevel(Enum):
    INFO = 0
    WARN = 1
    ERROR = 2


class EventCategory(Enum):
    """Coarse grouping of simulation events for filtering."""

    GENERAL = 0
    RESEARCH = 1
    SHIPYARD = 2
    CONSTRUCTION = 3
    MOVEMENT = 4
    COMBAT = 5
    INTEL = 6
    EXPLORATION = 7


@dataclass
class SimEvent:
    """A persistent simulation event; context ids of 0 mean "not set"."""

    seq: int = 0
    day: int = 0
    level: EventLevel = EventLevel.INFO
    category: EventCategory = EventCategory.GENERAL
    faction_id: Id = INVALID_ID
    faction_id2: Id = INVALID_ID
    system_id: Id = INVALID_ID
    ship_id: Id = INVALID_ID
    colony_id: Id = INVALID_ID
    message: str = ""