"""Ship orders and per-ship order queues."""

from dataclasses import dataclass, field
from typing import Union

from nebula4x.entities import INVALID_ID, Id
from nebula4x.vec2 import Vec2

__all__ = [
    "MoveToPoint",
    "MoveToBody",
    "TravelViaJump",
    "AttackShip",
    "WaitDays",
    "LoadMineral",
    "UnloadMineral",
    "Order",
    "ShipOrders",
]


@dataclass
class MoveToPoint:
    target_mkm: Vec2 = Vec2()


@dataclass
class MoveToBody:
    body_id: Id = INVALID_ID


@dataclass
class TravelViaJump:
    """Move to a jump point and transit to the linked system on arrival."""

    jump_point_id: Id = INVALID_ID


@dataclass
class AttackShip:
    """Close with and engage a target, remembering where it was last seen."""

    target_ship_id: Id = INVALID_ID
    has_last_known: bool = False
    last_known_position_mkm: Vec2 = Vec2()


@dataclass
class WaitDays:
    days_remaining: int = 0


@dataclass
class LoadMineral:
    """Load from a colony; an empty mineral means all, tons <= 0 means as much as possible."""

    colony_id: Id = INVALID_ID
    mineral: str = ""
    tons: float = 0.0


@dataclass
class UnloadMineral:
    """Unload to a colony; an empty mineral means all, tons <= 0 means as much as possible."""

    colony_id: Id = INVALID_ID
    mineral: str = ""
    tons: float = 0.0


Order = Union[MoveToPoint, MoveToBody, TravelViaJump, AttackShip, WaitDays, LoadMineral, UnloadMineral]


@dataclass
class ShipOrders:
    """A ship's order queue; with ``repeat`` set, an empty queue refills from the template."""

    queue: list[Order] = field(default_factory=list)
    repeat: bool = False
    repeat_template: list[Order] = field(default_factory=list)