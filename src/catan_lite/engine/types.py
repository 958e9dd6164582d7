from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class ResourceType(str, Enum):
    BRICK = "brick"
    GRAIN = "grain"
    WOOD = "wood"
    SHEEP = "sheep"
    ORE = "ore"
    DESERT = "desert"


PRODUCIBLE_RESOURCES = (
    ResourceType.BRICK,
    ResourceType.GRAIN,
    ResourceType.WOOD,
    ResourceType.SHEEP,
    ResourceType.ORE,
)


class StructureType(str, Enum):
    ROAD = "road"
    SETTLEMENT = "settlement"
    CITY = "city"


class GamePhase(str, Enum):
    SETUP = "setup"
    PLAYING = "playing"
    ENDED = "ended"


class EventKind(str, Enum):
    PLAYER = "player"
    SYSTEM = "system"


ResourceHand = Dict[ResourceType, int]


@dataclass(frozen=True)
class Tile:
    tile_id: int
    resource: ResourceType
    number_token: Optional[int]

    @property
    def is_desert(self) -> bool:
        return self.resource == ResourceType.DESERT


@dataclass(frozen=True)
class LogEvent:
    text: str
    kind: EventKind = EventKind.SYSTEM


@dataclass(frozen=True)
class DiceRoll:
    die1: int
    die2: int

    @property
    def total(self) -> int:
        return self.die1 + self.die2

    def __iter__(self):
        # Unpacks as (die1, die2, total).
        return iter((self.die1, self.die2, self.total))


def empty_hand() -> ResourceHand:
    return {resource: 0 for resource in PRODUCIBLE_RESOURCES}


def coerce_resource(value: object) -> ResourceType:
    """Accept either a ResourceType or its string value."""
    if isinstance(value, ResourceType):
        return value
    return ResourceType(str(value).lower())
