from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from .types import PRODUCIBLE_RESOURCES, GamePhase, ResourceHand, ResourceType, coerce_resource, empty_hand


@dataclass
class Buildings:
    roads: int = 0
    settlements: int = 0
    cities: int = 0

    @property
    def victory_points(self) -> int:
        return self.settlements + 2 * self.cities


@dataclass
class PlayerState:
    name: str
    resources: ResourceHand = field(default_factory=empty_hand)
    buildings: Buildings = field(default_factory=Buildings)
    score: int = 0

    @property
    def resource_count(self) -> int:
        return sum(self.resources.values())

    def held_resources(self) -> List[ResourceType]:
        return [res for res in PRODUCIBLE_RESOURCES if self.resources.get(res, 0) > 0]

    def hand_str(self) -> str:
        return ", ".join(f"{res.value}:{self.resources[res]}" for res in PRODUCIBLE_RESOURCES)

    def snapshot(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "resources": {res.value: self.resources[res] for res in PRODUCIBLE_RESOURCES},
            "buildings": {
                "roads": self.buildings.roads,
                "settlements": self.buildings.settlements,
                "cities": self.buildings.cities,
            },
            "score": self.score,
        }


def make_player(name: str, resources: Optional[Mapping[object, int]] = None) -> PlayerState:
    hand = empty_hand()
    for key, amount in (resources or {}).items():
        resource = coerce_resource(key)
        if resource == ResourceType.DESERT:
            raise ValueError("Desert is not a holdable resource")
        if amount < 0:
            raise ValueError(f"Resource count for {resource.value} cannot be negative")
        hand[resource] = int(amount)
    return PlayerState(name=name, resources=hand)


@dataclass
class GameState:
    players: List[PlayerState] = field(default_factory=list)
    current_player: int = 0
    phase: GamePhase = GamePhase.SETUP
    turn_index: int = 0
    last_roll: Optional[int] = None
    winner: Optional[int] = None

    @property
    def current(self) -> PlayerState:
        return self.players[self.current_player]

    @property
    def winner_name(self) -> Optional[str]:
        if self.winner is None:
            return None
        return self.players[self.winner].name

    def status_line(self) -> str:
        if self.phase == GamePhase.ENDED:
            return f"Game over: {self.winner_name} wins"
        if not self.players:
            return f"Phase {self.phase.value} | no players"
        return f"Turn {self.turn_index} | {self.current.name} | Phase {self.phase.value}"

    def snapshot(self) -> Dict[str, object]:
        return {
            "phase": self.phase.value,
            "current_player": self.current_player,
            "turn_index": self.turn_index,
            "last_roll": self.last_roll,
            "winner": self.winner_name,
            "players": [player.snapshot() for player in self.players],
        }
