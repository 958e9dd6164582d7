from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional

from catan_lite.logging_config import get_logger

from .board import Board
from .errors import GameOver, InsufficientResources, InvalidPhase
from .events import EventSink, NullSink, player_event, system_event
from .game_state import GameState, PlayerState
from .types import GamePhase, ResourceHand, ResourceType, StructureType, empty_hand

logger = get_logger(__name__)

COSTS: Dict[StructureType, Dict[ResourceType, int]] = {
    StructureType.ROAD: {
        ResourceType.WOOD: 1,
        ResourceType.BRICK: 1,
    },
    StructureType.SETTLEMENT: {
        ResourceType.WOOD: 1,
        ResourceType.BRICK: 1,
        ResourceType.GRAIN: 1,
        ResourceType.SHEEP: 1,
    },
    StructureType.CITY: {
        ResourceType.GRAIN: 2,
        ResourceType.ORE: 3,
    },
}


@dataclass(frozen=True)
class EconomyRules:
    # Chance that a player counts as owning a settlement on a producing tile.
    # Stands in for per-vertex placement, which is not tracked.
    ownership_chance: float = 0.30
    victory_points_to_win: int = 10
    discard_threshold: int = 8

    def __post_init__(self) -> None:
        if not 0.0 <= self.ownership_chance <= 1.0:
            raise ValueError("ownership_chance must be between 0 and 1")
        if self.victory_points_to_win < 1:
            raise ValueError("victory_points_to_win must be positive")
        if self.discard_threshold < 1:
            raise ValueError("discard_threshold must be positive")


def missing_resources(hand: ResourceHand, cost: Dict[ResourceType, int]) -> Dict[ResourceType, int]:
    missing: Dict[ResourceType, int] = {}
    for resource, amount in cost.items():
        short = amount - hand.get(resource, 0)
        if short > 0:
            missing[resource] = short
    return missing


def can_afford(hand: ResourceHand, structure: StructureType) -> bool:
    return not missing_resources(hand, COSTS[StructureType(structure)])


def _pay_cost(hand: ResourceHand, cost: Dict[ResourceType, int]) -> None:
    for resource, amount in cost.items():
        hand[resource] -= amount


def _add_building(player: PlayerState, structure: StructureType) -> None:
    buildings = player.buildings
    if structure == StructureType.ROAD:
        buildings.roads += 1
    elif structure == StructureType.SETTLEMENT:
        buildings.settlements += 1
    else:
        # Upgrade: the city replaces a settlement if there is one, but one is not required.
        buildings.cities += 1
        if buildings.settlements > 0:
            buildings.settlements -= 1
    player.score = buildings.victory_points


class ResourceEconomy:
    """Production on dice rolls and construction paid from a player's hand."""

    def __init__(self, rules: Optional[EconomyRules] = None, sink: Optional[EventSink] = None):
        self.rules = rules or EconomyRules()
        self.sink = sink if sink is not None else NullSink()

    def distribute(
        self, total: int, board: Board, state: GameState, rng: random.Random
    ) -> List[ResourceHand]:
        """Hand out resources for a roll; returns the gains of each player by index."""
        gains: List[ResourceHand] = [empty_hand() for _ in state.players]
        producing = board.tiles_with_number(total)
        if not producing:
            self.sink.emit(system_event(f"No hexes produce resources for {total}"))
            return gains

        collected = False
        for tile in producing:
            for pid, player in enumerate(state.players):
                if rng.random() >= self.rules.ownership_chance:
                    continue
                player.resources[tile.resource] += 1
                gains[pid][tile.resource] += 1
                collected = True
                self.sink.emit(
                    player_event(
                        f"{player.name} collected 1 {tile.resource.value} "
                        f"from tile {tile.tile_id} ({total})"
                    )
                )

        if not collected:
            self.sink.emit(system_event(f"No one collected resources on {total}"))
        logger.debug("resources_distributed", total=total, tiles=len(producing), collected=collected)
        return gains

    def build_structure(
        self, state: GameState, player_index: int, structure: StructureType | str
    ) -> PlayerState:
        structure = StructureType(structure)
        action = f"build a {structure.value}"
        if state.phase == GamePhase.ENDED:
            raise GameOver(action, state.winner_name)
        if state.phase != GamePhase.PLAYING:
            raise InvalidPhase(action, state.phase)
        if not 0 <= player_index < len(state.players):
            raise ValueError(f"Unknown player index {player_index}")

        player = state.players[player_index]
        cost = COSTS[structure]
        missing = missing_resources(player.resources, cost)
        if missing:
            raise InsufficientResources(structure, missing)

        _pay_cost(player.resources, cost)
        _add_building(player, structure)
        self.sink.emit(player_event(f"{player.name} built a {structure.value}"))
        logger.info("structure_built", player=player.name, structure=structure.value, score=player.score)

        if player.score >= self.rules.victory_points_to_win:
            state.phase = GamePhase.ENDED
            state.winner = player_index
            self.sink.emit(system_event(f"{player.name} wins with {player.score} victory points!"))
            logger.info("game_won", player=player.name, score=player.score)
        return player
