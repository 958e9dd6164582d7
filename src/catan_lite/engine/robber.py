from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, Optional

from catan_lite.logging_config import get_logger

from .board import Board
from .economy import EconomyRules
from .events import EventSink, NullSink, player_event, system_event
from .game_state import GameState, PlayerState
from .types import ResourceHand, ResourceType, empty_hand

logger = get_logger(__name__)


@dataclass
class RobberOutcome:
    discards: Dict[int, ResourceHand] = field(default_factory=dict)
    tile_index: Optional[int] = None
    stolen_from: Optional[int] = None
    stolen_resource: Optional[ResourceType] = None


def discard_half(player: PlayerState, rng: random.Random) -> ResourceHand:
    """Remove floor(total / 2) cards, one random held type at a time."""
    removed = empty_hand()
    quota = player.resource_count // 2
    for _ in range(quota):
        resource = rng.choice(player.held_resources())
        player.resources[resource] -= 1
        removed[resource] += 1
    return removed


class RobberResolver:
    """Discard, robber placement and steal for a roll of 7.

    The robber's tile is reported but not kept: nothing blocks production.
    """

    def __init__(self, rules: Optional[EconomyRules] = None, sink: Optional[EventSink] = None):
        self.rules = rules or EconomyRules()
        self.sink = sink if sink is not None else NullSink()

    def resolve(self, board: Board, state: GameState, rng: random.Random) -> RobberOutcome:
        outcome = RobberOutcome()
        self._discard(state, rng, outcome)
        self._place_robber(board, rng, outcome)
        self._steal(state, rng, outcome)
        logger.debug(
            "robber_resolved",
            discards=len(outcome.discards),
            tile=outcome.tile_index,
            stolen_from=outcome.stolen_from,
        )
        return outcome

    def _discard(self, state: GameState, rng: random.Random, outcome: RobberOutcome) -> None:
        for pid, player in enumerate(state.players):
            if player.resource_count < self.rules.discard_threshold:
                continue
            removed = discard_half(player, rng)
            outcome.discards[pid] = removed
            self.sink.emit(player_event(f"{player.name} discarded {sum(removed.values())} cards"))

    def _place_robber(self, board: Board, rng: random.Random, outcome: RobberOutcome) -> None:
        tile = rng.choice(board.producing_tiles())
        outcome.tile_index = tile.tile_id
        self.sink.emit(
            system_event(
                f"Robber moved to tile {tile.tile_id} ({tile.resource.value} {tile.number_token})"
            )
        )

    def _steal(self, state: GameState, rng: random.Random, outcome: RobberOutcome) -> None:
        thief = state.current
        others = [pid for pid in range(len(state.players)) if pid != state.current_player]
        if not others:
            self.sink.emit(system_event("No other players to steal from"))
            return

        target_id = rng.choice(others)
        target = state.players[target_id]
        held = target.held_resources()
        if not held:
            self.sink.emit(system_event(f"{target.name} has nothing to steal"))
            return

        resource = rng.choice(held)
        target.resources[resource] -= 1
        thief.resources[resource] += 1
        outcome.stolen_from = target_id
        outcome.stolen_resource = resource
        self.sink.emit(player_event(f"{thief.name} stole 1 {resource.value} from {target.name}"))
