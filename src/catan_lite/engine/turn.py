from __future__ import annotations

import random
from typing import List, Mapping, Optional, Union

from catan_lite.logging_config import get_logger

from .board import Board
from .economy import EconomyRules, ResourceEconomy
from .errors import GameOver, InvalidPhase
from .events import EventSink, NullSink, system_event
from .game_state import GameState, PlayerState, make_player
from .robber import RobberOutcome, RobberResolver
from .types import DiceRoll, GamePhase, ResourceHand, StructureType

logger = get_logger(__name__)

RollOutcome = Union[RobberOutcome, List[ResourceHand]]


class TurnEngine:
    """Owns the GameState and drives it through rolls, builds and turn changes."""

    def __init__(
        self,
        board: Board,
        rng: Optional[random.Random] = None,
        rules: Optional[EconomyRules] = None,
        sink: Optional[EventSink] = None,
    ):
        self.board = board
        self.rng = rng or random.Random()
        self.rules = rules or EconomyRules()
        self.sink = sink if sink is not None else NullSink()
        self.economy = ResourceEconomy(self.rules, self.sink)
        self.robber = RobberResolver(self.rules, self.sink)
        self.state = GameState()
        self.last_outcome: Optional[RollOutcome] = None

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    def _require_playing(self, action: str) -> None:
        if self.state.phase == GamePhase.ENDED:
            raise GameOver(action, self.state.winner_name)
        if self.state.phase != GamePhase.PLAYING:
            raise InvalidPhase(action, self.state.phase)
        if not self.state.players:
            raise InvalidPhase(action, self.state.phase, f"Cannot {action}: no players")

    def add_player(self, name: str, resources: Optional[Mapping[object, int]] = None) -> PlayerState:
        if self.state.phase != GamePhase.SETUP:
            raise InvalidPhase("add a player", self.state.phase)
        if not name:
            raise ValueError("Player name cannot be empty")
        player = make_player(name, resources)
        self.state.players.append(player)
        return player

    def start(self) -> GameState:
        if self.state.phase != GamePhase.SETUP:
            raise InvalidPhase("start the game", self.state.phase)
        if not self.state.players:
            raise InvalidPhase("start the game", self.state.phase, "Cannot start without players")
        self.state.phase = GamePhase.PLAYING
        self.sink.emit(system_event(f"Game started with {len(self.state.players)} players"))
        logger.info("game_started", players=[p.name for p in self.state.players])
        return self.state

    def roll_dice(self, rng: Optional[random.Random] = None) -> DiceRoll:
        self._require_playing("roll the dice")
        rng = rng or self.rng
        roll = DiceRoll(rng.randint(1, 6), rng.randint(1, 6))
        self.state.last_roll = roll.total

        self.sink.emit(
            system_event(f"{self.state.current.name} rolled {roll.die1} + {roll.die2} = {roll.total}")
        )
        if roll.total == 7:
            self.last_outcome = self.robber.resolve(self.board, self.state, rng)
        else:
            self.last_outcome = self.economy.distribute(roll.total, self.board, self.state, rng)
        logger.debug("dice_rolled", player=self.state.current.name, total=roll.total)
        return roll

    def build(self, structure: StructureType | str) -> PlayerState:
        return self.economy.build_structure(self.state, self.state.current_player, structure)

    def end_turn(self) -> PlayerState:
        self._require_playing("end the turn")
        self.state.current_player = (self.state.current_player + 1) % len(self.state.players)
        self.state.turn_index += 1
        self.state.last_roll = None
        player = self.state.current
        self.sink.emit(system_event(f"It's {player.name}'s turn"))
        return player
