from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from catan_lite.engine.board import Board, BoardGenerator, NumberShuffleConstraints
from catan_lite.engine.economy import EconomyRules
from catan_lite.engine.events import EventLog, FanoutSink, LoggingSink
from catan_lite.engine.game_state import PlayerState
from catan_lite.engine.turn import TurnEngine
from catan_lite.engine.types import DiceRoll, StructureType
from catan_lite.logging_config import configure_logging
from catan_lite.utils.repro import make_rng

# Starting table used for demos: name and opening hand.
SAMPLE_ROSTER: Tuple[Tuple[str, Dict[str, int]], ...] = (
    ("You", {"wood": 2, "brick": 3, "grain": 1, "ore": 0, "sheep": 2}),
    ("Alice", {"wood": 1, "brick": 1, "grain": 2, "ore": 1, "sheep": 1}),
    ("Bob", {"wood": 3, "brick": 0, "grain": 1, "ore": 2, "sheep": 1}),
    ("Carol", {"wood": 1, "brick": 2, "grain": 0, "ore": 1, "sheep": 3}),
)


def sample_roster() -> List[Tuple[str, Dict[str, int]]]:
    return [(name, dict(hand)) for name, hand in SAMPLE_ROSTER]


@dataclass(frozen=True)
class SessionSpec:
    player_names: Tuple[str, ...] = ()
    seed: Optional[int] = None
    max_attempts: int = 1000
    strict_layout: bool = False
    environment: str = "development"
    rules: EconomyRules = field(default_factory=EconomyRules)

    def to_dict(self) -> Dict[str, object]:
        return {
            "player_names": list(self.player_names),
            "seed": self.seed,
            "max_attempts": self.max_attempts,
            "strict_layout": self.strict_layout,
            "environment": self.environment,
            "ownership_chance": self.rules.ownership_chance,
            "victory_points_to_win": self.rules.victory_points_to_win,
            "discard_threshold": self.rules.discard_threshold,
        }


class GameSession:
    """Owning application: generates the board once and runs one game on it.

    With no player names the sample roster is seated. With `log_events`
    structlog is configured for `spec.environment` and events are mirrored
    to it.
    """

    def __init__(self, spec: Optional[SessionSpec] = None, log_events: bool = False):
        self.spec = spec or SessionSpec()
        if log_events:
            configure_logging(self.spec.environment)
        self.events = EventLog()
        sinks = [self.events, LoggingSink()] if log_events else [self.events]
        self._sink = FanoutSink(sinks)
        self._engine: Optional[TurnEngine] = None

    def reset(self, seed: Optional[int] = None) -> Dict[str, object]:
        seed = self.spec.seed if seed is None else seed
        rng = make_rng(seed)
        generator = BoardGenerator(
            constraints=NumberShuffleConstraints(max_attempts=self.spec.max_attempts)
        )
        board = generator.generate(rng, strict=self.spec.strict_layout)

        self.events.clear()
        engine = TurnEngine(board, rng=rng, rules=self.spec.rules, sink=self._sink)
        if self.spec.player_names:
            for name in self.spec.player_names:
                engine.add_player(name)
        else:
            for name, hand in sample_roster():
                engine.add_player(name, hand)
        engine.start()
        self._engine = engine
        return self.observation()

    @property
    def engine(self) -> TurnEngine:
        if self._engine is None:
            raise RuntimeError("Session not reset")
        return self._engine

    @property
    def board(self) -> Board:
        return self.engine.board

    def roll(self) -> DiceRoll:
        return self.engine.roll_dice()

    def build(self, structure: StructureType | str) -> PlayerState:
        return self.engine.build(structure)

    def end_turn(self) -> PlayerState:
        return self.engine.end_turn()

    def observation(self) -> Dict[str, object]:
        return {
            "board": self.engine.board.snapshot(),
            "state": self.engine.state.snapshot(),
            "status": self.engine.state.status_line(),
        }
