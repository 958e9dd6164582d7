"""Core game engine: board generation, economy, robber and turn order."""

from .adjacency import STANDARD_GRAPH, AdjacencyGraph
from .board import Board, BoardGenerator, DegradedBoard, NumberShuffleConstraints, standard_board
from .economy import COSTS, EconomyRules, ResourceEconomy
from .errors import (
    CatanError,
    DegradedLayout,
    GameOver,
    InsufficientResources,
    InvalidIndex,
    InvalidPhase,
)
from .events import EventLog, EventSink, FanoutSink, LoggingSink, NullSink
from .game_state import Buildings, GameState, PlayerState
from .robber import RobberOutcome, RobberResolver
from .turn import TurnEngine
from .types import DiceRoll, EventKind, GamePhase, LogEvent, ResourceType, StructureType, Tile

__all__ = [
    "AdjacencyGraph",
    "STANDARD_GRAPH",
    "Board",
    "BoardGenerator",
    "DegradedBoard",
    "NumberShuffleConstraints",
    "standard_board",
    "COSTS",
    "EconomyRules",
    "ResourceEconomy",
    "CatanError",
    "DegradedLayout",
    "GameOver",
    "InsufficientResources",
    "InvalidIndex",
    "InvalidPhase",
    "EventLog",
    "EventSink",
    "FanoutSink",
    "LoggingSink",
    "NullSink",
    "Buildings",
    "GameState",
    "PlayerState",
    "RobberOutcome",
    "RobberResolver",
    "TurnEngine",
    "DiceRoll",
    "EventKind",
    "GamePhase",
    "LogEvent",
    "ResourceType",
    "StructureType",
    "Tile",
]
