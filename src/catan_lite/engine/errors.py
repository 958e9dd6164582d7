"""Typed failures raised by the engine.

Every error is raised before the transition that detected it touches any
state, so callers can catch it and carry on with the game unchanged.
"""

from __future__ import annotations

from typing import Dict, Optional

from .types import GamePhase, ResourceType, StructureType


class CatanError(Exception):
    """Base class for all engine errors."""


class InvalidPhase(CatanError):
    def __init__(self, action: str, phase: GamePhase, message: Optional[str] = None):
        self.action = action
        self.phase = phase
        super().__init__(message or f"Cannot {action} during phase '{phase.value}'")


class GameOver(InvalidPhase):
    def __init__(self, action: str, winner: Optional[str] = None):
        self.winner = winner
        message = f"Cannot {action}: the game is over"
        if winner is not None:
            message += f" ({winner} won)"
        super().__init__(action, GamePhase.ENDED, message)


class InsufficientResources(CatanError):
    def __init__(self, structure: StructureType, missing: Dict[ResourceType, int]):
        self.structure = structure
        self.missing = dict(missing)
        parts = ", ".join(f"{res.value}:{amount}" for res, amount in self.missing.items())
        super().__init__(f"Not enough resources for {structure.value} (missing {parts})")


class InvalidIndex(CatanError, IndexError):
    def __init__(self, index: object, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Tile index {index!r} is outside 0..{size - 1}")


class DegradedLayout(CatanError):
    """Number placement ran out of attempts and fell back to an unchecked layout."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"No valid number layout found in {attempts} attempts; "
            "adjacent 6/8 tiles may be present"
        )
