from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from catan_lite.logging_config import get_logger

from .adjacency import STANDARD_GRAPH, TILE_COUNT, AdjacencyGraph
from .errors import DegradedLayout, InvalidIndex
from .types import ResourceType, Tile

logger = get_logger(__name__)

STANDARD_RESOURCES = [
    ResourceType.BRICK,
    ResourceType.BRICK,
    ResourceType.BRICK,
    ResourceType.GRAIN,
    ResourceType.GRAIN,
    ResourceType.GRAIN,
    ResourceType.GRAIN,
    ResourceType.WOOD,
    ResourceType.WOOD,
    ResourceType.WOOD,
    ResourceType.WOOD,
    ResourceType.SHEEP,
    ResourceType.SHEEP,
    ResourceType.SHEEP,
    ResourceType.SHEEP,
    ResourceType.ORE,
    ResourceType.ORE,
    ResourceType.ORE,
    ResourceType.DESERT,
]

STANDARD_NUMBER_TOKENS = [2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12]

# Dice combinations producing each total.
PIP_COUNTS = {2: 1, 3: 2, 4: 3, 5: 4, 6: 5, 7: 6, 8: 5, 9: 4, 10: 3, 11: 2, 12: 1}

RED_NUMBERS = (6, 8)


def pip_count(number: Optional[int]) -> int:
    return PIP_COUNTS.get(number, 0) if number is not None else 0


@dataclass(frozen=True)
class NumberShuffleConstraints:
    no_adjacent_six_eight: bool = True
    max_attempts: int = 1000

    def __post_init__(self) -> None:
        if self.max_attempts < 0:
            raise ValueError("max_attempts must be non-negative")


@dataclass(frozen=True)
class Board:
    tiles: Tuple[Tile, ...]
    graph: AdjacencyGraph
    attempts: int = 1

    @property
    def degraded(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(self.tiles)

    def __getitem__(self, index: int) -> Tile:
        if index not in self.graph:
            raise InvalidIndex(index, len(self.tiles))
        return self.tiles[index]

    @property
    def desert_index(self) -> int:
        return next(tile.tile_id for tile in self.tiles if tile.is_desert)

    def tiles_with_number(self, number: int) -> List[Tile]:
        return [tile for tile in self.tiles if tile.number_token == number]

    def producing_tiles(self) -> List[Tile]:
        return [tile for tile in self.tiles if not tile.is_desert]

    def red_number_conflicts(self) -> List[Tuple[int, int]]:
        """Adjacent tile pairs where one carries a 6 and the other an 8."""
        conflicts = []
        for a, b in self.graph.edges():
            pair = {self.tiles[a].number_token, self.tiles[b].number_token}
            if pair == set(RED_NUMBERS):
                conflicts.append((a, b))
        return conflicts

    def require_valid(self) -> "Board":
        if self.degraded:
            raise DegradedLayout(self.attempts)
        return self

    def snapshot(self) -> Dict[str, object]:
        return {
            "degraded": self.degraded,
            "attempts": self.attempts,
            "rows": self.graph.rows(),
            "tiles": [
                {
                    "tile_id": tile.tile_id,
                    "resource": tile.resource.value,
                    "number_token": tile.number_token,
                    "pips": pip_count(tile.number_token),
                }
                for tile in self.tiles
            ],
        }


@dataclass(frozen=True)
class DegradedBoard(Board):
    """Board whose numbers were placed without the 6/8 adjacency check."""

    @property
    def degraded(self) -> bool:
        return True


def _conflicting_token(token: int) -> Optional[int]:
    if token == 6:
        return 8
    if token == 8:
        return 6
    return None


def _try_assign_numbers(
    positions: List[int],
    numbers: List[int],
    graph: AdjacencyGraph,
    constraints: NumberShuffleConstraints,
) -> Optional[Dict[int, int]]:
    numbers_by_tile: Dict[int, int] = {}
    for position, token in zip(positions, numbers):
        conflict = _conflicting_token(token)
        if constraints.no_adjacent_six_eight and conflict is not None:
            if any(numbers_by_tile.get(n) == conflict for n in graph.neighbors(position)):
                return None
        numbers_by_tile[position] = token
    return numbers_by_tile


class BoardGenerator:
    """Shuffle resources, then place number tokens by random retry."""

    def __init__(
        self,
        graph: AdjacencyGraph = STANDARD_GRAPH,
        constraints: Optional[NumberShuffleConstraints] = None,
    ):
        if len(graph) != TILE_COUNT:
            raise ValueError(f"Board graph must have {TILE_COUNT} tiles, got {len(graph)}")
        self.graph = graph
        self.constraints = constraints or NumberShuffleConstraints()

    def generate(self, rng: random.Random, strict: bool = False) -> Board:
        resources = list(STANDARD_RESOURCES)
        rng.shuffle(resources)
        desert_index = resources.index(ResourceType.DESERT)
        non_desert = [tile_id for tile_id in range(TILE_COUNT) if tile_id != desert_index]

        numbers_by_tile: Optional[Dict[int, int]] = None
        attempts = 0
        while numbers_by_tile is None and attempts < self.constraints.max_attempts:
            attempts += 1
            positions = list(non_desert)
            rng.shuffle(positions)
            numbers_by_tile = _try_assign_numbers(
                positions, STANDARD_NUMBER_TOKENS, self.graph, self.constraints
            )

        board_cls = Board
        if numbers_by_tile is None:
            logger.warning("number_placement_degraded", attempts=attempts, desert=desert_index)
            numbers_by_tile = dict(zip(non_desert, STANDARD_NUMBER_TOKENS))
            board_cls = DegradedBoard
        else:
            logger.debug("number_placement_succeeded", attempts=attempts, desert=desert_index)

        tiles = tuple(
            Tile(
                tile_id=tile_id,
                resource=resource,
                number_token=numbers_by_tile.get(tile_id),
            )
            for tile_id, resource in enumerate(resources)
        )
        board = board_cls(tiles=tiles, graph=self.graph, attempts=attempts)
        if strict:
            board.require_valid()
        return board


def standard_board(
    seed: int | None = None, constraints: NumberShuffleConstraints | None = None
) -> Board:
    rng = random.Random(seed)
    return BoardGenerator(constraints=constraints).generate(rng)
