from __future__ import annotations

from typing import Dict, FrozenSet, List, Tuple

import networkx as nx

from .errors import InvalidIndex

# Rows of the standard board, top to bottom.
ROW_LAYOUT = (3, 4, 5, 4, 3)

TILE_COUNT = sum(ROW_LAYOUT)

STANDARD_ADJACENCY: Dict[int, Tuple[int, ...]] = {
    0: (1, 3, 4),
    1: (0, 2, 4, 5),
    2: (1, 5, 6),
    3: (0, 4, 7, 8),
    4: (0, 1, 3, 5, 8, 9),
    5: (1, 2, 4, 6, 9, 10),
    6: (2, 5, 10, 11),
    7: (3, 8, 12),
    8: (3, 4, 7, 9, 12, 13),
    9: (4, 5, 8, 10, 13, 14),
    10: (5, 6, 9, 11, 14, 15),
    11: (6, 10, 15),
    12: (7, 8, 13, 16),
    13: (8, 9, 12, 14, 16, 17),
    14: (9, 10, 13, 15, 17, 18),
    15: (10, 11, 14, 18),
    16: (12, 13, 17),
    17: (13, 14, 16, 18),
    18: (14, 15, 17),
}


def build_row_positions(layout: Tuple[int, ...] = ROW_LAYOUT) -> Dict[int, Tuple[int, int]]:
    positions: Dict[int, Tuple[int, int]] = {}
    index = 0
    for row, count in enumerate(layout):
        for column in range(count):
            positions[index] = (row, column)
            index += 1
    return positions


def build_tile_graph(table: Dict[int, Tuple[int, ...]]) -> nx.Graph:
    graph = nx.Graph()
    graph.add_nodes_from(table)
    for tile_id, neighbors in table.items():
        for neighbor_id in neighbors:
            if tile_id not in table.get(neighbor_id, ()):
                raise ValueError(f"Adjacency table is not symmetric at {tile_id}-{neighbor_id}")
            graph.add_edge(tile_id, neighbor_id)
    return graph


class AdjacencyGraph:
    """Static neighbor lookup for the 19 tiles of the 3-4-5-4-3 board."""

    def __init__(self, table: Dict[int, Tuple[int, ...]] | None = None):
        self._graph = build_tile_graph(STANDARD_ADJACENCY if table is None else table)
        self._neighbors: Dict[int, FrozenSet[int]] = {
            tile_id: frozenset(self._graph.neighbors(tile_id)) for tile_id in self._graph.nodes
        }
        self._positions = build_row_positions()

    def __len__(self) -> int:
        return len(self._neighbors)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and index in self._neighbors

    def _check(self, index: object) -> int:
        if isinstance(index, bool) or not isinstance(index, int) or index not in self._neighbors:
            raise InvalidIndex(index, len(self._neighbors))
        return index

    def neighbors(self, index: int) -> FrozenSet[int]:
        return self._neighbors[self._check(index)]

    def are_adjacent(self, a: int, b: int) -> bool:
        return self._check(b) in self.neighbors(a)

    def edges(self) -> List[Tuple[int, int]]:
        return sorted((min(a, b), max(a, b)) for a, b in self._graph.edges)

    def position(self, index: int) -> Tuple[int, int]:
        """Return the (row, column) of a tile in the row layout."""
        return self._positions[self._check(index)]

    def rows(self) -> List[List[int]]:
        rows: List[List[int]] = [[] for _ in ROW_LAYOUT]
        for index in sorted(self._positions):
            row, _ = self._positions[index]
            rows[row].append(index)
        return rows

    def as_networkx(self) -> nx.Graph:
        return self._graph.copy()


STANDARD_GRAPH = AdjacencyGraph()
