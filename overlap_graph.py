from collections import deque
from typing import Deque, Dict, Iterator, List, Optional, Tuple

from logging_helper import log_debug, log_trace

PIECE_LENGTH = 6
OVERLAP = 2


def overlaps(left: str, right: str) -> bool:
    return left[-OVERLAP:] == right[:OVERLAP]


class OverlapGraph:
    """Directed graph of pieces; an edge a -> b means b can follow a.

    Nodes are piece values. Successor lists keep the order in which edges
    were found while scanning the input pairwise, duplicates included.
    """

    adjacency: Dict[str, Tuple[str, ...]]

    def __init__(self, pieces: List[str]):
        self.adjacency = {}
        self._build(pieces)

    def _build(self, pieces: List[str]) -> None:
        connections: Dict[str, List[str]] = {}
        for i, piece1 in enumerate(pieces):
            for j, piece2 in enumerate(pieces):
                # Positions, not values: equal text at two positions still links
                if i != j and overlaps(piece1, piece2):
                    connections.setdefault(piece1, []).append(piece2)
        for piece, targets in connections.items():
            self.adjacency[piece] = tuple(targets)

    def neighbors(self, piece: str) -> Tuple[str, ...]:
        return self.adjacency.get(piece, ())

    def out_degree(self, piece: str) -> int:
        return len(self.neighbors(piece))

    def edges(self) -> Iterator[Tuple[str, str]]:
        for src, targets in self.adjacency.items():
            for dst in targets:
                yield src, dst

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.adjacency.values())

    def __contains__(self, piece: object) -> bool:
        return piece in self.adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self.adjacency)

    def __len__(self) -> int:
        return len(self.adjacency)


def build_graph(pieces: List[str]) -> OverlapGraph:
    graph = OverlapGraph(pieces)
    log_debug(f"Graph built: sources={len(graph)} edges={graph.edge_count()}")
    return graph


def choose_start_piece(pieces: List[str], graph: OverlapGraph) -> Optional[str]:
    """Smallest piece with exactly one successor, else the first piece."""
    if not pieces:
        return None
    candidates = [p for p in pieces if graph.out_degree(p) == 1]
    if candidates:
        return min(candidates)
    return pieces[0]


def _ordered_neighbors(graph: OverlapGraph, current: str) -> List[str]:
    # Most extensible branches first, then by value
    return sorted(graph.neighbors(current), key=lambda n: (-graph.out_degree(n), n))


def find_longest_path(graph: OverlapGraph, start_piece: Optional[str]) -> List[str]:
    """Breadth-first search over all simple paths leaving ``start_piece``.

    Exhaustive and unpruned, so exponential in the worst case. The first
    path reaching the greatest length wins; later paths of equal length do
    not replace it.
    """
    if start_piece is None:
        return []

    queue: Deque[Tuple[str, List[str]]] = deque([(start_piece, [start_piece])])
    longest_path: List[str] = []
    expanded = 0

    while queue:
        current, path = queue.popleft()
        expanded += 1
        if len(path) > len(longest_path):
            longest_path = path
            log_trace(f"New longest path ({len(path)}) ending at {current}")

        for neighbor in _ordered_neighbors(graph, current):
            if neighbor not in path and overlaps(current, neighbor):
                queue.append((neighbor, path + [neighbor]))

    log_debug(f"Chain search from {start_piece}: expanded={expanded} longest={len(longest_path)}")
    return longest_path
