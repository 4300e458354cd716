from collections import deque
from dataclasses import dataclass
from typing import Deque, List, NamedTuple, Optional

from logging_helper import log_debug, log_trace
from overlap_graph import (
    OVERLAP,
    OverlapGraph,
    build_graph,
    choose_start_piece,
    find_longest_path,
    overlaps,
)


class ValidityReport(NamedTuple):
    valid: bool
    first_bad_index: int


@dataclass(frozen=True)
class AssemblyResult:
    pieces: List[str]
    graph: OverlapGraph
    start_piece: Optional[str]
    chain: List[str]
    sequence: List[str]
    report: ValidityReport
    merged: str

    @property
    def dropped(self) -> List[str]:
        """Input pieces whose value never made it into the final sequence."""
        present = set(self.sequence)
        return [p for p in self.pieces if p not in present]


def improve_with_remaining(pieces: List[str], chain: List[str]) -> List[str]:
    """Splice unused pieces onto either end of ``chain``.

    One sweep over the unused pieces in sorted order. A piece that only
    fits after a later splice moves an end is not retried.
    """
    if not chain:
        return []

    used = set(chain)
    remaining = sorted(p for p in pieces if p not in used)
    sequence: Deque[str] = deque(chain)

    for piece in remaining:
        if overlaps(sequence[-1], piece):
            sequence.append(piece)
            log_trace(f"Repair: appended {piece}")
        elif overlaps(piece, sequence[0]):
            sequence.appendleft(piece)
            log_trace(f"Repair: prepended {piece}")
        else:
            log_trace(f"Repair: dropped {piece}")

    return list(sequence)


def validate_sequence(sequence: List[str]) -> ValidityReport:
    for i in range(len(sequence) - 1):
        if not overlaps(sequence[i], sequence[i + 1]):
            return ValidityReport(False, i)
    return ValidityReport(True, -1)


def merge_sequence(sequence: List[str]) -> str:
    if not sequence:
        return ""
    parts: List[str] = [sequence[0]]
    for piece in sequence[1:]:
        parts.append(piece[OVERLAP:])
    return ''.join(parts)


def assemble(pieces: List[str]) -> AssemblyResult:
    graph = build_graph(pieces)
    start_piece = choose_start_piece(pieces, graph)
    log_debug(f"Start piece: {start_piece}")

    chain = find_longest_path(graph, start_piece)
    sequence = improve_with_remaining(pieces, chain)
    log_debug(f"Repair: chain={len(chain)} final={len(sequence)}")

    report = validate_sequence(sequence)
    result = AssemblyResult(
        pieces=list(pieces),
        graph=graph,
        start_piece=start_piece,
        chain=chain,
        sequence=sequence,
        report=report,
        merged=merge_sequence(sequence),
    )
    log_debug(f"Repair: dropped={len(result.dropped)}")
    return result
