"""
Coverage accounting derived from visited sets.

Input coverage: distinct alphabet symbols seen in accepted events.
FSM coverage: distinct (pre_state, symbol class) edges exercised, out of
every edge in the transition table.
"""
from typing import Iterable, Set, Tuple

from dutcheck.engine.packet_generator import DEFAULT_ALPHABET
from dutcheck.engine.protocol_model import ALL_EDGES
from dutcheck.models import CoverageEdge, CoverageReport, FSMState, SymbolClass


class CoverageTracker:
    """Visited-input and visited-edge sets for one session"""

    def __init__(
        self,
        alphabet: Iterable[str] = DEFAULT_ALPHABET,
        edges: Iterable[Tuple[FSMState, SymbolClass]] = ALL_EDGES,
    ):
        self.alphabet = tuple(alphabet)
        self.edges = tuple(edges)
        self._symbols_seen: Set[str] = set()
        self._edges_seen: Set[Tuple[FSMState, SymbolClass]] = set()

    def record(self, symbol: str, pre_state: FSMState, symbol_class: SymbolClass) -> None:
        """Mark an accepted event. Symbols outside the alphabet are not counted."""
        if symbol in self.alphabet:
            self._symbols_seen.add(symbol)
        edge = (pre_state, symbol_class)
        if edge in self.edges:
            self._edges_seen.add(edge)

    def reset(self) -> None:
        self._symbols_seen.clear()
        self._edges_seen.clear()

    @property
    def input_coverage(self) -> float:
        if not self.alphabet:
            return 0.0
        return min(100.0, len(self._symbols_seen) / len(self.alphabet) * 100)

    @property
    def fsm_coverage(self) -> float:
        if not self.edges:
            return 0.0
        return min(100.0, len(self._edges_seen) / len(self.edges) * 100)

    def report(self) -> CoverageReport:
        return CoverageReport(
            input_coverage=self.input_coverage,
            fsm_coverage=self.fsm_coverage,
            symbols_seen=[s for s in self.alphabet if s in self._symbols_seen],
            symbols_missing=[s for s in self.alphabet if s not in self._symbols_seen],
            edges_exercised=[
                CoverageEdge(state=state, symbol_class=cls)
                for state, cls in self.edges
                if (state, cls) in self._edges_seen
            ],
            edges_missing=[
                CoverageEdge(state=state, symbol_class=cls)
                for state, cls in self.edges
                if (state, cls) not in self._edges_seen
            ],
        )
