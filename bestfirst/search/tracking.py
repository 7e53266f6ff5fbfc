"""
Tracking Module - Path-recording wrapper around any SearchState.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .state import SearchState


@dataclass(frozen=True, eq=False)
class _HistoryNode:
    """One history entry linked to the entries before it."""
    state: SearchState
    cost: int
    parent: Optional["_HistoryNode"]


class Tracking(SearchState):
    """
    Wraps a state together with the path taken to reach it.

    Each history entry is (previous_state, edge_cost): the state a step was
    taken from and the cost of that step. Entries share their common prefix,
    so building a successor does not copy the history.

    Equality and hashing use the inner state only, so duplicate suppression
    behaves exactly as it does for the unwrapped state.
    """

    def __init__(self, state: SearchState):
        self._state = state
        self._tail: Optional[_HistoryNode] = None
        self._length = 0

    @classmethod
    def _extended(cls, state: SearchState, tail: _HistoryNode, length: int) -> "Tracking":
        tracked = cls(state)
        tracked._tail = tail
        tracked._length = length
        return tracked

    @property
    def state(self) -> SearchState:
        """The wrapped state."""
        return self._state

    def history(self) -> Tuple[Tuple[SearchState, int], ...]:
        """
        Get the recorded steps, oldest first.

        Returns:
            Tuple of (previous_state, edge_cost) pairs
        """
        entries: List[Tuple[SearchState, int]] = []
        node = self._tail
        while node is not None:
            entries.append((node.state, node.cost))
            node = node.parent
        entries.reverse()
        return tuple(entries)

    def path(self) -> List[SearchState]:
        """States from the initial state to this one, inclusive."""
        return [state for state, _ in self.history()] + [self._state]

    def total_cost(self) -> int:
        """Sum of the edge costs in the history."""
        total = 0
        node = self._tail
        while node is not None:
            total += node.cost
            node = node.parent
        return total

    def successor(self, state: SearchState, cost: int) -> Tuple["Tracking", int]:
        """
        Extend the path by one step.

        Args:
            state: State the step leads to
            cost: Cost of the step

        Returns:
            (tracked next state, cost)
        """
        tail = _HistoryNode(self._state, cost, self._tail)
        return Tracking._extended(state, tail, self._length + 1), cost

    def min_remaining_cost(self) -> int:
        return self._state.min_remaining_cost()

    def is_complete(self) -> bool:
        return self._state.is_complete()

    def successors(self) -> Iterator[Tuple["Tracking", int]]:
        for state, cost in self._state.successors():
            yield self.successor(state, cost)

    @property
    def steps(self) -> int:
        """Number of steps recorded."""
        return self._length

    def __eq__(self, other):
        if not isinstance(other, Tracking):
            return NotImplemented
        return self._state == other._state

    def __hash__(self):
        return hash(self._state)

    def __repr__(self):
        return f"Tracking({self._state!r}, steps={self._length})"

