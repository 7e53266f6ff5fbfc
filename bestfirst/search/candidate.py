"""
Candidate Module - Priority queue entry for best-first search.
"""

from dataclasses import dataclass, field
from typing import Iterator

from .state import SearchState


@dataclass(order=True)
class Candidate:
    """
    A state waiting in the frontier together with the cost paid to reach it.

    Ordering compares (priority, sequence) only, so heapq pops the lowest
    cost + heuristic first and breaks ties by insertion order.

    Attributes:
        priority: cost + min_remaining_cost
        sequence: Insertion counter assigned by the engine
        state: The wrapped search state
        cost: Accumulated cost from the initial state
        min_remaining_cost: Heuristic of state, computed once on creation
    """
    priority: int = field(init=False)
    sequence: int
    state: SearchState = field(compare=False)
    cost: int = field(compare=False)
    min_remaining_cost: int = field(init=False, compare=False)

    def __post_init__(self):
        self.min_remaining_cost = self.state.min_remaining_cost()
        self.priority = self.cost + self.min_remaining_cost

    def successors(self, counter: Iterator[int]) -> Iterator["Candidate"]:
        """
        Lazily build candidates for every successor of this state.

        Args:
            counter: Shared sequence source for tie-breaking

        Yields:
            Candidate with cost extended by the edge cost
        """
        for state, edge_cost in self.state.successors():
            yield Candidate(
                sequence=next(counter),
                state=state,
                cost=self.cost + edge_cost,
            )
