"""
Search State Module - Abstract base class for searchable states.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Tuple


class SearchState(ABC):
    """
    Abstract base class for any point in a search space.

    Subclasses must implement min_remaining_cost(), is_complete() and
    successors(), and must define __eq__ and __hash__ so that two states
    describing the same place compare equal however they were reached.

    The engine trusts every subclass to keep min_remaining_cost() admissible
    (never above the true remaining cost) and every edge cost non-negative.
    Neither is checked; breaking them gives silently wrong answers.
    """

    @abstractmethod
    def min_remaining_cost(self) -> int:
        """
        Lower bound on the cost still needed to reach a complete state.

        Returns:
            Non-negative integer estimate
        """
        pass

    @abstractmethod
    def is_complete(self) -> bool:
        """
        Check whether this state is a goal.

        Returns:
            True if the search may stop here
        """
        pass

    @abstractmethod
    def successors(self) -> Iterable[Tuple["SearchState", int]]:
        """
        Generate states reachable in one step.

        May be a generator; the engine consumes it once.

        Returns:
            Iterable of (next_state, edge_cost) pairs
        """
        pass
