"""
Result Module - Outcome of a successful search and its statistics.
"""

from dataclasses import dataclass, field

from .state import SearchState


@dataclass
class SearchMetrics:
    """
    Performance metrics for one search run.

    Attributes:
        computation_time_ms: Wall time of the search in milliseconds
        states_expanded: States whose successors were generated
        candidates_pushed: Candidates added to the frontier, initial included
        stale_discarded: Popped candidates dropped because already visited
        max_frontier: Largest frontier size seen
    """
    computation_time_ms: float = 0.0
    states_expanded: int = 0
    candidates_pushed: int = 0
    stale_discarded: int = 0
    max_frontier: int = 0


@dataclass
class SearchResult:
    """
    A completion state reached at minimal cost.

    Attributes:
        state: The complete state that ended the search
        cost: Total accumulated cost from the initial state
        metrics: Statistics for the run
    """
    state: SearchState
    cost: int
    metrics: SearchMetrics = field(default_factory=SearchMetrics)
