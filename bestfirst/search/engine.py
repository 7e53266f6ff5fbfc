"""
Search Engine Module - Best-first (A*) search over any SearchState.

The frontier is a heapq min-heap of Candidates ordered by
cost + min_remaining_cost, ties broken by insertion order. A state is
marked visited the first time it is popped; later candidates for an equal
state are stale and dropped without expansion. With non-negative edge costs
and an admissible heuristic the first complete state popped is optimal.

Searching runs to completion on the calling thread. There is no timeout
and no cancellation, and memory grows with the frontier.
"""

import heapq
import itertools
import logging
import time
from typing import List, Optional, Set, Tuple, Union

from .candidate import Candidate
from .result import SearchMetrics, SearchResult
from .state import SearchState
from .tracker import NullTracker, Tracker
from .tracking import Tracking

logger = logging.getLogger(__name__)


def search(
    initial_state: SearchState,
    tracker: Optional[Union[Tracker, NullTracker]] = None,
) -> Optional[SearchResult]:
    """
    Find a minimal-cost path from initial_state to any complete state.

    Args:
        initial_state: Starting point, reached at cost 0
        tracker: Optional instrumentation, one operation per expansion

    Returns:
        SearchResult with the complete state, its cost and run metrics,
        or None if the frontier empties without reaching a complete state
    """
    if tracker is None:
        tracker = NullTracker()

    start_time = time.perf_counter()
    metrics = SearchMetrics()
    counter = itertools.count()
    visited: Set[SearchState] = set()
    frontier: List[Candidate] = [Candidate(sequence=next(counter), state=initial_state, cost=0)]
    metrics.candidates_pushed = 1
    metrics.max_frontier = 1

    logger.debug(f"Search started from {initial_state!r}")

    while frontier:
        candidate = heapq.heappop(frontier)

        if candidate.state.is_complete():
            metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
            logger.debug(
                f"Search complete: cost={candidate.cost}, "
                f"expanded={metrics.states_expanded}, pushed={metrics.candidates_pushed}"
            )
            return SearchResult(state=candidate.state, cost=candidate.cost, metrics=metrics)

        if candidate.state in visited:
            metrics.stale_discarded += 1
            continue

        visited.add(candidate.state)

        with tracker.track_operation() as operation:
            with operation.track_duration("successors"):
                for successor in candidate.successors(counter):
                    if successor.state not in visited:
                        heapq.heappush(frontier, successor)
                        metrics.candidates_pushed += 1
            metrics.states_expanded += 1

        metrics.max_frontier = max(metrics.max_frontier, len(frontier))

    metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
    logger.debug(
        f"Search exhausted: expanded={metrics.states_expanded}, "
        f"pushed={metrics.candidates_pushed}, stale={metrics.stale_discarded}"
    )
    return None


def solve(
    initial_state: SearchState,
    tracker: Optional[Union[Tracker, NullTracker]] = None,
) -> Optional[int]:
    """
    Minimal cost to reach a complete state.

    Args:
        initial_state: Starting point, reached at cost 0
        tracker: Optional instrumentation

    Returns:
        Minimal cost, or None if no complete state is reachable
    """
    result = search(initial_state, tracker)
    if result is None:
        return None
    return result.cost


def solve_tracked(
    initial_state: SearchState,
    tracker: Optional[Union[Tracker, NullTracker]] = None,
) -> Optional[Tuple[Tracking, int]]:
    """
    Minimal cost to reach a complete state, together with the path taken.

    Args:
        initial_state: Starting point, reached at cost 0
        tracker: Optional instrumentation

    Returns:
        (final tracked state, cost), or None if no complete state is reachable.
        The tracked state's history() lists (state, edge_cost) for each step.
    """
    result = search(Tracking(initial_state), tracker)
    if result is None:
        return None
    return result.state, result.cost
