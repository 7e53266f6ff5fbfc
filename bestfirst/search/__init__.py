"""
Search Package - Generic best-first (A*) search engine.

Any domain can be searched by implementing SearchState: a heuristic lower
bound on the remaining cost, a completion check, successor generation, and
equality/hashing that identifies the same place regardless of the route.

Public API:
    - SearchState: Abstract base for searchable states
    - Tracking: Wrapper recording the path to a state
    - SearchResult: Complete state, cost and metrics of a search
    - SearchMetrics: Performance statistics
    - Tracker / NullTracker: Optional progress instrumentation
    - search(): Full result or None
    - solve(): Minimal cost or None
    - solve_tracked(): (tracked final state, cost) or None

Usage:
    from bestfirst.search import solve, solve_tracked

    cost = solve(initial_state)
    if cost is None:
        print("no solution")

    tracked, cost = solve_tracked(initial_state)
    for state, step_cost in tracked.history():
        print(state, step_cost)
"""

from .state import SearchState
from .candidate import Candidate
from .tracking import Tracking
from .result import SearchResult, SearchMetrics
from .tracker import Tracker, NullTracker
from .engine import search, solve, solve_tracked

__all__ = [
    # Data structures
    "SearchState",
    "Candidate",
    "Tracking",
    "SearchResult",
    "SearchMetrics",
    # Instrumentation
    "Tracker",
    "NullTracker",
    # Engine
    "search",
    "solve",
    "solve_tracked",
]
