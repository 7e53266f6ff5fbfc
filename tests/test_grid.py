"""
Test script for the weighted grid domain

Tests:
1. Position / Direction helpers
2. WeightGrid parsing and validation
3. GridState searched end to end, tracked and untracked

Usage:
    python tests/test_grid.py
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bestfirst.grid import Direction, GridState, Position, WeightGrid
from bestfirst.search import search, solve, solve_tracked


SAMPLE_GRID = [
    "1163751742",
    "1381373672",
    "2136511328",
    "3694931569",
    "7463417111",
    "1319128137",
    "1359912421",
    "3125421639",
    "1293138521",
    "2311944581",
]


def test_position_helpers():
    origin = Position(0, 0)

    assert origin.step(Direction.NORTH) == Position(0, -1)
    assert origin.step(Direction.EAST) == Position(1, 0)
    assert origin.step(Direction.SOUTH) == Position(0, 1)
    assert origin.step(Direction.WEST) == Position(-1, 0)
    assert origin.offset(3, -2) == Position(3, -2)
    assert Position(1, 2).distance_to(Position(4, -2)) == 7
    assert list(origin.adjacent()) == [
        Position(0, -1), Position(1, 0), Position(0, 1), Position(-1, 0)
    ]


def test_direction_chars():
    assert "".join(direction.to_char() for direction in Direction) == "^>v<"


def test_direction_between_neighbours():
    origin = Position(2, 2)
    for direction in Direction:
        assert origin.direction_to(origin.step(direction)) is direction

    for far in (Position(2, 2), Position(3, 3), Position(2, 4)):
        with pytest.raises(ValueError):
            origin.direction_to(far)


def test_grid_from_lines():
    """Parse digits into a numpy-backed grid."""
    print("\n" + "="*60)
    print("TEST: WeightGrid Parsing")
    print("="*60)

    grid = WeightGrid.from_lines(["123", "456", ""])
    print(f"  Grid {grid.width}x{grid.height}, min weight {grid.min_weight}")

    assert grid.width == 3
    assert grid.height == 2
    assert grid.min_weight == 1
    assert grid.get(Position(0, 0)) == 1
    assert grid.get(Position(2, 1)) == 6
    assert grid.get(Position(3, 0)) is None
    assert grid.get(Position(0, -1)) is None
    assert grid.bottom_right == Position(2, 1)
    assert not grid.weights.flags.writeable
    print("  [PASS] WeightGrid parsing")


@pytest.mark.parametrize("lines", [
    [],
    ["", "   "],
    ["123", "45"],
    ["12a"],
    ["1 2"],
])
def test_grid_rejects_bad_input(lines):
    with pytest.raises(ValueError):
        WeightGrid.from_lines(lines)


def test_grid_rejects_negative_weights():
    with pytest.raises(ValueError):
        WeightGrid(np.array([[1, -1]]))
    with pytest.raises(ValueError):
        WeightGrid(np.array([1, 2, 3]))


def test_grid_rejects_fractional_weights():
    """Float arrays are refused rather than truncated."""
    print("\n" + "="*60)
    print("TEST: WeightGrid dtype check")
    print("="*60)

    with pytest.raises(ValueError):
        WeightGrid(np.array([[0.5, 1.9]]))
    with pytest.raises(ValueError):
        WeightGrid(np.array([[1.0, 2.0]]))
    with pytest.raises(ValueError):
        WeightGrid(np.array([[True, False]]))

    grid = WeightGrid(np.array([[0, 1]], dtype=np.uint8))
    assert grid.get(Position(1, 0)) == 1
    print("  [PASS] WeightGrid dtype check")


def test_grid_load(tmp_path):
    path = tmp_path / "grid.txt"
    path.write_text("\n".join(SAMPLE_GRID) + "\n", encoding="utf-8")

    grid = WeightGrid.load(path)
    assert (grid.width, grid.height) == (10, 10)
    assert grid.get(Position(9, 9)) == 1


def test_grid_state_identity():
    grid = WeightGrid.from_lines(["12", "34"])
    a = GridState(grid, Position(1, 0), Position(1, 1))
    b = GridState(grid, Position(1, 0), Position(1, 1))
    c = GridState(grid, Position(1, 0), Position(0, 1))

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert sorted((s.position.x, s.position.y, cost) for s, cost in a.successors()) == [
        (0, 0, 1), (1, 1, 4)
    ]


def test_sample_grid_lowest_total():
    """Known answer for the 10x10 sample."""
    print("\n" + "="*60)
    print("TEST: Sample Grid Search")
    print("="*60)

    grid = WeightGrid.from_lines(SAMPLE_GRID)
    result = search(GridState.start(grid))
    print(f"  Cost: {result.cost}")
    print(f"  Metrics: {result.metrics}")

    assert result.cost == 40
    assert result.state.position == grid.bottom_right
    print("  [PASS] Sample grid search")


def test_sample_grid_tracked_path():
    grid = WeightGrid.from_lines(SAMPLE_GRID)
    tracked, cost = solve_tracked(GridState.start(grid))

    assert cost == 40
    path = tracked.path()
    assert path[0].position == Position(0, 0)
    assert path[-1].position == grid.bottom_right

    for (state, step_cost), nxt in zip(tracked.history(), path[1:]):
        assert state.position.distance_to(nxt.position) == 1
        assert grid.get(nxt.position) == step_cost
    assert sum(step_cost for _, step_cost in tracked.history()) == cost


def test_heuristic_never_overestimates():
    grid = WeightGrid.from_lines(SAMPLE_GRID)
    target = grid.bottom_right
    for y in range(0, grid.height, 3):
        for x in range(0, grid.width, 3):
            state = GridState(grid, Position(x, y), target)
            assert state.min_remaining_cost() <= solve(state)


def test_single_cell_grid():
    grid = WeightGrid.from_lines(["7"])
    assert solve(GridState.start(grid)) == 0


def test_zero_weight_grid():
    grid = WeightGrid.from_lines(["000", "000"])
    assert grid.min_weight == 0
    assert solve(GridState.start(grid)) == 0


def main():
    """Run the non-fixture tests."""
    print("\n" + "#"*60)
    print("# GRID TESTS")
    print("#"*60)

    tests = [
        test_position_helpers,
        test_direction_chars,
        test_direction_between_neighbours,
        test_grid_from_lines,
        test_grid_rejects_negative_weights,
        test_grid_rejects_fractional_weights,
        test_grid_state_identity,
        test_sample_grid_lowest_total,
        test_sample_grid_tracked_path,
        test_heuristic_never_overestimates,
        test_single_cell_grid,
        test_zero_weight_grid,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except AssertionError as e:
            failed += 1
            print(f"  [FAIL] {test.__name__}: {e}")

    print()
    if failed == 0:
        print("All tests PASSED!")
        return 0
    print(f"{failed} test(s) FAILED!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
