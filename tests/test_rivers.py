import random

from line_grid import LineGrid
from planetgen.rivers import simulate_rivers, trace_river


def _slope(grid, start=1.0, step=0.05):
    return {c: start - i * step for i, c in enumerate(grid.ids)}


def test_no_sources_means_no_rivers():
    grid = LineGrid(10)
    elevation = {c: 0.9 - i * 0.01 for i, c in enumerate(grid.ids)}
    assert simulate_rivers(elevation, 0.9, grid, random.Random(1)) == set()


def test_rivers_run_downhill_to_sea():
    grid = LineGrid(20)
    elevation = _slope(grid, step=0.0625)  # c008 sits exactly at 0.5
    rivers = simulate_rivers(elevation, 0.5, grid, random.Random(5))
    assert {f"c{i:03d}" for i in range(3, 9)} <= rivers
    assert rivers <= {f"c{i:03d}" for i in range(0, 9)}


def test_walk_stops_at_local_minimum():
    grid = LineGrid(5)
    elevation = dict(zip(grid.ids, [0.95, 0.9, 0.85, 0.86, 0.95]))
    assert trace_river("c000", elevation, 0.5, grid) == ["c000", "c001", "c002"]


def test_plateau_terminates_immediately():
    grid = LineGrid(4)
    elevation = {c: 0.9 for c in grid.ids}
    assert trace_river("c001", elevation, 0.2, grid) == ["c001"]


def test_step_cap():
    grid = LineGrid(300)
    elevation = _slope(grid, step=0.001)
    path = trace_river("c000", elevation, 0.0, grid)
    assert len(path) == 100
    assert path[-1] == "c099"


def test_same_rng_same_rivers():
    grid = LineGrid(40)
    elevation = {c: abs(((i * 37) % 40) / 40.0) for i, c in enumerate(grid.ids)}
    a = simulate_rivers(elevation, 0.3, grid, random.Random(42))
    b = simulate_rivers(elevation, 0.3, grid, random.Random(42))
    assert a == b
