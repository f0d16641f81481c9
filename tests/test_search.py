import pytest

from conftest import ALGORITHMS, HEURISTICS
from gridsearch.core.api import configure, run, solve
from gridsearch.core.heuristics import Heuristic, manhattan
from gridsearch.core.search import SearchRun, SearchStatus
from gridsearch.core.types import Algorithm, Grid, NoPath, PathFound, StepEvent


def assert_valid_path(grid, result):
    path = result.path
    assert path[0] == grid.start
    assert path[-1] == grid.goal
    for a, b in zip(path, path[1:]):
        assert manhattan(a, b) == 1
        assert not grid.is_obstacle(b)
    assert len(set(path)) == len(path)
    assert result.nodes_in_path == len(path) - 1


# ---------- concrete scenarios ----------

def test_bfs_3x3_corner_to_corner(grid3):
    result = solve(grid3, Algorithm.BFS)
    assert isinstance(result, PathFound)
    assert len(result.path) == 5
    assert result.nodes_in_path == 4
    assert result.explored_count <= 9
    assert_valid_path(grid3, result)


def test_dfs_3x3_follows_last_pushed_branch(grid3):
    result = solve(grid3, Algorithm.DFS)
    assert result.path == ((0, 0), (0, 1), (0, 2), (1, 2), (2, 2))
    assert result.explored_count == 6


def test_first_bfs_step_discovers_right_then_down(grid3):
    r = run(grid3, Algorithm.BFS)
    event = r.step()
    assert isinstance(event, StepEvent)
    assert event.current == (0, 0)
    assert event.discovered == ((1, 0), (0, 1))
    assert event.explored_count == 2


def test_astar_accumulates_heuristic_as_cost():
    g = Grid(width=3, height=1, start=(0, 0), goal=(2, 0))
    r = run(g, Algorithm.ASTAR)
    result = r.solve()
    assert result.path == ((0, 0), (1, 0), (2, 0))
    assert r.state.cost == {(0, 0): 0, (1, 0): 1, (2, 0): 1}


def test_greedy_cost_is_heuristic_only():
    g = Grid(width=3, height=1, start=(0, 0), goal=(2, 0))
    r = run(g, Algorithm.GREEDY)
    r.solve()
    assert r.state.cost == {(0, 0): 0, (1, 0): 1, (2, 0): 0}


def test_bfs_detours_around_wall():
    # wall down column 2 with a gap at the bottom
    g = Grid(width=5, height=4, start=(0, 0), goal=(4, 0),
             obstacles={(2, 0), (2, 1), (2, 2)})
    result = solve(g, Algorithm.BFS)
    assert_valid_path(g, result)
    assert result.nodes_in_path == 10
    assert (2, 3) in result.path


# ---------- shortest paths on empty grids ----------

@pytest.mark.parametrize("algo", [Algorithm.BFS, Algorithm.ASTAR])
@pytest.mark.parametrize("size, start, goal", [
    ((3, 3), (0, 0), (2, 2)),
    ((8, 5), (1, 4), (7, 0)),
    ((10, 10), (9, 9), (0, 0)),
    ((6, 1), (5, 0), (0, 0)),
    ((7, 7), (3, 3), (3, 4)),
])
def test_empty_grid_shortest(algo, size, start, goal):
    g = configure(size[0], size[1], 20, start, goal)
    result = solve(g, algo, Heuristic.MANHATTAN)
    assert isinstance(result, PathFound)
    assert result.nodes_in_path == manhattan(start, goal)
    assert_valid_path(g, result)


# ---------- properties over random grids ----------

@pytest.mark.parametrize("algo", ALGORITHMS)
@pytest.mark.parametrize("heuristic", HEURISTICS)
def test_explored_count_monotonic_and_bounded(random_grids, algo, heuristic):
    for g in random_grids:
        last = 0
        items = list(run(g, algo, heuristic))
        for item in items[:-1]:
            assert isinstance(item, StepEvent)
            assert item.explored_count >= last
            assert item.explored_count <= g.free_cells
            last = item.explored_count
        result = items[-1]
        assert isinstance(result, (PathFound, NoPath))
        assert last <= result.explored_count <= g.free_cells


@pytest.mark.parametrize("algo", ALGORITHMS)
@pytest.mark.parametrize("heuristic", HEURISTICS)
def test_found_paths_are_adjacent_steps(random_grids, algo, heuristic):
    for g in random_grids:
        result = solve(g, algo, heuristic)
        if isinstance(result, PathFound):
            assert_valid_path(g, result)


@pytest.mark.parametrize("algo", ALGORITHMS)
def test_all_algorithms_agree_on_reachability(random_grids, algo):
    for g in random_grids:
        bfs_found = isinstance(solve(g, Algorithm.BFS), PathFound)
        assert isinstance(solve(g, algo), PathFound) == bfs_found


@pytest.mark.parametrize("algo", ALGORITHMS)
@pytest.mark.parametrize("heuristic", HEURISTICS)
def test_repeated_runs_are_identical(random_grids, algo, heuristic):
    for g in random_grids:
        first = list(run(g, algo, heuristic))
        second = list(run(g, algo, heuristic))
        assert first == second


@pytest.mark.parametrize("algo", ALGORITHMS)
def test_bfs_never_longer_than_other_strategies(random_grids, algo):
    for g in random_grids:
        bfs = solve(g, Algorithm.BFS)
        other = solve(g, algo)
        if isinstance(bfs, PathFound):
            assert bfs.nodes_in_path <= other.nodes_in_path


# ---------- no path ----------

@pytest.mark.parametrize("algo", ALGORITHMS)
@pytest.mark.parametrize("heuristic", HEURISTICS)
def test_walled_goal_gives_no_path(walled_goal, algo, heuristic):
    result = solve(walled_goal, algo, heuristic)
    assert isinstance(result, NoPath)
    # every reachable cell except start: 25 - 4 walls - goal - start
    assert result.explored_count == 19


def test_no_path_is_a_result_not_an_exception():
    g = Grid(width=3, height=1, start=(0, 0), goal=(2, 0), obstacles={(1, 0)})
    r = run(g, Algorithm.BFS)
    items = list(r)
    assert items == [StepEvent(current=(0, 0), discovered=(), explored_count=0),
                     NoPath(explored_count=0)]
    assert r.status is SearchStatus.EXHAUSTED


# ---------- stepping interface ----------

def test_status_transitions(grid3):
    r = SearchRun(grid3, Algorithm.ASTAR, Heuristic.EUCLIDEAN)
    assert r.status is SearchStatus.READY
    assert r.result is None
    r.step()
    assert r.status is SearchStatus.RUNNING
    result = r.solve()
    assert r.status is SearchStatus.FOUND
    assert r.done
    assert r.result is result


def test_step_after_finish_repeats_result(grid3):
    r = run(grid3, Algorithm.BFS)
    result = r.solve()
    assert r.step() is result
    assert r.step() is result
    assert list(r) == [result]


def test_iteration_ends_with_result(grid3):
    items = list(run(grid3, Algorithm.GREEDY))
    assert all(isinstance(i, StepEvent) for i in items[:-1])
    assert isinstance(items[-1], PathFound)
    assert items[0].current == grid3.start


def test_stop_early_and_reset(grid3):
    r = run(grid3, Algorithm.DFS)
    r.step()
    r.step()
    r.reset()
    assert r.status is SearchStatus.READY
    assert r.solve() == solve(grid3, Algorithm.DFS)


def test_grid_edits_during_run_do_not_leak_in():
    g = Grid(width=5, height=1, start=(0, 0), goal=(4, 0))
    r = run(g, Algorithm.BFS)
    r.step()
    g.add_obstacle((2, 0))
    assert isinstance(r.solve(), PathFound)
    assert isinstance(solve(g, Algorithm.BFS), NoPath)


def test_algorithm_and_heuristic_accept_names(grid3):
    r = SearchRun(grid3, "A*", "euclidean")
    assert r.algorithm is Algorithm.ASTAR
    assert r.heuristic is Heuristic.EUCLIDEAN
    with pytest.raises(ValueError):
        SearchRun(grid3, "dijkstra")
