"""
Test script for solver validation

Covers:
1. Board / Piece / PuzzleState validation
2. Move resolution and exit policies
3. Successor generation
4. Canonical state keys
5. BFS / DFS search, limits, cancellation, progress

Usage:
    python -m pytest tests/test_solver.py
    python tests/test_solver.py
"""

import asyncio
import sys
import threading
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from unblock_jam.solver import (
    Axis,
    Board,
    CachedSolution,
    Direction,
    ExitPolicy,
    InvalidLevelError,
    MAX_PIECE_ID,
    Move,
    NoSolution,
    OutcomeKind,
    Piece,
    PuzzleState,
    SearchCancelled,
    SearchLimitExceeded,
    SearchLimits,
    SearchStatus,
    SolutionContext,
    SuccessorMode,
    apply_manual_move,
    create_strategy,
    generate_successors,
    get_default_strategy_name,
    get_strategy_names,
    load_puzzle,
    solve_puzzle,
    solve_puzzle_async,
    state_key,
    try_move,
)


# =============================================================================
# Fixtures
# =============================================================================

def make_corner_puzzle(gate_color=1, piece_cell=(0, 0)):
    """3x3 board, block in the middle, gate at the top-right corner."""
    board = Board.create(3, 3, static_blocks=[(1, 1)],
                         gates=[{"color": gate_color, "cells": [(0, 2)]}])
    state = load_puzzle(board, [Piece.create(0, 1, [piece_cell])])
    return board, state


def make_corridor_puzzle():
    """1x7 corridor, piece at (0,4): right gate is 2 moves away, left gate 4."""
    board = Board.create(1, 7, gates=[
        {"color": 1, "cells": [(0, 0)]},
        {"color": 1, "cells": [(0, 6)]},
    ])
    state = load_puzzle(board, [Piece.create(0, 1, [(0, 4)])])
    return board, state


def make_three_piece_puzzle():
    """4x4 board with three pieces of two colors and two gates."""
    board = Board.create(4, 4, static_blocks=[(1, 1)], gates=[
        {"color": "red", "cells": [(0, 3)]},
        {"color": "blue", "cells": [(3, 0)]},
    ])
    state = load_puzzle(board, [
        Piece.create(0, "red", [(0, 0), (0, 1)], axis="horizontal"),
        Piece.create(1, "blue", [(1, 0), (2, 0)], axis="vertical"),
        Piece.create(2, "red", [(2, 2)]),
    ])
    return board, state


def assert_state_valid(board, state):
    """Pieces are in bounds, off static blocks and pairwise disjoint."""
    seen = set()
    for piece in state.pieces:
        for cell in piece.cells:
            assert board.in_bounds(cell)
            assert not board.is_blocked(cell)
            assert cell not in seen
            seen.add(cell)


def _banner(title):
    print("\n" + "=" * 60)
    print(f"TEST: {title}")
    print("=" * 60)


# =============================================================================
# Model
# =============================================================================

def test_board_validation():
    """Board rejects malformed geometry."""
    _banner("Board validation")

    board = Board.create(3, 4, static_blocks=[[1, 1]], gates=[{"color": 1, "cells": [[0, 3]]}])
    print(f"  Created board: {board.rows}x{board.cols}, {len(board.gates)} gate(s)")
    assert board.static_blocks == frozenset({(1, 1)})
    assert board.gates_for(1)[0].cells == frozenset({(0, 3)})
    assert board.gates_for(2) == []

    with pytest.raises(InvalidLevelError):
        Board.create(0, 3)
    with pytest.raises(InvalidLevelError):
        Board.create(3, 3, static_blocks=[(3, 0)])
    with pytest.raises(InvalidLevelError):
        Board.create(3, 3, static_blocks=[(0, 2)], gates=[{"color": 1, "cells": [(0, 2)]}])
    with pytest.raises(InvalidLevelError):
        Board.create(3, 3, gates=[{"color": 1, "cells": [(0, 5)]}])

    print("  [PASS] Board validation")


def test_load_puzzle_validation():
    """load_puzzle rejects invalid initial pieces before any search."""
    _banner("load_puzzle validation")

    board = Board.create(3, 3, static_blocks=[(1, 1)])

    bad_levels = {
        "overlap": [Piece.create(0, 1, [(0, 0)]), Piece.create(1, 1, [(0, 0)])],
        "out of bounds": [Piece.create(0, 1, [(0, 3)])],
        "on static block": [Piece.create(0, 1, [(1, 1)])],
        "duplicate id": [Piece.create(0, 1, [(0, 0)]), Piece.create(0, 1, [(2, 2)])],
        "disconnected": [Piece.create(0, 1, [(0, 0), (0, 2)])],
        "repeated cell": [Piece.create(0, 1, [(0, 0), (0, 0)])],
        "empty": [Piece.create(0, 1, [])],
        "negative id": [Piece.create(-1, 1, [(0, 0)])],
    }
    for label, pieces in bad_levels.items():
        print(f"  Rejecting: {label}")
        with pytest.raises(InvalidLevelError):
            load_puzzle(board, pieces)

    state = load_puzzle(board, [Piece.create(0, 1, [(0, 0), (0, 1)]), Piece.create(1, 2, [(2, 2)])])
    assert state.piece_count == 2
    assert state.piece_ids == frozenset({0, 1})
    assert state.get_piece(1).cells == ((2, 2),)

    # Errors are also ValueErrors for callers that catch broadly
    assert issubclass(InvalidLevelError, ValueError)

    print("  [PASS] load_puzzle validation")


def test_axis_directions():
    """Axis permits directions in a fixed order."""
    _banner("Axis directions")

    assert Axis.parse("horizontal").directions == (Direction.RIGHT, Direction.LEFT)
    assert Axis.parse("vertical").directions == (Direction.DOWN, Direction.UP)
    assert Axis.parse(None).directions == (
        Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP
    )
    assert not Axis.HORIZONTAL.allows(Direction.UP)
    assert not Axis.VERTICAL.allows(Direction.LEFT)
    assert Axis.UNCONSTRAINED.allows(Direction.DOWN)

    with pytest.raises(InvalidLevelError):
        Axis.parse("diagonal")

    print("  [PASS] Axis directions")


# =============================================================================
# Move resolution
# =============================================================================

def test_try_move_outcomes():
    """Blocked, relocated and exited outcomes on the corner board."""
    _banner("try_move outcomes")

    board, state = make_corner_puzzle()

    right = try_move(board, state, 0, Direction.RIGHT)
    print(f"  (0,0) right: {right.kind.name} {right.cells}")
    assert right.kind is OutcomeKind.RELOCATED
    assert right.cells == ((0, 1),)

    assert try_move(board, state, 0, Direction.UP).is_blocked
    assert try_move(board, state, 0, Direction.LEFT).is_blocked

    _, moved = make_corner_puzzle(piece_cell=(0, 1))
    assert try_move(board, moved, 0, Direction.RIGHT).is_exited
    assert try_move(board, moved, 0, Direction.DOWN).is_blocked  # static block

    print("  [PASS] try_move outcomes")


def test_try_move_axis_and_collisions():
    """Axis constraint and piece collisions; a piece never collides with itself."""
    _banner("try_move axis and collisions")

    board = Board.create(3, 5)
    pieces = [
        Piece.create(0, 1, [(1, 0), (1, 1)], axis="horizontal"),
        Piece.create(1, 2, [(1, 3)], axis="vertical"),
    ]

    # Free cell above, but the axis forbids vertical movement
    assert try_move(board, pieces, 0, Direction.UP).is_blocked

    step = try_move(board, pieces, 0, Direction.RIGHT)
    assert step.is_relocated
    assert step.cells == ((1, 1), (1, 2))

    blocked_state = PuzzleState(pieces=(pieces[0].with_cells(step.cells), pieces[1]))
    assert try_move(board, blocked_state, 0, Direction.RIGHT).is_blocked

    assert try_move(board, pieces, 1, Direction.UP).cells == ((0, 3),)
    assert try_move(board, pieces, 1, Direction.RIGHT).is_blocked

    print("  [PASS] try_move axis and collisions")


def test_try_move_is_pure():
    """Resolving moves never changes the inputs."""
    _banner("try_move purity")

    board, state = make_three_piece_puzzle()
    pieces = list(state.pieces)
    before = [p.cells for p in pieces]

    for index in range(len(pieces)):
        for direction in Direction:
            try_move(board, pieces, index, direction)
            try_move(board, state, index, direction)

    assert [p.cells for p in pieces] == before
    assert [p.cells for p in state.pieces] == before

    print("  [PASS] try_move purity")


def test_gate_color_must_match():
    """A gate of another color is an ordinary free cell."""
    _banner("Gate color matching")

    board, state = make_corner_puzzle(gate_color=2, piece_cell=(0, 1))
    outcome = try_move(board, state, 0, Direction.RIGHT)
    assert outcome.is_relocated
    assert outcome.cells == ((0, 2),)

    print("  [PASS] Gate color matching")


def test_exit_policies():
    """Any-cell overlap exits; full alignment needs the whole footprint in the gate span."""
    _banner("Exit policies")

    narrow = Board.create(3, 3, gates=[{"color": 1, "cells": [(0, 2)]}])
    wide = Board.create(3, 3, gates=[{"color": 1, "cells": [(0, 2), (1, 2)]}])
    pieces = [Piece.create(0, 1, [(0, 1), (1, 1)], axis="horizontal")]

    assert try_move(narrow, pieces, 0, Direction.RIGHT, ExitPolicy.ANY_CELL).is_exited

    strict = try_move(narrow, pieces, 0, Direction.RIGHT, ExitPolicy.FULL_ALIGNMENT)
    print(f"  Full alignment, narrow gate: {strict.kind.name}")
    assert strict.is_relocated
    assert strict.cells == ((0, 2), (1, 2))

    assert try_move(wide, pieces, 0, Direction.RIGHT, ExitPolicy.FULL_ALIGNMENT).is_exited

    print("  [PASS] Exit policies")


def test_manual_move_slides():
    """Manual moves slide until blocked or exited."""
    _banner("Manual slides")

    board, state = make_corner_puzzle(gate_color=2)
    slide = apply_manual_move(board, state, 0, Direction.RIGHT)
    print(f"  Slide right (no matching gate): {slide.kind.name} {slide.cells} steps={slide.steps}")
    assert slide.is_relocated
    assert slide.cells == ((0, 2),)
    assert slide.steps == 2

    board, state = make_corner_puzzle(gate_color=1)
    exit_slide = apply_manual_move(board, state, 0, Direction.RIGHT)
    assert exit_slide.is_exited
    assert exit_slide.steps == 2

    short = apply_manual_move(board, state, 0, Direction.RIGHT, max_steps=1)
    assert short.is_relocated
    assert short.cells == ((0, 1),)

    assert apply_manual_move(board, state, 0, Direction.UP).is_blocked

    with pytest.raises(KeyError):
        apply_manual_move(board, state, 7, Direction.RIGHT)

    print("  [PASS] Manual slides")


# =============================================================================
# Successors and keys
# =============================================================================

def test_successor_order():
    """Successors follow piece order, then axis direction order."""
    _banner("Successor order")

    board, state = make_corner_puzzle()
    successors = generate_successors(board, state)

    for move, successor in successors:
        print(f"  {move}: {[p.cells for p in successor.pieces]}")

    assert [m.direction for m, _ in successors] == [Direction.RIGHT, Direction.DOWN]
    assert successors[0][1].pieces[0].cells == ((0, 1),)
    assert successors[1][1].pieces[0].cells == ((1, 0),)

    _, near_gate = make_corner_puzzle(piece_cell=(0, 1))
    exit_moves = [(m, s) for m, s in generate_successors(board, near_gate) if m.exited]
    assert len(exit_moves) == 1
    assert exit_moves[0][1].is_goal

    print("  [PASS] Successor order")


def test_slide_successors():
    """Slide mode emits every resting cell along a direction and stops at the exit."""
    _banner("Slide successors")

    board, state = make_corridor_puzzle()
    successors = generate_successors(board, state, mode=SuccessorMode.SLIDE)
    summary = [(m.direction, m.steps, m.exited) for m, _ in successors]
    print(f"  {summary}")

    assert summary == [
        (Direction.RIGHT, 1, False),
        (Direction.RIGHT, 2, True),
        (Direction.LEFT, 1, False),
        (Direction.LEFT, 2, False),
        (Direction.LEFT, 3, False),
        (Direction.LEFT, 4, True),
    ]
    assert len(generate_successors(board, state)) == 2

    print("  [PASS] Slide successors")


def test_state_key_is_canonical():
    """Keys depend only on which ids occupy which cells."""
    _banner("Canonical state key")

    board = Board.create(3, 3)
    a = Piece.create(0, 1, [(0, 0)])
    b = Piece.create(1, 1, [(2, 2)])

    forward = PuzzleState(pieces=(a, b))
    backward = PuzzleState(pieces=(b, a))
    assert state_key(board, forward) == state_key(board, backward)

    moved = PuzzleState(pieces=(a.with_cells(((0, 1),)), b))
    assert state_key(board, forward) != state_key(board, moved)

    # Same occupied cells, different identities
    swapped = PuzzleState(pieces=(a.with_cells(((2, 2),)), b.with_cells(((0, 0),))))
    assert state_key(board, forward) != state_key(board, swapped)

    assert state_key(board, PuzzleState(pieces=(a,))) != state_key(board, forward)
    assert state_key(board, PuzzleState(pieces=())) != state_key(board, PuzzleState(pieces=(a,)))

    print("  [PASS] Canonical state key")


def test_state_key_with_large_ids():
    """Ids up to MAX_PIECE_ID hash exactly; larger ids are rejected up front."""
    _banner("Large piece ids")

    board = Board.create(1, 4, gates=[{"color": 1, "cells": [(0, 3)]}])
    low, high = 2 ** 31 - 1, 2 ** 32 - 1

    state = load_puzzle(board, [Piece.create(low, 1, [(0, 0)]), Piece.create(high, 2, [(0, 2)])])
    swapped = PuzzleState(pieces=(
        state.get_piece(low).with_cells(((0, 2),)),
        state.get_piece(high).with_cells(((0, 0),)),
    ))
    only_low = state.without_piece(state.index_of(high))

    keys = {state_key(board, s) for s in (state, swapped, only_low, PuzzleState(pieces=()))}
    assert len(keys) == 4

    single = load_puzzle(board, [Piece.create(MAX_PIECE_ID, 1, [(0, 0)])])
    assert state_key(board, single) != state_key(board, PuzzleState(pieces=()))
    solution = solve_puzzle(board, single)
    assert solution.is_solved
    assert [m.piece_id for m in solution.moves] == [MAX_PIECE_ID] * 3

    with pytest.raises(InvalidLevelError):
        load_puzzle(board, [Piece.create(MAX_PIECE_ID + 1, 1, [(0, 0)])])

    print("  [PASS] Large piece ids")


# =============================================================================
# Search
# =============================================================================

def test_bfs_corner_solution():
    """Two unit steps right: relocate to (0,1), then exit through (0,2)."""
    _banner("BFS corner solution")

    board, state = make_corner_puzzle()
    solution = solve_puzzle(board, state, strategy="bfs")

    print(f"  Status: {solution.status.value}, moves: {[str(m) for m in solution.moves]}")
    assert solution.status is SearchStatus.SOLVED
    assert solution.moves == [
        Move(piece_id=0, direction=Direction.RIGHT),
        Move(piece_id=0, direction=Direction.RIGHT, exited=True),
    ]
    assert solution.states[0].pieces[0].cells == ((0, 1),)
    assert solution.final_state.is_goal
    assert solution.metrics.strategy_name == "bfs"
    assert solution.raise_for_status() is solution

    print("  [PASS] BFS corner solution")


def test_slide_mode_corner_solution():
    """With slide successors the same puzzle is one action long."""
    _banner("Slide mode corner solution")

    board, state = make_corner_puzzle()
    solution = solve_puzzle(board, state, strategy="bfs", successor_mode=SuccessorMode.SLIDE)

    assert solution.is_solved
    assert solution.move_count == 1
    assert solution.moves[0] == Move(piece_id=0, direction=Direction.RIGHT, steps=2, exited=True)
    assert solution.states[0].is_goal

    print("  [PASS] Slide mode corner solution")


def test_no_solution():
    """Gate of another color: the whole ring is explored, then NO_SOLUTION."""
    _banner("No solution")

    board, state = make_corner_puzzle(gate_color=2)
    for name in ("bfs", "dfs"):
        solution = solve_puzzle(board, state, strategy=name)
        print(f"  {name}: {solution.status.value}, {solution.metrics.states_explored} explored")
        assert solution.status is SearchStatus.NO_SOLUTION
        assert not solution.has_moves
        assert solution.metrics.states_explored == 8
        assert solution.metrics.visited_count == 8
        with pytest.raises(NoSolution):
            solution.raise_for_status()

    print("  [PASS] No solution")


def test_bfs_is_shortest():
    """BFS takes the 2-move exit; DFS follows the 4-move one."""
    _banner("BFS optimality")

    board, state = make_corridor_puzzle()

    bfs = solve_puzzle(board, state, strategy="bfs")
    dfs = solve_puzzle(board, state, strategy="dfs")
    print(f"  BFS: {bfs.move_count} moves, DFS: {dfs.move_count} moves")

    assert bfs.move_count == 2
    assert all(m.direction is Direction.RIGHT for m in bfs.moves)
    assert dfs.is_solved
    assert dfs.move_count == 4
    assert all(m.direction is Direction.LEFT for m in dfs.moves)

    print("  [PASS] BFS optimality")


def test_multi_piece_paths_are_legal():
    """Every step of a found path is a legal successor and keeps the board valid."""
    _banner("Multi-piece paths")

    board, state = make_three_piece_puzzle()

    for name in ("bfs", "dfs"):
        solution = solve_puzzle(board, state, strategy=name)
        print(f"  {name}: {solution.move_count} moves, {solution.metrics.states_explored} explored")
        assert solution.is_solved

        previous = state
        for move, current in zip(solution.moves, solution.states):
            assert_state_valid(board, current)
            reachable = dict((state_key(board, s), m) for m, s in generate_successors(board, previous))
            assert reachable[state_key(board, current)] == move
            previous = current
        assert previous.is_goal

        if name == "bfs":
            assert solution.move_count == 6

    print("  [PASS] Multi-piece paths")


def test_search_is_deterministic():
    """Identical inputs give identical paths."""
    _banner("Determinism")

    board, state = make_three_piece_puzzle()
    for name in get_strategy_names():
        first = solve_puzzle(board, state, strategy=name)
        second = solve_puzzle(board, state, strategy=name)
        assert first.moves == second.moves
        assert first.states == second.states

    print("  [PASS] Determinism")


def test_iteration_limit():
    """Exceeding the budget reports LIMIT_EXCEEDED, not NO_SOLUTION."""
    _banner("Iteration limit")

    board, state = make_corner_puzzle()
    solution = solve_puzzle(board, state, strategy="bfs", limits=SearchLimits(max_iterations=1))

    assert solution.status is SearchStatus.LIMIT_EXCEEDED
    assert solution.metrics.states_explored == 1
    with pytest.raises(SearchLimitExceeded):
        solution.raise_for_status()

    assert create_strategy("bfs").max_iterations == 30000
    assert create_strategy("dfs").max_iterations == 200000

    print("  [PASS] Iteration limit")


def test_cancel_before_start():
    """A pre-set cancel flag stops the search at the first checkpoint."""
    _banner("Cancel before start")

    board, state = make_corner_puzzle(gate_color=2)
    cancel = threading.Event()
    cancel.set()

    solution = solve_puzzle(board, state, strategy="dfs", cancel_flag=cancel,
                            limits=SearchLimits(checkpoint_interval=3))

    assert solution.status is SearchStatus.CANCELLED
    assert solution.was_cancelled
    assert solution.metrics.states_explored == 2
    with pytest.raises(SearchCancelled):
        solution.raise_for_status()

    print("  [PASS] Cancel before start")


def test_progress_and_yield_at_checkpoints():
    """Progress and host yields happen once per checkpoint interval."""
    _banner("Checkpoints")

    board, state = make_corner_puzzle(gate_color=2)
    reports = []
    yields = []

    solution = solve_puzzle(
        board, state, strategy="bfs",
        limits=SearchLimits(checkpoint_interval=2),
        progress_callback=lambda explored, message: reports.append(explored),
        yield_hook=lambda: yields.append(len(reports)),
    )

    print(f"  Reports: {reports}, yields after reports: {yields}")
    assert solution.status is SearchStatus.NO_SOLUTION
    assert reports == [1, 3, 5, 7]
    assert yields == [1, 2, 3, 4]

    print("  [PASS] Checkpoints")


def test_cancel_from_progress_callback():
    """Cancellation requested during a checkpoint report is honoured at that checkpoint."""
    _banner("Cancel from progress callback")

    board, state = make_corner_puzzle(gate_color=2)
    context = SolutionContext(board=board, state=state, limits=SearchLimits(checkpoint_interval=2))
    reports = []
    context.progress_callback = lambda explored, message: (reports.append(explored), context.cancel())

    solution = create_strategy("bfs").solve(context)

    assert solution.was_cancelled
    assert solution.metrics.states_explored == 1
    assert reports == [solution.metrics.states_explored]

    print("  [PASS] Cancel from progress callback")


def test_iter_search_suspends_at_checkpoints():
    """The search generator yields explored counts and returns the Solution."""
    _banner("Generator suspension")

    board, state = make_corner_puzzle(gate_color=2)
    context = SolutionContext(board=board, state=state, limits=SearchLimits(checkpoint_interval=3))
    search = create_strategy("bfs").iter_search(context)

    assert next(search) == 2
    assert next(search) == 5
    with pytest.raises(StopIteration) as stop:
        next(search)
    assert stop.value.value.status is SearchStatus.NO_SOLUTION

    print("  [PASS] Generator suspension")


def test_solve_async():
    """The asyncio entry point gives the same result as the blocking one."""
    _banner("Async solve")

    board, state = make_three_piece_puzzle()
    solution = asyncio.run(solve_puzzle_async(board, state, strategy="bfs",
                                              limits=SearchLimits(checkpoint_interval=5)))
    assert solution.is_solved
    assert solution.moves == solve_puzzle(board, state, strategy="bfs").moves

    print("  [PASS] Async solve")


def test_solve_async_cancelled_by_other_task():
    """Another task on the same loop can cancel while the search is suspended."""
    _banner("Async cancel")

    board, state = make_three_piece_puzzle()
    cancel = threading.Event()
    reports = []

    async def stop_search():
        cancel.set()

    async def run():
        search = asyncio.ensure_future(solve_puzzle_async(
            board, state, strategy="bfs", cancel_flag=cancel,
            limits=SearchLimits(checkpoint_interval=1),
            progress_callback=lambda explored, message: reports.append(explored),
        ))
        stopper = asyncio.ensure_future(stop_search())
        await stopper
        return await search

    solution = asyncio.run(run())

    print(f"  Reports: {reports}, status: {solution.status.value}")
    assert solution.status is SearchStatus.CANCELLED
    assert reports == [0, 1]
    assert solution.metrics.states_explored == 1

    print("  [PASS] Async cancel")


def test_empty_state_is_goal():
    """A state with no pieces is solved with an empty path."""
    _banner("Empty goal state")

    board = Board.create(2, 2)
    solution = solve_puzzle(board, load_puzzle(board, []))
    assert solution.is_solved
    assert solution.move_count == 0
    assert solution.final_state is None

    print("  [PASS] Empty goal state")


def test_strategy_factory():
    """Registry lookups."""
    _banner("Strategy factory")

    assert set(get_strategy_names()) >= {"bfs", "dfs"}
    assert get_default_strategy_name() == "bfs"
    with pytest.raises(ValueError):
        create_strategy("astar")

    strategy = create_strategy("dfs", exit_policy="full_alignment", successor_mode="slide")
    assert strategy.exit_policy is ExitPolicy.FULL_ALIGNMENT
    assert strategy.successor_mode is SuccessorMode.SLIDE

    print("  [PASS] Strategy factory")


def test_cached_solution_cursor():
    """CachedSolution steps through moves and expected states."""
    _banner("CachedSolution")

    board, state = make_corner_puzzle()
    cached = CachedSolution(solution=solve_puzzle(board, state))

    assert cached.total_moves == 2
    assert cached.peek_moves(5) == cached.solution.moves
    assert cached.expected_state_after.pieces[0].cells == ((0, 1),)

    first = cached.advance()
    assert first.direction is Direction.RIGHT
    assert cached.moves_remaining == 1
    assert cached.expected_state_after.is_goal

    cached.advance()
    assert cached.is_exhausted
    assert cached.advance() is None
    assert cached.current_move is None

    print("  [PASS] CachedSolution")


def main():
    """Run all tests."""
    print("\n" + "#" * 60)
    print("# SOLVER VALIDATION TESTS")
    print("#" * 60)

    tests = [obj for name, obj in sorted(globals().items())
             if name.startswith("test_") and callable(obj)]

    failed = []
    for test in tests:
        try:
            test()
        except AssertionError as e:
            print(f"  [FAIL] {test.__name__}: {e}")
            failed.append(test.__name__)

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"  {len(tests) - len(failed)}/{len(tests)} passed")

    if failed:
        print("Some tests FAILED!")
        return 1
    print("All tests PASSED!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
