import random

import pytest

from lines.components.ball import PALETTE
from lines.components.coordinate import Coordinate, CoordinateOutOfBounds
from lines.components.game_state import GameMode
from lines.events.messages import (
    BallDeselected,
    BallMoved,
    BallPlaced,
    BallRemoved,
    BallSelected,
    GameOver,
    PreviewChanged,
    RunsCleared,
    ScoreChanged,
)
from lines.systems.board_engine import BoardEngine

from tests.helpers import B, C, G, N, P, R, Y, coords, make_engine, message_types


def fill_without_runs(free_cells):
    """Every cell except free_cells, colored so no line holds two equal neighbors."""
    balls = []
    for col in range(9):
        for row in range(9):
            if (col, row) in free_cells:
                continue
            balls.append(((col, row), PALETTE[(col + 2 * row) % 7]))
    return balls


def test_new_engine_spawns_opening_batch():
    engine = BoardEngine(rng=random.Random(11))
    assert len(engine.tile_map) == 81
    assert len(engine.tile_map.occupied()) == 3
    assert message_types(engine.startup_messages) == ['BallPlaced'] * 3 + ['PreviewChanged']
    assert engine.score == 0
    assert engine.state is GameMode.PLAYING
    assert engine.selected is None


def test_select_occupied_and_ignore_empty():
    engine = make_engine([((0, 0), R), ((5, 5), B)])
    assert engine.select(Coordinate(3, 3)) == []
    assert engine.selected is None
    assert engine.select(Coordinate(0, 0)) == [BallSelected(Coordinate(0, 0))]
    # Reselecting another ball replaces the selection without touching the board.
    assert engine.select(Coordinate(5, 5)) == [BallSelected(Coordinate(5, 5))]
    assert engine.selected == Coordinate(5, 5)
    assert engine.snapshot() == [(Coordinate(0, 0), R), (Coordinate(5, 5), B)]


def test_click_switches_selection_to_new_ball():
    engine = make_engine([((0, 0), R), ((5, 5), B)])
    engine.click(Coordinate(0, 0))
    assert engine.click(Coordinate(5, 5)) == [BallSelected(Coordinate(5, 5))]
    assert engine.selected == Coordinate(5, 5)


def test_deselect():
    engine = make_engine([((0, 0), R)])
    assert engine.deselect() == []
    engine.select(Coordinate(0, 0))
    assert engine.deselect() == [BallDeselected(Coordinate(0, 0))]
    assert engine.selected is None


def test_move_to_same_cell_is_noop():
    engine = make_engine([((0, 0), R)])
    engine.select(Coordinate(0, 0))
    assert engine.attempt_move(Coordinate(0, 0)) == []
    assert engine.selected == Coordinate(0, 0)


def test_move_without_selection_is_noop():
    engine = make_engine([((0, 0), R)])
    assert engine.attempt_move(Coordinate(3, 0)) == []
    assert engine.click(Coordinate(3, 0)) == []
    assert engine.tile_map.get(Coordinate(0, 0)) is not None


def test_walled_off_move_leaves_board_and_selection():
    engine = make_engine([((0, 0), R), ((1, 0), B), ((0, 1), G)])
    before = engine.snapshot()
    engine.select(Coordinate(0, 0))
    assert engine.attempt_move(Coordinate(2, 0)) == []
    assert engine.click(Coordinate(2, 0)) == []
    assert engine.snapshot() == before
    assert engine.selected == Coordinate(0, 0)
    assert engine.score == 0


def test_move_onto_occupied_cell_is_rejected():
    engine = make_engine([((0, 0), R), ((3, 0), B)])
    engine.select(Coordinate(0, 0))
    assert engine.attempt_move(Coordinate(3, 0)) == []
    assert engine.selected == Coordinate(0, 0)


def test_out_of_bounds_input_is_a_programming_error():
    engine = make_engine([((0, 0), R)])
    with pytest.raises(CoordinateOutOfBounds):
        engine.click(Coordinate(9, 0))
    with pytest.raises(CoordinateOutOfBounds):
        engine.select(Coordinate(0, 12))


def test_spawn_completes_row_run():
    reds = [((col, 0), R) for col in range(4)]
    engine = make_engine(
        reds + [((8, 8), B)],
        preview=[R, B, G],
        picks=coords((4, 0), (6, 6), (7, 5)),
    )
    engine.select(Coordinate(8, 8))
    messages = engine.attempt_move(Coordinate(8, 7))
    assert message_types(messages) == (
        ['BallMoved'] + ['BallPlaced'] * 3 + ['RunsCleared'] + ['BallRemoved'] * 5
        + ['ScoreChanged', 'PreviewChanged']
    )
    assert engine.score == 10
    for col in range(5):
        assert engine.tile_map.get(Coordinate(col, 0)) is None
    cleared = [m for m in messages if isinstance(m, RunsCleared)][0]
    assert cleared.points == 10
    assert cleared.runs == (tuple(coords((0, 0), (1, 0), (2, 0), (3, 0), (4, 0))),)


def test_relocation_keeps_color_and_handle():
    engine = make_engine([((2, 2), Y)], preview=[B, G, C], picks=coords((8, 0), (8, 2), (8, 4)))
    handle = engine.tile_map.get(Coordinate(2, 2)).handle
    engine.select(Coordinate(2, 2))
    messages = engine.attempt_move(Coordinate(6, 6))
    moved = messages[0]
    assert isinstance(moved, BallMoved)
    assert moved.origin == Coordinate(2, 2) and moved.target == Coordinate(6, 6)
    assert moved.path[0] == Coordinate(2, 2) and moved.path[-1] == Coordinate(6, 6)
    assert len(moved.path) == 9
    assert moved.handle == handle
    assert engine.tile_map.get(Coordinate(6, 6)).color is Y
    assert engine.tile_map.get(Coordinate(2, 2)) is None
    assert engine.selected is None


def test_horizontal_and_diagonal_runs_through_moved_ball():
    row_reds = [((col, 4), R) for col in range(4)]
    diagonal_reds = [((i, i), R) for i in range(4)]
    engine = make_engine(row_reds + diagonal_reds + [((4, 8), R)], preview=[B, G, Y])
    engine.select(Coordinate(4, 8))
    messages = engine.attempt_move(Coordinate(4, 4))
    assert engine.score == 20
    cleared = [m for m in messages if isinstance(m, RunsCleared)]
    assert len(cleared) == 1
    assert len(cleared[0].runs) == 2
    assert all(Coordinate(4, 4) in run for run in cleared[0].runs)
    removed = [m.coordinate for m in messages if isinstance(m, BallRemoved)]
    assert len(removed) == 9
    assert len(set(removed)) == 9
    assert engine.tile_map.occupied() == []
    # A player match skips the forced spawn for this turn.
    assert not any(isinstance(m, (BallPlaced, PreviewChanged)) for m in messages)
    assert engine.preview.colors == (B, G, Y)


def test_cascade_from_spawn_scores_once():
    column_reds = [((2, row), R) for row in range(4)]
    engine = make_engine(
        column_reds + [((8, 8), Y)],
        preview=[R, B, G],
        picks=coords((2, 4), (7, 1), (5, 7)),
    )
    engine.select(Coordinate(8, 8))
    messages = engine.attempt_move(Coordinate(8, 7))
    assert engine.score == 10
    assert [m for m in messages if isinstance(m, ScoreChanged)] == [ScoreChanged(10)]
    assert sum(isinstance(m, PreviewChanged) for m in messages) == 1
    # The cascade never triggers a second spawn.
    assert sum(isinstance(m, BallPlaced) for m in messages) == 3
    for row in range(5):
        assert engine.tile_map.get(Coordinate(2, row)) is None
    assert engine.tile_map.get(Coordinate(8, 7)).color is Y


def test_no_match_move_spawns_and_refreshes_preview():
    engine = make_engine([((0, 0), R)], preview=[B, G, C], picks=coords((8, 8), (8, 6), (8, 4)) + [P, P, N])
    engine.select(Coordinate(0, 0))
    messages = engine.attempt_move(Coordinate(0, 5))
    placed = [(m.coordinate, m.color) for m in messages if isinstance(m, BallPlaced)]
    assert placed == [(Coordinate(8, 8), B), (Coordinate(8, 6), G), (Coordinate(8, 4), C)]
    assert messages[-1] == PreviewChanged((P, P, N))
    assert engine.score == 0


def test_last_free_cell_ends_game():
    engine = make_engine(fill_without_runs({(8, 8)}), preview=[C, B, G])
    assert engine.tile_map.free_coordinates() == [Coordinate(8, 8)]
    engine.select(Coordinate(7, 8))
    messages = engine.attempt_move(Coordinate(8, 8))
    assert message_types(messages) == ['BallMoved', 'BallPlaced', 'GameOver']
    assert engine.state is GameMode.GAME_OVER
    assert messages[-1] == GameOver(0)
    # The single placement of the aborted batch stays on the board.
    assert engine.tile_map.get(Coordinate(7, 8)).color is C
    assert engine.tile_map.is_full()


def test_batch_filling_last_cells_ends_game():
    # Three free cells: the move frees one, the batch of three takes them all.
    engine = make_engine(
        fill_without_runs({(6, 8), (7, 8), (8, 8)}),
        preview=[B, G, Y],
        picks=coords((5, 8), (7, 8), (8, 8)),
    )
    engine.select(Coordinate(5, 8))
    messages = engine.attempt_move(Coordinate(6, 8))
    assert message_types(messages) == [BallMoved] + [BallPlaced] * 3 + [PreviewChanged, GameOver]
    assert engine.tile_map.is_full()
    assert engine.state is GameMode.GAME_OVER
    assert messages[-1] == GameOver(0)
    assert engine.selected is None


def test_batch_leaving_a_free_cell_keeps_playing():
    engine = make_engine(
        fill_without_runs({(6, 8), (7, 8), (8, 8), (8, 7)}),
        preview=[B, G, Y],
        picks=coords((5, 8), (7, 8), (8, 8)),
    )
    engine.select(Coordinate(5, 8))
    messages = engine.attempt_move(Coordinate(6, 8))
    assert GameOver not in message_types(messages)
    assert engine.state is GameMode.PLAYING
    assert engine.tile_map.free_coordinates() == [Coordinate(8, 7)]


def test_game_over_ignores_input_until_reset():
    engine = make_engine(fill_without_runs({(8, 8)}), preview=[C, B, G])
    engine.select(Coordinate(7, 8))
    engine.attempt_move(Coordinate(8, 8))
    assert engine.click(Coordinate(0, 0)) == []
    assert engine.select(Coordinate(0, 0)) == []
    assert engine.selected is None

    messages = engine.reset()
    assert engine.state is GameMode.PLAYING
    assert engine.score == 0
    assert sum(isinstance(m, BallRemoved) for m in messages) == 81
    assert ScoreChanged(0) in messages
    assert len(engine.tile_map) == 81
    assert engine.tile_map.occupied() == []
    assert messages[-1] == PreviewChanged(engine.preview.colors)


def test_reset_respawns_opening_batch():
    engine = BoardEngine(rng=random.Random(2))
    engine.reset()
    assert len(engine.tile_map.occupied()) == 3
    assert engine.startup_messages == []


def test_random_play_preserves_board_invariants():
    engine = BoardEngine(rng=random.Random(99), make_handle=lambda coord, color: object())
    clicker = random.Random(4)
    live = {ball.handle for _, ball in engine.tile_map.occupied()}
    for _ in range(400):
        if engine.is_game_over:
            break
        target = Coordinate(clicker.randrange(9), clicker.randrange(9))
        for message in engine.click(target):
            if isinstance(message, BallPlaced):
                assert message.handle not in live
                live.add(message.handle)
            elif isinstance(message, BallRemoved):
                live.remove(message.handle)
        assert len(engine.tile_map) == 81
        on_board = [ball.handle for _, ball in engine.tile_map.occupied()]
        assert len(on_board) == len(set(on_board))
        assert set(on_board) == live
        assert engine.is_game_over or engine.tile_map.free_coordinates()
