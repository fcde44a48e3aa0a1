"""
Test suite for the play-session state machine.

Covers gestures (begin/extend/end), matching, scoring, duplicate finds,
completion, the clock and highlight queries.
"""

import pytest
from src.game import GameConfig, Session
from src.wordsearch.models import Cell, WordSearchGrid

from conftest import build_puzzle


def select(session: Session, *cells):
    """Run a full gesture over the given (row, col) pairs."""
    session.begin(*cells[0])
    for cell in cells[1:]:
        session.extend(*cell)
    return session.end()


KAY = [(0, 0), (0, 1), (0, 2)]
PEN = [(1, 0), (1, 1), (1, 2)]
SIWO = [(2, 0), (2, 1), (2, 2), (2, 3)]
KEW = [(0, 0), (1, 1), (2, 2)]


class TestGestures:
    """Test cases for selection tracking."""

    def test_begin_resets_selection(self, puzzle):
        session = Session.start(puzzle)
        session.begin(3, 3)
        session.extend(3, 2)
        session.begin(0, 0)
        assert session.selected_cells == {Cell(0, 0)}
        assert session.is_selecting is True

    def test_extend_grows_selection(self, puzzle):
        session = Session.start(puzzle)
        session.begin(0, 0)
        session.extend(0, 1)
        session.extend(0, 1)
        assert session.selected_cells == {Cell(0, 0), Cell(0, 1)}

    def test_extend_without_gesture_is_ignored(self, puzzle):
        session = Session.start(puzzle)
        session.extend(0, 1)
        assert session.selected_cells == set()

    def test_end_without_gesture_returns_none(self, puzzle):
        session = Session.start(puzzle)
        assert session.end() is None

    def test_out_of_bounds_cells_are_ignored(self, puzzle):
        session = Session.start(puzzle)
        session.begin(9, 9)
        assert session.is_selecting is False
        session.begin(0, 0)
        session.extend(-1, 0)
        session.extend(0, 4)
        assert session.selected_cells == {Cell(0, 0)}

    def test_candidate_is_read_row_major(self, puzzle):
        """Cells entered in any order are read row by row, column by column."""
        session = Session.start(puzzle)
        session.begin(0, 2)
        session.extend(0, 0)
        session.extend(0, 1)
        assert session.candidate() == "KAY"


class TestMatching:
    """Test cases for resolving a gesture."""

    def test_find_word(self, puzzle):
        session = Session.start(puzzle)
        result = select(session, *KAY)

        assert result.matched is True
        assert result.word == "KAY"
        assert result.points == 30
        assert session.found_words == {"KAY"}
        assert session.score == 30
        assert puzzle.words[0].found is True

    def test_selection_kept_after_match(self, puzzle):
        session = Session.start(puzzle)
        select(session, *KAY)
        assert session.selected_cells == {Cell(*c) for c in KAY}
        assert session.is_selecting is False

    def test_failed_selection_is_cleared(self, puzzle):
        session = Session.start(puzzle)
        result = select(session, (0, 1), (1, 1), (2, 1))

        assert result.matched is False
        assert result.candidate == "AEI"
        assert session.selected_cells == set()
        assert session.score == 0
        assert session.found_words == set()

    def test_refinding_word_changes_nothing(self, puzzle):
        session = Session.start(puzzle)
        select(session, *KAY)
        result = select(session, *KAY)

        assert result.matched is False
        assert session.score == 30
        assert session.found_words == {"KAY"}

    def test_diagonal_word(self, puzzle):
        session = Session.start(puzzle)
        result = select(session, *KEW)
        assert result.word == "KEW"

    def test_single_cell_gesture_fails(self, puzzle):
        session = Session.start(puzzle)
        result = select(session, (0, 0))
        assert result.matched is False
        assert result.candidate == "K"

    def test_partial_word_fails(self, puzzle):
        session = Session.start(puzzle)
        result = select(session, *SIWO[:3])
        assert result.matched is False
        assert session.score == 0

    def test_extra_cell_fails(self, puzzle):
        session = Session.start(puzzle)
        result = select(session, *KAY, (0, 3))
        assert result.candidate == "KAYX"
        assert result.matched is False

    def test_history_records_every_gesture(self, puzzle):
        session = Session.start(puzzle)
        select(session, (3, 3))
        select(session, *PEN)
        assert [r.matched for r in session.history] == [False, True]


class TestScoring:
    """Test cases for score accumulation."""

    def test_score_is_sum_of_lengths(self, puzzle):
        session = Session.start(puzzle)
        select(session, *KAY)
        select(session, *SIWO)
        assert session.score == 30 + 40

    def test_score_independent_of_order(self):
        first = Session.start(build_puzzle())
        second = Session.start(build_puzzle())

        for cells in (KAY, PEN, SIWO):
            select(first, *cells)
        for cells in (SIWO, KAY, PEN):
            select(second, *cells)

        assert first.score == second.score == 100

    def test_points_per_letter_from_config(self, puzzle):
        session = Session.start(puzzle, GameConfig(points_per_letter=5))
        result = select(session, *PEN)
        assert result.points == 15


class TestCompletion:
    """Test cases for the end of a game."""

    def test_completes_on_last_word(self, puzzle):
        session = Session.start(puzzle)
        for cells in (KAY, PEN, SIWO):
            result = select(session, *cells)
            assert result.complete is False
            assert session.is_complete is False

        result = select(session, *KEW)
        assert result.complete is True
        assert session.is_complete is True
        assert session.remaining_words == []

    def test_gestures_ignored_after_completion(self, puzzle):
        session = Session.start(puzzle)
        for cells in (KAY, PEN, SIWO, KEW):
            select(session, *cells)

        session.begin(3, 3)
        assert session.end() is None
        assert session.score == 130

    def test_empty_puzzle_never_completes(self):
        empty = WordSearchGrid(grid=[["A", "B"], ["C", "D"]], words=[], grid_size=2)
        session = Session.start(empty)

        result = select(session, (0, 0), (0, 1))
        assert result.matched is False
        assert session.is_playable is False
        assert session.is_complete is False


class TestClock:
    """Test cases for elapsed time."""

    def test_tick_counts_seconds(self, puzzle):
        session = Session.start(puzzle)
        session.tick()
        session.tick()
        session.tick(3)
        assert session.elapsed_seconds == 5

    def test_clock_stops_on_completion(self, puzzle):
        session = Session.start(puzzle)
        session.tick()
        for cells in (KAY, PEN, SIWO, KEW):
            select(session, *cells)
        session.tick()
        session.tick(10)
        assert session.elapsed_seconds == 1

    def test_stop_freezes_session(self, puzzle):
        session = Session.start(puzzle)
        session.tick()
        session.begin(0, 0)
        session.stop()
        session.tick()

        assert session.elapsed_seconds == 1
        assert session.end() is None

    def test_non_positive_ticks_are_ignored(self, puzzle):
        session = Session.start(puzzle)
        session.tick(0)
        session.tick(-4)
        assert session.elapsed_seconds == 0


class TestQueries:
    """Test cases for state read back by the UI."""

    def test_cell_states(self, puzzle):
        session = Session.start(puzzle)
        select(session, *KAY)
        session.begin(3, 0)

        assert session.cell_state(0, 1) == "found"
        assert session.cell_state(3, 0) == "selected"
        assert session.cell_state(3, 3) == "idle"

    def test_found_wins_over_selected(self, puzzle):
        session = Session.start(puzzle)
        select(session, *KAY)
        session.begin(0, 0)
        assert session.cell_state(0, 0) == "found"

    def test_get_state(self, puzzle):
        session = Session.start(puzzle)
        select(session, *PEN)
        state = session.get_state()

        assert state["score"] == 30
        assert state["found_count"] == 1
        assert state["total_words"] == 4
        assert state["remaining_words"] == ["KAY", "SIWO", "KEW"]
        assert state["is_complete"] is False

    def test_get_result(self, puzzle):
        session = Session.start(puzzle)
        select(session, *SIWO)
        session.tick(7)
        result = session.get_result()

        assert result.grid == ["KAYX", "PENQ", "SIWO", "ZZZZ"]
        assert result.grid_size == 4
        assert [w.word for w in result.words if w.found] == ["SIWO"]
        assert result.score == 40
        assert result.elapsed_seconds == 7
        assert result.found_count == 1
        assert result.total_words == 4
        assert result.complete is False
        assert len(result.history) == 1
        assert result.started_at != ""
