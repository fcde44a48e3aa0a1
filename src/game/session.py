from datetime import datetime
from typing import List, Dict, Optional, Set
from pydantic import BaseModel, Field, ConfigDict

from .models import CellState, GameConfig, SelectionResult, SessionResult, WordStatus
from ..wordsearch.models import Cell, WordSearchGrid, POINTS_PER_LETTER


class Session(BaseModel):
    """
    Tracks one play session over a generated word-search grid.

    A gesture starts with begin(), grows with extend() and is resolved by end():
    the selected cells are read in row-major order and the resulting string is
    matched against the words not found yet. Each word scores once, and the
    session completes when every placed word has been found.

    Attributes:
        puzzle: The grid being played
        selected_cells: Cells of the current (or last successful) gesture
        found_words: Words found so far
        score: Points accumulated
        elapsed_seconds: Seconds played, frozen once complete
        is_complete: Whether every placed word has been found
        is_selecting: Whether a gesture is in progress
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    puzzle: WordSearchGrid
    points_per_letter: int = Field(default=POINTS_PER_LETTER, ge=0)
    selected_cells: Set[Cell] = Field(default_factory=set)
    found_words: Set[str] = Field(default_factory=set)
    score: int = 0
    elapsed_seconds: int = 0
    is_complete: bool = False
    is_selecting: bool = False
    is_stopped: bool = False
    history: List[SelectionResult] = Field(default_factory=list)
    started_at: Optional[datetime] = None

    def model_post_init(self, __context) -> None:
        """Stamp the session start time."""
        if self.started_at is None:
            self.started_at = datetime.now()

    @classmethod
    def start(cls, puzzle: WordSearchGrid, config: Optional[GameConfig] = None) -> "Session":
        """
        Factory method to start a fresh session on a generated grid.

        Args:
            puzzle: The generated grid
            config: Optional game configuration (for the scoring rate)

        Returns:
            A new Session with empty selection, no found words and a zero score
        """
        config = config or GameConfig()
        return cls(puzzle=puzzle, points_per_letter=config.points_per_letter)

    @property
    def total_words(self) -> int:
        """Number of words placed in the grid."""
        return len(self.puzzle.words)

    @property
    def found_count(self) -> int:
        return len(self.found_words)

    @property
    def remaining_words(self) -> List[str]:
        """Placed words not found yet, in placement order."""
        return [w.word for w in self.puzzle.words if w.word not in self.found_words]

    @property
    def is_playable(self) -> bool:
        """A grid without any placed word can never be completed."""
        return self.total_words > 0

    @property
    def is_active(self) -> bool:
        return not self.is_complete and not self.is_stopped

    def begin(self, row: int, col: int) -> None:
        """Start a gesture on a cell; the selection is reset to that cell."""
        cell = Cell(row, col)
        if not self.is_active or not self.puzzle.in_bounds(cell):
            return
        self.is_selecting = True
        self.selected_cells = {cell}

    def extend(self, row: int, col: int) -> None:
        """Add a cell entered by the ongoing gesture."""
        cell = Cell(row, col)
        if not self.is_selecting or not self.is_active or not self.puzzle.in_bounds(cell):
            return
        self.selected_cells.add(cell)

    def candidate(self) -> str:
        """Letters of the current selection read in row-major order."""
        return ''.join(self.puzzle.letter_at(cell) for cell in sorted(self.selected_cells))

    def end(self) -> Optional[SelectionResult]:
        """
        Resolve the current gesture.

        On a match the word is marked found and scores its length times
        points_per_letter; the selection stays visible. Otherwise the selection
        is cleared and nothing else changes.

        Returns:
            The SelectionResult, or None if no gesture was in progress
        """
        if not self.is_selecting or not self.is_active:
            return None
        self.is_selecting = False

        cells = sorted(self.selected_cells)
        candidate = self.candidate()
        result = SelectionResult(candidate=candidate, cells=cells, score=self.score)

        match = next(
            (w for w in self.puzzle.words if w.word == candidate and w.word not in self.found_words),
            None,
        )

        if match is None:
            self.selected_cells = set()
        else:
            match.found = True
            self.found_words.add(match.word)
            points = len(match.word) * self.points_per_letter
            self.score += points
            self._check_complete()

            result.matched = True
            result.word = match.word
            result.points = points
            result.score = self.score
            result.complete = self.is_complete

        self.history.append(result)
        return result

    def tick(self, seconds: int = 1) -> None:
        """Advance the clock; it stops for good once the session is complete or stopped."""
        if self.is_active and seconds > 0:
            self.elapsed_seconds += seconds

    def stop(self) -> None:
        """Abandon the session: the clock and gestures are frozen."""
        self.is_stopped = True
        self.is_selecting = False

    def _check_complete(self) -> None:
        """Update the completion flag from the found-word count."""
        self.is_complete = self.is_playable and self.found_count == self.total_words

    def cell_state(self, row: int, col: int) -> CellState:
        """Highlight state of a cell; found words take precedence over the selection."""
        cell = Cell(row, col)
        for placed in self.puzzle.words:
            if placed.word in self.found_words and cell in placed.cells:
                return "found"
        if cell in self.selected_cells:
            return "selected"
        return "idle"

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Returns:
            Dictionary containing session state
        """
        return {
            "score": self.score,
            "elapsed_seconds": self.elapsed_seconds,
            "found_count": self.found_count,
            "total_words": self.total_words,
            "remaining_words": self.remaining_words,
            "is_complete": self.is_complete,
            "is_selecting": self.is_selecting,
            "is_playable": self.is_playable,
        }

    def get_result(self, config: Optional[GameConfig] = None) -> SessionResult:
        """
        Get a snapshot of the session.

        Args:
            config: Configuration the session was created with

        Returns:
            SessionResult with the grid, word statuses and scores
        """
        return SessionResult(
            config=config or GameConfig(points_per_letter=self.points_per_letter),
            grid=[''.join(row) for row in self.puzzle.grid],
            grid_size=self.puzzle.grid_size,
            words=[
                WordStatus(word=w.word, found=w.word in self.found_words, cells=w.cells)
                for w in self.puzzle.words
            ],
            score=self.score,
            elapsed_seconds=self.elapsed_seconds,
            found_count=self.found_count,
            total_words=self.total_words,
            complete=self.is_complete,
            selected_cells=sorted(self.selected_cells),
            history=self.history,
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=datetime.now().isoformat(),
        )
