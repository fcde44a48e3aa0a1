"""Data models and tuning constants for word-search grids."""

from typing import List, NamedTuple, Optional
from pydantic import BaseModel, Field


# Tuning constants (difficulty can be adjusted here without touching the algorithm)
DEFAULT_GRID_SIZE = 12
MAX_WORDS = 10
PLACEMENT_ATTEMPTS = 100
MIN_WORD_LENGTH = 3
POINTS_PER_LETTER = 10

# Accented letters accepted in Creole words
ACCENTED_LETTERS = "ÀÁÂÃÄÅÈÉÊËÌÍÎÏÒÓÔÕÖÙÚÛÜÇÑ"
ALLOWED_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ" + ACCENTED_LETTERS

# Letters used for the empty cells once every word has been placed
FILLER_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZÉÈÊÀÔÙ"


class Cell(NamedTuple):
    """A (row, col) coordinate on the grid."""
    row: int
    col: int


class Direction(NamedTuple):
    """A placement vector."""
    d_row: int
    d_col: int
    name: str


# Words are only ever written in these four directions (never reversed)
DIRECTIONS: List[Direction] = [
    Direction(0, 1, "right"),
    Direction(1, 0, "down"),
    Direction(1, 1, "down-right"),
    Direction(1, -1, "down-left"),
]


class PlacedWord(BaseModel):
    """A word written into the grid, with its cells in letter order."""
    word: str = Field(..., min_length=1)
    cells: List[Cell] = Field(default_factory=list)
    found: bool = False

    @property
    def direction(self) -> Optional[Direction]:
        """Direction followed by the path, or None if it matches none of DIRECTIONS."""
        if len(self.cells) < 2:
            return None
        first, second = self.cells[0], self.cells[1]
        step = (second.row - first.row, second.col - first.col)
        for direction in DIRECTIONS:
            if (direction.d_row, direction.d_col) == step:
                return direction
        return None


class WordSearchGrid(BaseModel):
    """A fully populated grid together with the words hidden in it."""
    grid: List[List[str]] = Field(default_factory=list)
    words: List[PlacedWord] = Field(default_factory=list)
    grid_size: int = DEFAULT_GRID_SIZE

    @property
    def word_list(self) -> List[str]:
        """The placed words, in placement order."""
        return [w.word for w in self.words]

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.grid_size and 0 <= cell.col < self.grid_size

    def letter_at(self, cell: Cell) -> str:
        return self.grid[cell.row][cell.col]

    def render(self) -> str:
        """Render the grid as space-separated rows."""
        return '\n'.join(' '.join(row) for row in self.grid)


class GridError(BaseModel):
    """A single problem found while checking a grid."""
    code: str
    message: str
    word: Optional[str] = None
    cell: Optional[Cell] = None


class GridReport(BaseModel):
    """Result of checking a generated grid."""
    valid: bool
    errors: List[GridError] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
