"""Word-search grid generation for Mots Mawon."""

from .grid import generate, place_word, can_place, fill_empty_cells, trace, word_cells
from .check import check_grid, check_shape, check_words
from .normalize import normalize_word, select_candidates
from .models import (
    Cell,
    Direction,
    PlacedWord,
    WordSearchGrid,
    GridError,
    GridReport,
    DIRECTIONS,
    DEFAULT_GRID_SIZE,
    MAX_WORDS,
    PLACEMENT_ATTEMPTS,
    MIN_WORD_LENGTH,
    POINTS_PER_LETTER,
    ALLOWED_LETTERS,
    FILLER_ALPHABET,
)

__all__ = [
    # Generation
    "generate",
    "place_word",
    "can_place",
    "fill_empty_cells",
    "trace",
    "word_cells",
    # Checks
    "check_grid",
    "check_shape",
    "check_words",
    # Normalization
    "normalize_word",
    "select_candidates",
    # Models
    "Cell",
    "Direction",
    "PlacedWord",
    "WordSearchGrid",
    "GridError",
    "GridReport",
    # Constants
    "DIRECTIONS",
    "DEFAULT_GRID_SIZE",
    "MAX_WORDS",
    "PLACEMENT_ATTEMPTS",
    "MIN_WORD_LENGTH",
    "POINTS_PER_LETTER",
    "ALLOWED_LETTERS",
    "FILLER_ALPHABET",
]
