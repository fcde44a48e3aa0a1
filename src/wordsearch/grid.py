"""Word-search grid generation."""

import logging
import random
from typing import List, Optional, Sequence

from .models import (
    Cell,
    Direction,
    PlacedWord,
    WordSearchGrid,
    DIRECTIONS,
    DEFAULT_GRID_SIZE,
    FILLER_ALPHABET,
    MAX_WORDS,
    MIN_WORD_LENGTH,
    PLACEMENT_ATTEMPTS,
)
from .normalize import select_candidates


logger = logging.getLogger(__name__)


def word_cells(word: str, start: Cell, direction: Direction) -> List[Cell]:
    """Cells a word would occupy from start along direction (bounds unchecked)."""
    return [
        Cell(start.row + i * direction.d_row, start.col + i * direction.d_col)
        for i in range(len(word))
    ]


def can_place(
    grid: List[List[str]],
    word: str,
    start: Cell,
    direction: Direction,
) -> bool:
    """Check that the word stays on the grid and only crosses identical letters."""
    size = len(grid)
    for letter, cell in zip(word, word_cells(word, start, direction)):
        if not (0 <= cell.row < size and 0 <= cell.col < size):
            return False
        existing = grid[cell.row][cell.col]
        if existing and existing != letter:
            return False
    return True


def place_word(
    grid: List[List[str]],
    word: str,
    attempts: int = PLACEMENT_ATTEMPTS,
    rng: Optional[random.Random] = None,
) -> Optional[PlacedWord]:
    """
    Try to write a word into the grid at a random position and direction.

    Each attempt picks a direction and a start cell uniformly at random. Letters
    are only written once a whole path has been accepted, so a failed attempt
    leaves the grid untouched.

    Args:
        grid: The grid being filled (empty cells hold '')
        word: Normalized word to place
        attempts: Number of random positions to try
        rng: Random generator to draw positions from

    Returns:
        The placed word, or None if every attempt collided
    """
    rng = rng or random.Random()
    size = len(grid)
    if size == 0:
        return None

    for _ in range(attempts):
        direction = rng.choice(DIRECTIONS)
        start = Cell(rng.randrange(size), rng.randrange(size))

        if can_place(grid, word, start, direction):
            cells = word_cells(word, start, direction)
            for letter, cell in zip(word, cells):
                grid[cell.row][cell.col] = letter
            return PlacedWord(word=word, cells=cells)

    return None


def fill_empty_cells(
    grid: List[List[str]],
    alphabet: str = FILLER_ALPHABET,
    rng: Optional[random.Random] = None,
) -> int:
    """Fill every empty cell with a random letter. Returns the number of cells filled."""
    rng = rng or random.Random()
    filled = 0
    for row in grid:
        for col, letter in enumerate(row):
            if not letter:
                row[col] = rng.choice(alphabet)
                filled += 1
    return filled


def trace(grid: List[List[str]], cells: Sequence[Cell]) -> str:
    """Read the letters along a path of cells."""
    return ''.join(grid[cell.row][cell.col] for cell in cells)


def generate(
    words: Sequence[str],
    grid_size: int = DEFAULT_GRID_SIZE,
    *,
    max_words: int = MAX_WORDS,
    attempts: int = PLACEMENT_ATTEMPTS,
    min_length: int = MIN_WORD_LENGTH,
    rng: Optional[random.Random] = None,
) -> WordSearchGrid:
    """
    Build a word-search grid from a list of candidate words.

    Words are normalized and filtered, then placed one by one in the order
    given. A word that cannot be placed after `attempts` tries is dropped.
    Remaining cells are filled with random letters. This never fails: an empty
    or unusable word list yields a fully random grid with no words.

    Args:
        words: Raw candidate words (the caller may shuffle them beforehand)
        grid_size: Side length of the square grid
        max_words: Maximum number of words to attempt
        attempts: Placement attempts per word
        min_length: Minimum normalized word length
        rng: Optional random generator for reproducible grids

    Returns:
        WordSearchGrid with the letters and the successfully placed words
    """
    rng = rng or random.Random()
    grid_size = max(grid_size, 0)
    grid: List[List[str]] = [[''] * grid_size for _ in range(grid_size)]

    candidates = select_candidates(words, grid_size, max_words=max_words, min_length=min_length)

    placed: List[PlacedWord] = []
    dropped: List[str] = []
    for word in candidates:
        placed_word = place_word(grid, word, attempts=attempts, rng=rng)
        if placed_word is None:
            logger.info("Dropped '%s' after %d placement attempts", word, attempts)
            dropped.append(word)
        else:
            placed.append(placed_word)

    fill_empty_cells(grid, rng=rng)

    logger.debug(
        "Generated %dx%d grid: %d/%d words placed, %d dropped",
        grid_size, grid_size, len(placed), len(candidates), len(dropped),
    )

    return WordSearchGrid(grid=grid, words=placed, grid_size=grid_size)
