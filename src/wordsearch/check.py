"""
Consistency checks for generated word-search grids.

Validates:
1. Grid shape (square, grid_size rows of grid_size cells)
2. Every cell holds exactly one allowed letter
3. Every word path is in bounds, follows one fixed direction and spells the word
4. Words sharing a cell agree on its letter
"""

from typing import Dict, List

from .models import Cell, GridError, GridReport, WordSearchGrid, ALLOWED_LETTERS


def check_shape(grid: WordSearchGrid) -> List[GridError]:
    """Check the grid is square and every cell holds one allowed letter."""
    errors: List[GridError] = []

    if len(grid.grid) != grid.grid_size or any(len(row) != grid.grid_size for row in grid.grid):
        errors.append(GridError(
            code="GRID_SHAPE",
            message=f"Grid is not {grid.grid_size}x{grid.grid_size}",
        ))
        return errors

    for r, row in enumerate(grid.grid):
        for c, letter in enumerate(row):
            if len(letter) != 1 or letter not in ALLOWED_LETTERS:
                errors.append(GridError(
                    code="INVALID_CELL",
                    message=f"Cell ({r}, {c}) holds {letter!r}",
                    cell=Cell(r, c),
                ))

    return errors


def check_words(grid: WordSearchGrid) -> List[GridError]:
    """Check each placed word's path against the grid letters."""
    errors: List[GridError] = []
    claimed: Dict[Cell, str] = {}

    for placed in grid.words:
        if len(placed.cells) != len(placed.word):
            errors.append(GridError(
                code="PATH_MISMATCH",
                message=f"'{placed.word}' has {len(placed.cells)} cells for {len(placed.word)} letters",
                word=placed.word,
            ))
            continue

        out_of_bounds = [cell for cell in placed.cells if not grid.in_bounds(cell)]
        if out_of_bounds:
            errors.append(GridError(
                code="PATH_OOB",
                message=f"'{placed.word}' leaves the grid at {tuple(out_of_bounds[0])}",
                word=placed.word,
                cell=out_of_bounds[0],
            ))
            continue

        direction = placed.direction
        if len(placed.cells) > 1:
            start = placed.cells[0]
            straight = direction is not None and all(
                cell == Cell(start.row + i * direction.d_row, start.col + i * direction.d_col)
                for i, cell in enumerate(placed.cells)
            )
            if not straight:
                errors.append(GridError(
                    code="PATH_DIRECTION",
                    message=f"'{placed.word}' does not follow a single allowed direction",
                    word=placed.word,
                ))
                continue

        for letter, cell in zip(placed.word, placed.cells):
            if grid.letter_at(cell) != letter:
                errors.append(GridError(
                    code="PATH_MISMATCH",
                    message=f"'{placed.word}' expects '{letter}' at {tuple(cell)}, grid has '{grid.letter_at(cell)}'",
                    word=placed.word,
                    cell=cell,
                ))
            if cell in claimed and claimed[cell] != letter:
                errors.append(GridError(
                    code="CELL_CONFLICT",
                    message=f"Cell {tuple(cell)} claimed as '{claimed[cell]}' and '{letter}'",
                    word=placed.word,
                    cell=cell,
                ))
            claimed.setdefault(cell, letter)

    return errors


def check_grid(grid: WordSearchGrid) -> GridReport:
    """
    Run every check on a generated grid.

    Word paths are only checked once the grid shape is sound.
    """
    errors = check_shape(grid)
    if not any(e.code == "GRID_SHAPE" for e in errors):
        errors.extend(check_words(grid))

    return GridReport(
        valid=len(errors) == 0,
        errors=errors,
        words=grid.word_list,
    )
