import pytest

from src.wordsearch.models import Cell, PlacedWord, WordSearchGrid


def build_puzzle() -> WordSearchGrid:
    """
    A hand-made 4x4 puzzle:

        K A Y X
        P E N Q
        S I W O
        Z Z Z Z

    KAY (right), PEN (right), SIWO (right) and KEW (down-right, shares K with KAY).
    """
    rows = ["KAYX", "PENQ", "SIWO", "ZZZZ"]
    words = [
        PlacedWord(word="KAY", cells=[Cell(0, 0), Cell(0, 1), Cell(0, 2)]),
        PlacedWord(word="PEN", cells=[Cell(1, 0), Cell(1, 1), Cell(1, 2)]),
        PlacedWord(word="SIWO", cells=[Cell(2, 0), Cell(2, 1), Cell(2, 2), Cell(2, 3)]),
        PlacedWord(word="KEW", cells=[Cell(0, 0), Cell(1, 1), Cell(2, 2)]),
    ]
    return WordSearchGrid(grid=[list(r) for r in rows], words=words, grid_size=4)


@pytest.fixture
def puzzle() -> WordSearchGrid:
    return build_puzzle()
