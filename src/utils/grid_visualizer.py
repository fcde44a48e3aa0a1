"""Terminal rendering of a play session."""

from typing import List

from ..game.session import Session


def format_time(seconds: int) -> str:
    """Format elapsed seconds as m:ss."""
    minutes, secs = divmod(max(seconds, 0), 60)
    return f"{minutes}:{secs:02d}"


def render_board(session: Session) -> str:
    """
    Render the grid with row/column indices.

    Letters of found words are wrapped in brackets, selected letters in
    parentheses.
    """
    size = session.puzzle.grid_size
    if size == 0:
        return ""

    lines = ["    " + "".join(f"{c:^3}" for c in range(size))]
    for r, row in enumerate(session.puzzle.grid):
        cells = []
        for c, letter in enumerate(row):
            state = session.cell_state(r, c)
            if state == "found":
                cells.append(f"[{letter}]")
            elif state == "selected":
                cells.append(f"({letter})")
            else:
                cells.append(f" {letter} ")
        lines.append(f"{r:>3} " + "".join(cells))

    return '\n'.join(lines)


def render_words(session: Session) -> str:
    """Render the word list, striking found words with a check mark."""
    lines: List[str] = []
    for placed in session.puzzle.words:
        mark = "x" if placed.word in session.found_words else " "
        lines.append(f"[{mark}] {placed.word}")
    return '\n'.join(lines)


def render_status(session: Session) -> str:
    """One-line summary: time, score and progress."""
    return (
        f"Time: {format_time(session.elapsed_seconds)}  "
        f"Score: {session.score}  "
        f"Found: {session.found_count}/{session.total_words}"
    )
