"""
Pydantic models for the game layer.

This module contains the data models (configuration, selection outcomes, session
snapshots) used throughout the game layer. The main logic classes (Session,
MotsMawon) remain in their respective files.
"""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field

from ..wordsearch.models import (
    Cell,
    DEFAULT_GRID_SIZE,
    MAX_WORDS,
    MIN_WORD_LENGTH,
    PLACEMENT_ATTEMPTS,
    POINTS_PER_LETTER,
)


# Type aliases
CellState = Literal["found", "selected", "idle"]


class GameConfig(BaseModel):
    """Configuration for a Mots Mawon game."""
    grid_size: int = Field(default=DEFAULT_GRID_SIZE, ge=0)
    max_words: int = Field(default=MAX_WORDS, ge=0)
    placement_attempts: int = Field(default=PLACEMENT_ATTEMPTS, ge=1)
    min_word_length: int = Field(default=MIN_WORD_LENGTH, ge=1)
    points_per_letter: int = Field(default=POINTS_PER_LETTER, ge=0)
    seed: Optional[int] = None
    dictionary: Optional[str] = None  # Path to a JSON or YAML dictionary
    word_field: str = "mot"  # Entry field holding the word


class SelectionResult(BaseModel):
    """Outcome of a finished selection gesture."""
    candidate: str
    cells: List[Cell] = Field(default_factory=list)
    matched: bool = False
    word: Optional[str] = None
    points: int = 0
    score: int = 0
    complete: bool = False


class WordStatus(BaseModel):
    """A word of the puzzle as shown in the word list."""
    word: str
    found: bool = False
    cells: List[Cell] = Field(default_factory=list)


class SessionResult(BaseModel):
    """Snapshot of a play session."""
    config: GameConfig = Field(default_factory=GameConfig)
    grid: List[str] = Field(default_factory=list)
    grid_size: int = 0
    words: List[WordStatus] = Field(default_factory=list)
    score: int = 0
    elapsed_seconds: int = 0
    found_count: int = 0
    total_words: int = 0
    complete: bool = False
    selected_cells: List[Cell] = Field(default_factory=list)
    history: List[SelectionResult] = Field(default_factory=list)
    started_at: str = ""
    ended_at: str = ""
