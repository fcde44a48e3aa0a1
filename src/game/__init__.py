"""Play sessions for the Mots Mawon word search."""

from .models import (
    CellState,
    GameConfig,
    SelectionResult,
    WordStatus,
    SessionResult,
)
from .session import Session
from .word_source import load_dictionary, entry_word, sample_words
from .mots_mawon import MotsMawon

__all__ = [
    "CellState",
    "GameConfig",
    "SelectionResult",
    "WordStatus",
    "SessionResult",
    "Session",
    "load_dictionary",
    "entry_word",
    "sample_words",
    "MotsMawon",
]
