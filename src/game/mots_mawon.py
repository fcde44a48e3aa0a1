import json
import logging
import random
from pathlib import Path
from typing import Any, List, Optional
from pydantic import BaseModel, Field, ConfigDict

from .models import GameConfig, SessionResult
from .session import Session
from .word_source import load_dictionary, sample_words
from ..wordsearch.grid import generate
from ..wordsearch.models import WordSearchGrid


logger = logging.getLogger(__name__)


class MotsMawon(BaseModel):
    """
    Top-level orchestrator for the Mots Mawon word search.

    Owns the dictionary and the current session. new_game() throws away the
    previous grid and session and builds fresh ones from a new word sample.

    Attributes:
        config: Game configuration
        entries: Dictionary entries words are sampled from
        session: The session being played
        games_started: Number of games started so far
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    entries: List[Any] = Field(default_factory=list)
    session: Optional[Session] = None
    games_started: int = 0
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        entries: Optional[List[Any]] = None,
        **config_kwargs: Any
    ) -> "MotsMawon":
        """
        Factory method to create a game and start its first session.

        Args:
            config: Optional GameConfig instance
            entries: Dictionary entries; loaded from config.dictionary when omitted
            **config_kwargs: Config parameters if config not provided

        Returns:
            MotsMawon instance with a session ready to play
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if entries is None:
            entries = load_dictionary(config.dictionary) if config.dictionary else []

        game = cls(config=config, entries=entries)
        game.new_game()
        return game

    @property
    def puzzle(self) -> Optional[WordSearchGrid]:
        return self.session.puzzle if self.session else None

    def new_game(self) -> Session:
        """
        Discard the current session and start a new one.

        Returns:
            The new Session
        """
        if self.session is not None:
            self.session.stop()

        words = sample_words(
            self.entries,
            count=self.config.max_words,
            field=self.config.word_field,
            rng=self._rng,
        )
        puzzle = generate(
            words,
            self.config.grid_size,
            max_words=self.config.max_words,
            attempts=self.config.placement_attempts,
            min_length=self.config.min_word_length,
            rng=self._rng,
        )

        self.session = Session.start(puzzle, self.config)
        self.games_started += 1

        if not self.session.is_playable:
            logger.warning("Game %d has no placeable words", self.games_started)

        return self.session

    def get_result(self) -> SessionResult:
        """Snapshot of the current session."""
        if self.session is None:
            raise ValueError("No game started. Call new_game() first.")
        return self.session.get_result(self.config)

    def save_result(self, path: str | Path) -> None:
        """
        Save the current session result to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding="utf-8") as f:
            json.dump(result.model_dump(), f, indent=2, ensure_ascii=False, default=str)
