"""
Dictionary loading and word sampling.

Dictionary files are lists of entries, either plain strings or objects exposing
the word under a field (``mot`` in the Creole dictionary export):

    [{"mot": "kay", "traduction": "maison"}, {"mot": "siwo"}, "pen"]
"""

import json
import random
from pathlib import Path
from typing import Any, List, Optional, Sequence

import yaml


def load_dictionary(path: str | Path) -> List[Any]:
    """
    Load dictionary entries from a JSON or YAML file.

    Args:
        path: Path to a .json, .yaml or .yml file holding a list of entries

    Returns:
        The list of entries

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file does not hold a list
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")

    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Dictionary must be a list of entries, got {type(data).__name__}")

    return data


def entry_word(entry: Any, field: str = "mot") -> Optional[str]:
    """Extract the word of a dictionary entry, or None if it has no usable string."""
    if isinstance(entry, str):
        word = entry
    elif isinstance(entry, dict):
        word = entry.get(field)
    else:
        word = getattr(entry, field, None)

    if isinstance(word, str) and word.strip():
        return word.strip()
    return None


def sample_words(
    entries: Sequence[Any],
    count: int = 10,
    field: str = "mot",
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Pick a random subset of words from the dictionary.

    Args:
        entries: Dictionary entries
        count: Number of words to return (fewer if the dictionary is smaller)
        field: Entry field holding the word
        rng: Optional random generator for reproducibility

    Returns:
        Up to count words in random order
    """
    rng = rng or random.Random()
    words = [w for w in (entry_word(e, field) for e in entries) if w is not None]
    return rng.sample(words, min(max(count, 0), len(words)))
