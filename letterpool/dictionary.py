"""Dictionary loading — a word file, or the word list bundled with pyspellchecker."""
import logging
from pathlib import Path
from typing import Tuple, Union

from spellchecker import SpellChecker

logger = logging.getLogger(__name__)


class DictionaryError(Exception):
    """The word list could not be loaded."""


def load_word_list(path: Union[str, Path]) -> Tuple[str, ...]:
    """Read one word per line, keeping file order. Blank lines are skipped."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            words = tuple(line.strip() for line in f if line.strip())
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryError(f"Cannot read word list {path}: {e}") from e
    logger.info("Loaded %d words from %s", len(words), path)
    return words


def load_builtin_words(language: str = "en") -> Tuple[str, ...]:
    """Alphabetical word list from the pyspellchecker frequency dictionary."""
    try:
        spell = SpellChecker(language=language)
    except (ValueError, OSError) as e:
        raise DictionaryError(f"No built-in word list for language {language!r}: {e}") from e
    words = tuple(sorted(spell.word_frequency.keys()))
    logger.info("Loaded %d built-in words (%s)", len(words), language)
    return words
