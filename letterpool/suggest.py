"""Suggestion engine — which dictionary words fit the remaining letters."""
import logging
from typing import Iterable, Sequence, Tuple

from letterpool.buffer import word_start as trailing_word
from letterpool.letters import count_letters

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 100


def is_legal(word: str, word_start: str, account: Sequence[int]) -> bool:
    """Check that turning `word_start` into `word` needs no more of any letter than the account allows."""
    need = count_letters(word_start, word)
    return all(n <= have for n, have in zip(need, account))


def suggest(active_content: str, account: Sequence[int], words: Iterable[str],
            limit: int = MAX_SUGGESTIONS) -> Tuple[str, ...]:
    """Rank the words that complete the trailing word of `active_content`.

    Candidates must start with the partial word and pass `is_legal`. They are
    ordered longest first; equal lengths keep dictionary order.
    """
    start = trailing_word(active_content)
    found = [w for w in words if w.startswith(start) and is_legal(w, start, account)]
    found.sort(key=len, reverse=True)
    return tuple(found[:min(limit, MAX_SUGGESTIONS)])


class SuggestionEngine:
    """Holds the dictionary and recomputes the suggestion list on demand."""

    def __init__(self, words: Iterable[str], limit: int = MAX_SUGGESTIONS):
        self._words: Tuple[str, ...] = tuple(words)
        self._limit = min(limit, MAX_SUGGESTIONS)

    def refresh(self, active_content: str, account: Sequence[int]) -> Tuple[str, ...]:
        result = suggest(active_content, account, self._words, self._limit)
        logger.debug("%d suggestions for %r", len(result), trailing_word(active_content))
        return result
