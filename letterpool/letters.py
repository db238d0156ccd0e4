"""Letter accounting — signed per-letter balance between two strings."""
import string
from typing import Optional, Sequence, Tuple

ALPHABET = string.ascii_uppercase
ALPHABET_SIZE = len(ALPHABET)


def letter_index(char: str) -> Optional[int]:
    """Return the 0-25 alphabet slot of a letter, or None for anything else."""
    c = char.lower()
    if len(c) == 1 and 'a' <= c <= 'z':
        return ord(c) - ord('a')
    return None


def count_letters(source: str, target: str) -> Tuple[int, ...]:
    """Per-letter balance: each letter of `target` adds one, each of `source` takes one away.

    Case-insensitive. Digits, punctuation, whitespace and letters outside
    A-Z are ignored.
    """
    counts = [0] * ALPHABET_SIZE
    for c in source:
        i = letter_index(c)
        if i is not None:
            counts[i] -= 1
    for c in target:
        i = letter_index(c)
        if i is not None:
            counts[i] += 1
    return tuple(counts)


def is_balanced(account: Sequence[int]) -> bool:
    """True when the account sums to zero (both sides use the same number of letters)."""
    return sum(account) == 0


def format_account(account: Sequence[int]) -> str:
    """Compact text form, e.g. 'E:-1 L:-1' (zero slots omitted)."""
    return ' '.join(f"{ALPHABET[i]}:{n}" for i, n in enumerate(account) if n)
