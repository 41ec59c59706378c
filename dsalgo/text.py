"""Small helpers on sequences, numbers and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from string import ascii_lowercase
from typing import Any


def left_rotate(items: Sequence[Any], d: int) -> list[Any]:
    """Return ``items`` rotated left by ``d`` places; ``d <= 0`` leaves it as is."""
    values = list(items)
    if not values or d <= 0:
        return values
    shift = d % len(values)
    return values[shift:] + values[:shift]


def is_duck_number(num: str | int) -> bool:
    """Tell whether ``num`` has a zero digit that is not a leading zero."""
    return "0" in str(num).lstrip("0")


def round_to_ten(n: int) -> int:
    """Round ``n`` to the nearer multiple of ten; ties go to the lower one.

    The lower multiple is found by truncating toward zero.
    """
    magnitude = abs(n) // 10 * 10
    lower = magnitude if n >= 0 else -magnitude
    upper = lower + 10
    return upper if n - lower > upper - n else lower


def is_pangram(text: str) -> bool:
    """Tell whether ``text`` uses every letter of the English alphabet."""
    letters = {ch.lower() for ch in text if ch.isascii() and ch.isalpha()}
    return len(letters) == len(ascii_lowercase)


def replace_word(text: str, old: str, new: str) -> str:
    """Replace every non-overlapping occurrence of ``old``, scanning left to right."""
    if not old:
        raise ValueError("the word to replace must not be empty")
    return text.replace(old, new)


def has_repeated_letter(word: str) -> bool:
    """Tell whether any lowercase letter occurs more than once in ``word``."""
    invalid = [ch for ch in word if ch not in ascii_lowercase]
    if invalid:
        raise ValueError(f"unexpected characters: {''.join(invalid)!r}")
    return any(count > 1 for count in Counter(word).values())


def reverse_concat(tokens: Iterable[str]) -> str:
    """Push the tokens onto a stack and join them as they come off the top."""
    stack = list(tokens)
    return "".join(reversed(stack))