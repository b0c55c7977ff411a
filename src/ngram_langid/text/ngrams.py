"""Character n-gram extraction.

Order 1 grams are the letters of each word. Higher orders slide over the word
padded with one space on each side, so " th" and "he " capture word
boundaries. Grams never span two words.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

MAX_ORDER = 5


def extract_ngrams(normalized: str, order: int) -> list[str]:
    """All n-grams of one order from normalized text, in text order."""
    if not 1 <= order <= MAX_ORDER:
        raise ValueError(f"n-gram order must be between 1 and {MAX_ORDER}, got {order}")
    grams: list[str] = []
    for word in normalized.split():
        padded = word if order == 1 else f" {word} "
        grams.extend(padded[i : i + order] for i in range(len(padded) - order + 1))
    return grams


def count_ngrams(normalized: str, orders: Iterable[int]) -> dict[int, Counter[str]]:
    """N-gram counts for each requested order."""
    return {order: Counter(extract_ngrams(normalized, order)) for order in orders}
