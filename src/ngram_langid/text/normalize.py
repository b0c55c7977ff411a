"""Text normalization applied before script classification and n-gram extraction.

Steps:
1. NFC normalization (precomposed Vietnamese/Latin diacritics)
2. Case folding
3. Every character that is not a letter or combining mark becomes a space
4. Collapse whitespace
"""

import re
import unicodedata

_WHITESPACE = re.compile(r"\s+")


def _is_letter(ch: str) -> bool:
    # Marks are kept: Thai vowel signs and tone marks are category Mn
    return unicodedata.category(ch)[0] in ("L", "M")


def normalize_text(text: str) -> str:
    """Normalize text into space-separated runs of letters."""
    text = unicodedata.normalize("NFC", text).casefold()
    text = "".join(ch if _is_letter(ch) else " " for ch in text)
    return _WHITESPACE.sub(" ", text).strip()


def letter_count(normalized: str) -> int:
    """Number of non-space characters in already normalized text."""
    return len(normalized) - normalized.count(" ")
