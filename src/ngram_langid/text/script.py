"""Script classifier: the fast path before statistical scoring.

Some writing systems belong to exactly one supported language (Hangul,
Thai, Cyrillic, kana). When such a script dominates the text, the language is
known without looking at n-gram statistics. Latin never produces a verdict.
"""

from __future__ import annotations

import re
from collections.abc import Collection

from ngram_langid.languages import Language
from ngram_langid.text.normalize import letter_count

_HANGUL = re.compile(r"[\u1100-\u11FF\u3130-\u318F\uA960-\uA97F\uAC00-\uD7AF\uD7B0-\uD7FF]")
_THAI = re.compile(r"[\u0E00-\u0E7F]")
_CYRILLIC = re.compile(r"[\u0400-\u052F\u2DE0-\u2DFF\uA640-\uA69F]")
# Hiragana, Katakana, Katakana phonetic extensions, halfwidth Katakana
_KANA = re.compile(r"[\u3040-\u30FF\u31F0-\u31FF\uFF66-\uFF9F]")
# CJK Unified Ideographs, Extension A, compatibility ideographs, Extension B+
_HAN = re.compile(r"[\u3400-\u4DBF\u4E00-\u9FFF\uF900-\uFAFF\U00020000-\U0002FA1F]")

_SINGLE_LANGUAGE_SCRIPTS = (
    (_HANGUL, Language.KOREAN),
    (_THAI, Language.THAI),
    (_CYRILLIC, Language.RUSSIAN),
)


def script_counts(normalized: str, candidates: Collection[Language]) -> dict[Language, int]:
    """Characters attributable to a single candidate language by script alone."""
    counts: dict[Language, int] = {}
    for pattern, language in _SINGLE_LANGUAGE_SCRIPTS:
        n = len(pattern.findall(normalized))
        if n and language in candidates:
            counts[language] = n

    kana = len(_KANA.findall(normalized))
    han = len(_HAN.findall(normalized))
    # Japanese writing mixes kana with kanji; Han without any kana reads as
    # Chinese, and so does the Han part of kana text when Japanese is not a candidate
    if kana and Language.JAPANESE in candidates:
        counts[Language.JAPANESE] = kana + han
    elif han and Language.CHINESE in candidates:
        counts[Language.CHINESE] = han
    elif han and Language.JAPANESE in candidates:
        counts[Language.JAPANESE] = han
    return counts


def classify(
    normalized: str,
    candidates: Collection[Language],
    supermajority: float = 0.5,
) -> Language | None:
    """Return a language when its script covers more than ``supermajority``
    of the script-bearing characters, else None.
    """
    total = letter_count(normalized)
    if not total:
        return None

    counts = script_counts(normalized, candidates)
    if not counts:
        return None
    language, n = max(counts.items(), key=lambda item: (item[1], -item[0].rank))
    if n / total > supermajority:
        return language
    return None
