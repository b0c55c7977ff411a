"""Turns raw log-likelihood scores into a ranked confidence distribution."""

from __future__ import annotations

import numpy as np

from ngram_langid.languages import Language
from ngram_langid.models import ConfidenceResult, LanguageConfidence


def rank(scores: dict[Language, float]) -> ConfidenceResult:
    """Shift by the best score, exponentiate and normalize to sum 1.

    Sorted by confidence descending. Equal confidences are ordered by
    language declaration order, never by the order of ``scores``. With more
    than one candidate the best confidence stays strictly below 1.0.
    """
    if not scores:
        return []

    languages = sorted(scores, key=lambda lang: lang.rank)
    raw = np.array([scores[lang] for lang in languages], dtype=np.float64)
    weights = np.exp(raw - raw.max())
    confidences = weights / weights.sum()
    if len(languages) > 1:
        # Scores never make one of several candidates certain
        confidences = np.minimum(confidences, np.nextafter(1.0, 0.0))

    ranked = sorted(
        zip(languages, confidences.tolist()),
        key=lambda item: (-item[1], item[0].rank),
    )
    return [
        LanguageConfidence(language=language, confidence=min(max(value, 0.0), 1.0))
        for language, value in ranked
    ]
