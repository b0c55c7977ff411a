"""Statistical scoring of normalized text against candidate languages.

For each order, from the highest down, every n-gram of the text adds
``order * log(frequency)`` to each candidate's score. Higher orders are more
discriminative and weigh more. Short inputs skip the high orders, whose
statistics are too sparse to trust on a handful of characters.

The weighted sum is turned into a per-gram mean and scaled by the number of
words that contributed, up to ``max_evidence_words``: one word is one
observation, however many overlapping n-grams it yields.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Collection, Mapping

from ngram_langid.frequency import FrequencyModel
from ngram_langid.languages import Language
from ngram_langid.text.ngrams import count_ngrams
from ngram_langid.text.normalize import letter_count

# Log-scale score per language, owned by one detection call
ScoreVector = dict[Language, float]


class Scorer:
    def __init__(
        self,
        models: Mapping[Language, FrequencyModel],
        short_text_threshold: int = 24,
        short_text_max_order: int = 3,
        max_evidence_words: int = 6,
    ):
        self._models = models
        self._short_text_threshold = short_text_threshold
        self._short_text_max_order = short_text_max_order
        self._max_evidence_words = max_evidence_words
        orders: set[int] = set()
        for model in models.values():
            orders.update(model.orders)
        self._orders = tuple(sorted(orders, reverse=True))

    def orders_for(self, normalized: str) -> tuple[int, ...]:
        """Orders used for this text, highest first."""
        if letter_count(normalized) < self._short_text_threshold:
            short = tuple(o for o in self._orders if o <= self._short_text_max_order)
            # A model built only from high orders still has to score something
            return short or self._orders[-1:]
        return self._orders

    def score(self, normalized: str, candidates: Collection[Language]) -> ScoreVector:
        """Weighted mean log-frequency per candidate, times the word evidence.

        N-grams no candidate has ever seen are skipped, they would add the same
        floor to every score. Returns an empty vector when the text has no
        n-gram any candidate knows.
        """
        if not candidates:
            raise ValueError("score() needs at least one candidate language")
        models = [self._models[language] for language in candidates]
        orders = self.orders_for(normalized)
        tables = {
            order: [(model.language, model.log_table(order), model.log_floor(order)) for model in models]
            for order in orders
        }

        totals = dict.fromkeys(candidates, 0.0)
        total_weight = 0
        words = 0
        for word, repeats in Counter(normalized.split()).items():
            informative = False
            for order, grams in count_ngrams(word, orders).items():
                rows = tables[order]
                for gram, count in grams.items():
                    if not any(gram in table for _, table, _ in rows):
                        continue
                    informative = True
                    weight = order * count * repeats
                    total_weight += weight
                    for language, table, floor in rows:
                        totals[language] += weight * table.get(gram, floor)
            if informative:
                words += repeats

        if not total_weight:
            return {}
        evidence = min(words, self._max_evidence_words)
        return {language: total / total_weight * evidence for language, total in totals.items()}
