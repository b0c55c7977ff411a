"""Per-language n-gram frequency models.

Models are built once from reference corpora and are read-only afterwards:
tables are exposed through ``MappingProxyType`` and the class has no
mutators, so one set of models can serve any number of concurrent callers.
"""

from __future__ import annotations

import math
import time
from collections import Counter
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ngram_langid.errors import ModelConstructionError
from ngram_langid.languages import Language
from ngram_langid.text.ngrams import count_ngrams
from ngram_langid.text.normalize import normalize_text
from ngram_langid.utils.logging import BOLD, DIM, RESET, get_logger

log = get_logger()

DEFAULT_ORDERS = (1, 2, 3, 4, 5)
DEFAULT_SMOOTHING = 0.1


class FrequencyModel:
    """Relative n-gram frequencies of one language, per order."""

    __slots__ = ("_language", "_frequencies", "_log_frequencies", "_log_floors", "_floors")

    def __init__(
        self,
        language: Language,
        counts: Mapping[int, Counter[str]],
        floors: Mapping[int, float],
    ):
        frequencies: dict[int, Mapping[str, float]] = {}
        log_frequencies: dict[int, Mapping[str, float]] = {}
        for order, counter in counts.items():
            total = sum(counter.values())
            table = {gram: n / total for gram, n in counter.items()} if total else {}
            frequencies[order] = MappingProxyType(table)
            log_frequencies[order] = MappingProxyType({g: math.log(p) for g, p in table.items()})
        self._language = language
        self._frequencies = MappingProxyType(frequencies)
        self._log_frequencies = MappingProxyType(log_frequencies)
        self._floors = MappingProxyType(dict(floors))
        self._log_floors = MappingProxyType({order: math.log(f) for order, f in floors.items()})

    @property
    def language(self) -> Language:
        return self._language

    @property
    def orders(self) -> tuple[int, ...]:
        return tuple(sorted(self._frequencies))

    def table(self, order: int) -> Mapping[str, float]:
        """Read-only n-gram -> relative frequency table for one order."""
        return self._frequencies.get(order, MappingProxyType({}))

    def floor(self, order: int) -> float:
        return self._floors[order]

    def frequency(self, ngram: str) -> float:
        """Relative frequency of an n-gram, or the smoothed floor when unseen."""
        order = len(ngram)
        return self.table(order).get(ngram, self._floors[order])

    def log_frequency(self, ngram: str) -> float:
        order = len(ngram)
        return self._log_frequencies[order].get(ngram, self._log_floors[order])

    def contains(self, ngram: str) -> bool:
        return ngram in self.table(len(ngram))

    def log_table(self, order: int) -> Mapping[str, float]:
        return self._log_frequencies[order]

    def log_floor(self, order: int) -> float:
        return self._log_floors[order]

    def __repr__(self) -> str:
        sizes = ", ".join(f"{o}:{len(self._frequencies[o])}" for o in self.orders)
        return f"FrequencyModel({self._language.tag}, {{{sizes}}})"


def build_models(
    corpora: Mapping[Language, str | Iterable[str]],
    languages: Iterable[Language] | None = None,
    orders: Iterable[int] = DEFAULT_ORDERS,
    smoothing: float = DEFAULT_SMOOTHING,
) -> dict[Language, FrequencyModel]:
    """Build one frequency model per language.

    Args:
        corpora: Reference text per language (a string or an iterable of paragraphs).
        languages: Languages that must get a model. Defaults to every corpus key.
        orders: N-gram orders to extract.
        smoothing: Unseen n-grams get ``smoothing / largest order total`` as their
            frequency. The floor is shared by all languages of one build, so an
            unseen n-gram costs every language the same.

    Raises ModelConstructionError when a requested language has no corpus or its
    corpus yields no n-grams.
    """
    started = time.monotonic()
    orders = tuple(sorted(set(orders)))
    if not orders:
        raise ValueError("at least one n-gram order is required")
    languages = tuple(corpora) if languages is None else tuple(languages)
    if not languages:
        raise ModelConstructionError((), "no languages requested")

    missing = [lang for lang in languages if not corpora.get(lang)]
    if missing:
        raise ModelConstructionError(missing)

    counts: dict[Language, dict[int, Counter[str]]] = {}
    for language in languages:
        text = corpora[language]
        if not isinstance(text, str):
            text = "\n".join(text)
        counts[language] = count_ngrams(normalize_text(text), orders)

    empty = [lang for lang, by_order in counts.items() if not any(by_order.values())]
    if empty:
        raise ModelConstructionError(empty, "corpus contains no letters")

    floors = {}
    for order in orders:
        largest = max(sum(by_order[order].values()) for by_order in counts.values())
        floors[order] = smoothing / max(largest, 1)

    models = {lang: FrequencyModel(lang, counts[lang], floors) for lang in languages}

    elapsed_ms = (time.monotonic() - started) * 1000
    log.info(
        f"{BOLD}MODELS{RESET} built {len(models)} languages, "
        f"orders {orders[0]}-{orders[-1]} {DIM}({elapsed_ms:.0f}ms){RESET}"
    )
    for model in models.values():
        log.debug(f"  {DIM}{model!r}{RESET}")
    return models
