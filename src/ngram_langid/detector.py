"""Detection facade.

    detector = LanguageDetector.from_settings(settings)
    detector.detect_language_of("Guten Morgen, wie geht es dir?")  # Language.GERMAN
    detector.detect_top_languages("Selamat pagi", 2)

Pipeline per call: normalize -> script classifier (may answer immediately)
-> scorer -> ranker. A detector holds only immutable state after
construction and can be shared freely between threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from ngram_langid.config import Settings
from ngram_langid.corpus import load_corpora
from ngram_langid.errors import ModelConstructionError
from ngram_langid.frequency import FrequencyModel, build_models
from ngram_langid.languages import Language
from ngram_langid.models import UNKNOWN, ConfidenceResult, DetectorConfig, LanguageConfidence
from ngram_langid.ranker import rank
from ngram_langid.scorer import Scorer
from ngram_langid.text import script
from ngram_langid.text.normalize import normalize_text
from ngram_langid.utils.logging import DIM, RESET, get_logger

log = get_logger()


class LanguageDetector:
    def __init__(
        self,
        models: Mapping[Language, FrequencyModel],
        config: DetectorConfig | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or Settings()
        config = config or DetectorConfig(languages=settings.languages)
        missing = [lang for lang in config.languages if lang not in models]
        if missing:
            raise ModelConstructionError(missing, "no frequency model")

        self._config = config
        # Only the configured languages are kept; the mapping is never mutated
        self._models = {lang: models[lang] for lang in config.languages}
        self._supermajority = settings.script_supermajority
        self._scorer = Scorer(
            self._models,
            short_text_threshold=settings.short_text_threshold,
            short_text_max_order=settings.short_text_max_order,
            max_evidence_words=settings.max_evidence_words,
        )

    @classmethod
    def build(
        cls,
        languages: Iterable[Language | str] | None = None,
        corpora: Mapping[Language, str] | None = None,
        settings: Settings | None = None,
    ) -> LanguageDetector:
        """Build models from corpora (bundled by default) and wrap them."""
        settings = settings or Settings()
        config = DetectorConfig(languages=list(languages) if languages is not None else settings.languages)
        if corpora is None:
            corpora = load_corpora(settings.corpus_path)
        models = build_models(
            corpora,
            languages=config.languages,
            orders=settings.orders,
            smoothing=settings.smoothing,
        )
        return cls(models, config, settings)

    @classmethod
    def from_settings(cls, settings: Settings) -> LanguageDetector:
        return cls.build(settings=settings)

    @property
    def config(self) -> DetectorConfig:
        return self._config

    @property
    def languages(self) -> tuple[Language, ...]:
        return self._config.languages

    def compute_language_confidence_values(self, text: str) -> ConfidenceResult:
        """All candidates with confidence, ranked. Empty when undetectable."""
        normalized = normalize_text(text)
        if not normalized:
            log.debug(f"{DIM}no letters in input, undetectable{RESET}")
            return []

        verdict = script.classify(normalized, self._config.languages, self._supermajority)
        if verdict is not None:
            log.debug(f"{DIM}script fast path: {verdict.tag}{RESET}")
            return [LanguageConfidence(language=verdict, confidence=1.0)]

        scores = self._scorer.score(normalized, self._config.languages)
        if not scores:
            log.debug(f"{DIM}no known n-grams in input, undetectable{RESET}")
        return rank(scores)

    def detect_language_of(self, text: str) -> Language | None:
        """Best guess, or None when undetectable."""
        results = self.compute_language_confidence_values(text)
        return results[0].language if results else None

    def detect_language_with_confidence(self, text: str) -> LanguageConfidence:
        """Best guess with its confidence, or the UNKNOWN sentinel."""
        results = self.compute_language_confidence_values(text)
        return results[0] if results else UNKNOWN

    def detect_languages_above(self, text: str, threshold: float) -> ConfidenceResult:
        """Every ranked entry with confidence >= threshold."""
        return [r for r in self.compute_language_confidence_values(text) if r.confidence >= threshold]

    def detect_top_languages(self, text: str, n: int) -> ConfidenceResult:
        """The n best entries. n <= 0 gives an empty list."""
        if n <= 0:
            return []
        return self.compute_language_confidence_values(text)[:n]

    def compute_language_confidence(self, text: str, language: Language) -> float:
        """Confidence of a single language, 0.0 when it is not ranked."""
        for result in self.compute_language_confidence_values(text):
            if result.language is language:
                return result.confidence
        return 0.0
