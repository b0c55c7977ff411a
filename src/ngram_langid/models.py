from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ngram_langid.languages import ALL_LANGUAGES, Language

UNKNOWN_TAG = "unknown"


class DetectorConfig(BaseModel):
    """Candidate languages an engine instance evaluates against."""

    model_config = ConfigDict(frozen=True)

    languages: tuple[Language, ...] = ALL_LANGUAGES

    @field_validator("languages", mode="before")
    @classmethod
    def _parse_languages(cls, value):
        if isinstance(value, (str, Language)):
            value = [value]
        return [Language.parse(v) for v in value]

    @field_validator("languages")
    @classmethod
    def _dedup_and_order(cls, value: tuple[Language, ...]) -> tuple[Language, ...]:
        if not value:
            raise ValueError("at least one candidate language is required")
        return tuple(sorted(set(value), key=lambda lang: lang.rank))

    def __contains__(self, language: object) -> bool:
        return language in self.languages


class LanguageConfidence(BaseModel):
    """One entry of a ranked confidence result."""

    model_config = ConfigDict(frozen=True)

    language: Language | None
    confidence: float = Field(ge=0.0, le=1.0)

    @property
    def tag(self) -> str:
        return self.language.tag if self.language else UNKNOWN_TAG

    def format(self) -> str:
        return f"{self.tag}:{self.confidence:.3f}"


# Returned by best-guess-with-confidence when nothing could be detected
UNKNOWN = LanguageConfidence(language=None, confidence=0.0)

# Ranked (Language, confidence) pairs, descending
ConfidenceResult = list[LanguageConfidence]
