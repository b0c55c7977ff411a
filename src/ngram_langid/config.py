from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings

from ngram_langid.languages import ALL_LANGUAGES


class Settings(BaseSettings):
    log_level: str = "info"
    # Candidate set, as tags or ISO codes. JSON list when set from the environment.
    languages: list[str] = [language.tag for language in ALL_LANGUAGES]
    # N-gram orders extracted from corpora and input text
    min_order: int = 1
    max_order: int = 5
    # Inputs with fewer letters than this are scored with low orders only
    short_text_threshold: int = 24
    short_text_max_order: int = 3
    # Floor for unseen n-grams, as a fraction of one occurrence in the largest corpus
    smoothing: float = 0.1
    # Words counted as independent evidence; caps how sharp a distribution gets
    max_evidence_words: int = 6
    # Share of script-bearing characters needed for a script-only verdict
    script_supermajority: float = 0.5
    # Reference corpora (YAML, tag -> text). Empty = bundled corpora.yaml
    corpus_path: Path | None = None

    model_config = {
        "env_prefix": "LANGID_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def _check_ranges(self) -> "Settings":
        if not 1 <= self.min_order <= self.max_order <= 5:
            raise ValueError("n-gram orders must satisfy 1 <= min_order <= max_order <= 5")
        if self.short_text_max_order < self.min_order:
            raise ValueError("short_text_max_order must be >= min_order")
        if not 0.0 < self.smoothing < 1.0:
            raise ValueError("smoothing must be in (0, 1)")
        if self.max_evidence_words < 1:
            raise ValueError("max_evidence_words must be >= 1")
        if not 0.0 <= self.script_supermajority < 1.0:
            raise ValueError("script_supermajority must be in [0, 1)")
        return self

    @property
    def orders(self) -> tuple[int, ...]:
        return tuple(range(self.min_order, self.max_order + 1))


settings = Settings()
