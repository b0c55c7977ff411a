"""Supported languages.

Declaration order is significant: it is the deterministic tie-break order
used when two candidates end up with the same confidence.
"""

from __future__ import annotations

from enum import Enum


class Language(Enum):
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    ITALIAN = "it"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    JAPANESE = "ja"
    KOREAN = "ko"
    CHINESE = "zh"
    INDONESIAN = "id"
    MALAY = "ms"
    THAI = "th"
    VIETNAMESE = "vi"
    TAGALOG = "tl"

    @property
    def tag(self) -> str:
        return self.name

    @property
    def iso_code(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        """Position in declaration order."""
        return _ORDER[self]

    @classmethod
    def parse(cls, value: str | Language) -> Language:
        """Resolve a tag ("GERMAN") or ISO 639-1 code ("de"), case-insensitive."""
        if isinstance(value, cls):
            return value
        key = value.strip()
        if key.upper() in cls.__members__:
            return cls[key.upper()]
        try:
            return cls(key.lower())
        except ValueError:
            raise ValueError(f"Unknown language: {value!r}") from None


_ORDER = {language: i for i, language in enumerate(Language)}

ALL_LANGUAGES: tuple[Language, ...] = tuple(Language)
