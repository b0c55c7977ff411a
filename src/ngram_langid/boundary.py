"""String contract for callers outside Python (FFI shims, CLI, services).

Every function returns a plain string:

    detect(text)                     "GERMAN" | "unknown"
    detect_with_confidence(text)     "GERMAN:0.982" | "unknown:0.000"
    detect_multiple(text, 0.1)       "THAI:0.612,ENGLISH:0.388" | "no_languages_above_threshold"
    detect_top_n(text, 3)            "SPANISH:0.991,..." | "no_languages_detected"

Input that is not valid UTF-8 text yields "error: invalid utf8" from all four.

Results handed across a foreign-call boundary go through ExportedStrings: the
producer exports a string and gets an integer handle, the consumer reads it
and releases it exactly once. Releasing None, an unknown handle or an already
released handle does nothing.
"""

from __future__ import annotations

import itertools
import threading
from functools import lru_cache

from ngram_langid.config import settings
from ngram_langid.detector import LanguageDetector
from ngram_langid.models import UNKNOWN_TAG, ConfidenceResult

INVALID_UTF8 = "error: invalid utf8"
NO_LANGUAGES_ABOVE_THRESHOLD = "no_languages_above_threshold"
NO_LANGUAGES_DETECTED = "no_languages_detected"

Text = str | bytes | bytearray | memoryview


class InvalidEncoding(ValueError):
    pass


@lru_cache(maxsize=1)
def get_detector() -> LanguageDetector:
    """Process-wide detector built from the global settings, built on first use."""
    return LanguageDetector.from_settings(settings)


def decode_text(text: Text) -> str:
    """Return text as str, raising InvalidEncoding unless it is well-formed UTF-8."""
    if isinstance(text, str):
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            # Lone surrogates, e.g. from surrogateescape decoding
            raise InvalidEncoding(str(e)) from e
        return text
    try:
        return bytes(text).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncoding(str(e)) from e


def _join(results: ConfidenceResult) -> str:
    return ",".join(r.format() for r in results)


def detect(text: Text, detector: LanguageDetector | None = None) -> str:
    try:
        decoded = decode_text(text)
    except InvalidEncoding:
        return INVALID_UTF8
    language = (detector or get_detector()).detect_language_of(decoded)
    return language.tag if language else UNKNOWN_TAG


def detect_with_confidence(text: Text, detector: LanguageDetector | None = None) -> str:
    try:
        decoded = decode_text(text)
    except InvalidEncoding:
        return INVALID_UTF8
    result = (detector or get_detector()).detect_language_with_confidence(decoded)
    return result.format()


def detect_multiple(text: Text, threshold: float, detector: LanguageDetector | None = None) -> str:
    try:
        decoded = decode_text(text)
    except InvalidEncoding:
        return INVALID_UTF8
    results = (detector or get_detector()).detect_languages_above(decoded, threshold)
    return _join(results) if results else NO_LANGUAGES_ABOVE_THRESHOLD


def detect_top_n(text: Text, n: int, detector: LanguageDetector | None = None) -> str:
    try:
        decoded = decode_text(text)
    except InvalidEncoding:
        return INVALID_UTF8
    results = (detector or get_detector()).detect_top_languages(decoded, n)
    return _join(results) if results else NO_LANGUAGES_DETECTED


class ExportedStrings:
    """Owned string buffers handed to a foreign caller by handle."""

    def __init__(self):
        self._buffers: dict[int, bytes] = {}
        self._handles = itertools.count(1)
        self._lock = threading.Lock()

    def export(self, value: str) -> int:
        """Take ownership of a UTF-8 copy of ``value`` and return its handle."""
        data = value.encode("utf-8")
        with self._lock:
            handle = next(self._handles)
            self._buffers[handle] = data
        return handle

    def read(self, handle: int) -> bytes | None:
        with self._lock:
            return self._buffers.get(handle)

    def release(self, handle: object) -> bool:
        """Free a buffer. Returns False (and does nothing) when it was not live."""
        if isinstance(handle, bool) or not isinstance(handle, int):
            return False
        with self._lock:
            return self._buffers.pop(handle, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffers)


_exports = ExportedStrings()


def export_string(value: str) -> int:
    return _exports.export(value)


def read_string(handle: int) -> bytes | None:
    return _exports.read(handle)


def free_string(handle: object) -> None:
    _exports.release(handle)
