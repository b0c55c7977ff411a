"""Reference corpora used to build the frequency models.

The bundled corpora.yaml maps a language tag to a list of paragraphs.
A different file with the same shape can be supplied through
``Settings.corpus_path``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml

from ngram_langid.languages import Language
from ngram_langid.utils.logging import get_logger

log = get_logger()

BUNDLED_CORPUS_PATH = Path(__file__).parent / "corpora.yaml"


@lru_cache(maxsize=8)
def _load(path: Path) -> dict:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of language tag to text")
    return data


def load_corpora(path: Path | None = None) -> dict[Language, str]:
    """Read corpora, keyed by language. Unknown tags are skipped with a warning."""
    path = Path(path) if path else BUNDLED_CORPUS_PATH
    corpora: dict[Language, str] = {}
    for key, value in _load(path.resolve()).items():
        try:
            language = Language.parse(str(key))
        except ValueError:
            log.warning(f"Ignoring corpus for unsupported language {key!r} in {path.name}")
            continue
        if isinstance(value, list):
            value = "\n".join(str(paragraph) for paragraph in value)
        corpora[language] = str(value or "")
    return corpora
