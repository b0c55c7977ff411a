from __future__ import annotations

from collections.abc import Iterable

from ngram_langid.languages import Language


class ModelConstructionError(RuntimeError):
    """A configured language has no usable frequency model.

    Raised while building the engine, never from a detection call.
    """

    def __init__(self, missing: Iterable[Language], reason: str = "no reference corpus"):
        self.missing = tuple(sorted(set(missing), key=lambda lang: lang.rank))
        tags = ", ".join(lang.tag for lang in self.missing)
        super().__init__(f"Cannot build frequency models for {tags}: {reason}")
