"""FastAPI application - HTTP handler over the detection facade.

Endpoints:
    GET  /health             - Health check (candidate count)
    GET  /languages          - Configured candidate languages
    POST /detect             - Best guess
    POST /detect/confidence  - Best guess with confidence
    POST /detect/multiple    - Every language above a threshold
    POST /detect/top         - Top N languages
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from pydantic import BaseModel, Field

from ngram_langid.config import settings
from ngram_langid.detector import LanguageDetector
from ngram_langid.models import LanguageConfidence
from ngram_langid.utils.logging import get_logger

log = get_logger(level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the frequency models once, before serving any request."""
    app.state.detector = LanguageDetector.from_settings(settings)
    log.info(f"API ready, {len(app.state.detector.languages)} candidate languages")
    yield


app = FastAPI(
    title="ngram-langid",
    description="N-gram language identification",
    version="0.1.0",
    lifespan=lifespan,
)


class TextRequest(BaseModel):
    text: str


class ThresholdRequest(TextRequest):
    threshold: float = Field(0.1, ge=0.0, le=1.0)


class TopRequest(TextRequest):
    n: int = Field(3, description="Number of languages; <= 0 returns none")


class LanguageEntry(BaseModel):
    language: str
    confidence: float


def _entry(result: LanguageConfidence) -> LanguageEntry:
    return LanguageEntry(language=result.tag, confidence=round(result.confidence, 3))


def _detector(request: Request) -> LanguageDetector:
    return request.app.state.detector


@app.get("/health")
async def health(request: Request):
    return {"status": "ok", "languages": len(_detector(request).languages)}


@app.get("/languages")
async def languages(request: Request):
    return {
        "languages": [
            {"tag": lang.tag, "iso_code": lang.iso_code} for lang in _detector(request).languages
        ]
    }


@app.post("/detect")
def detect(body: TextRequest, request: Request):
    """Best guess; "unknown" when undetectable."""
    language = _detector(request).detect_language_of(body.text)
    return {"language": language.tag if language else "unknown"}


@app.post("/detect/confidence")
def detect_confidence(body: TextRequest, request: Request) -> LanguageEntry:
    return _entry(_detector(request).detect_language_with_confidence(body.text))


@app.post("/detect/multiple")
def detect_multiple(body: ThresholdRequest, request: Request):
    results = _detector(request).detect_languages_above(body.text, body.threshold)
    return {"results": [_entry(r) for r in results]}


@app.post("/detect/top")
def detect_top(body: TopRequest, request: Request):
    results = _detector(request).detect_top_languages(body.text, body.n)
    return {"results": [_entry(r) for r in results]}
