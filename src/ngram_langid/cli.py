"""Click CLI entry point.

Usage:
    ngram-langid detect "Hallo, wie geht es dir heute?"
    ngram-langid confidence "Hola, ¿cómo estás hoy?"
    ngram-langid multiple "สวัสดีครับ, good morning!" --threshold 0.1
    ngram-langid top "Apa kabar? How are you doing today?" -n 3
    ngram-langid --languages INDONESIAN,MALAY detect "Selamat pagi"
    ngram-langid demo
"""

from __future__ import annotations

import click

from ngram_langid import boundary
from ngram_langid.config import Settings
from ngram_langid.detector import LanguageDetector
from ngram_langid.errors import ModelConstructionError
from ngram_langid.languages import Language
from ngram_langid.utils.logging import BOLD, DIM, GREEN, RESET, get_logger

log = get_logger()

_DEMO_TEXTS = [
    "Hello, how are you today?",
    "Hola, ¿cómo estás hoy?",
    "Bonjour, comment allez-vous aujourd'hui?",
    "Hallo, wie geht es dir heute?",
    "Ciao, come stai oggi?",
    "こんにちは、今日はお元気ですか？",
    "안녕하세요, 오늘 어떠세요?",
    "你好，今天怎么样？",
    "Selamat pagi! Bagaimana kabar Anda hari ini?",
    "Selamat pagi! Bagaimana keadaan anda hari ini?",
    "Chào bạn, hôm nay bạn thế nào?",
    "Kamusta ka? Sana ay maganda ang araw mo.",
]

_DEMO_MIXED_TEXTS = [
    "สวัสดีครับ, good morning! How are you today?",
    "Apa kabar? How are you doing today?",
    "Hola, 你好! ¿Cómo estás?",
    "Guten Tag, こんにちは! Wie geht es dir?",
]


def _parse_languages(ctx, param, value: str | None) -> list[Language] | None:
    if not value:
        return None
    try:
        return [Language.parse(part) for part in value.split(",") if part.strip()]
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.option(
    "--languages",
    callback=_parse_languages,
    help="Comma-separated candidate languages (tags or ISO codes). Default: all.",
)
@click.option("--log-level", default=None, help="Logging level (default from LANGID_LOG_LEVEL)")
@click.pass_context
def cli(ctx: click.Context, languages: list[Language] | None, log_level: str | None) -> None:
    """N-gram language identification."""
    settings = Settings()
    get_logger(level=log_level or settings.log_level)
    ctx.ensure_object(dict)
    try:
        ctx.obj["detector"] = LanguageDetector.build(languages=languages, settings=settings)
    except ModelConstructionError as e:
        raise click.ClickException(str(e)) from e
    log.debug(f"candidates: {', '.join(lang.tag for lang in ctx.obj['detector'].languages)}")


def _detector(ctx: click.Context) -> LanguageDetector:
    return ctx.obj["detector"]


@cli.command()
@click.argument("text")
@click.pass_context
def detect(ctx: click.Context, text: str) -> None:
    """Print the most likely language."""
    click.echo(boundary.detect(text, _detector(ctx)))


@cli.command()
@click.argument("text")
@click.pass_context
def confidence(ctx: click.Context, text: str) -> None:
    """Print the most likely language with its confidence."""
    click.echo(boundary.detect_with_confidence(text, _detector(ctx)))


@cli.command()
@click.argument("text")
@click.option("--threshold", default=0.1, type=click.FloatRange(0.0, 1.0), help="Minimum confidence")
@click.pass_context
def multiple(ctx: click.Context, text: str, threshold: float) -> None:
    """Print every language at or above the confidence threshold."""
    click.echo(boundary.detect_multiple(text, threshold, _detector(ctx)))


@cli.command()
@click.argument("text")
@click.option("-n", "--top-n", "top_n", default=3, help="Number of languages to print")
@click.pass_context
def top(ctx: click.Context, text: str, top_n: int) -> None:
    """Print the N most likely languages."""
    click.echo(boundary.detect_top_n(text, top_n, _detector(ctx)))


@cli.command()
@click.pass_context
def demo(ctx: click.Context) -> None:
    """Run detection over a fixed set of sample sentences."""
    detector = _detector(ctx)

    click.echo(f"\n{BOLD}Language Detection Results{RESET}\n")
    for text in _DEMO_TEXTS:
        click.echo(f"  {DIM}{text}{RESET}")
        click.echo(f"    {GREEN}{boundary.detect_with_confidence(text, detector)}{RESET}")

    click.echo(f"\n{BOLD}Mixed Text Results{RESET}\n")
    for text in _DEMO_MIXED_TEXTS:
        click.echo(f"  {DIM}{text}{RESET}")
        click.echo(f"    above 0.1: {boundary.detect_multiple(text, 0.1, detector)}")
        click.echo(f"    top 3:     {boundary.detect_top_n(text, 3, detector)}")
    click.echo()


if __name__ == "__main__":
    cli()
