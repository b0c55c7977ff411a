import pytest

from ngram_langid.config import Settings
from ngram_langid.detector import LanguageDetector
from ngram_langid.languages import Language


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def tiny_corpora():
    return {
        Language.ENGLISH: "the cat sat on the mat and the dog ate the bread with the other cat",
        Language.GERMAN: "der hund und die katze sitzen auf der matte und essen das brot mit dem hund",
    }


@pytest.fixture
def tiny_detector(tiny_corpora, settings):
    return LanguageDetector.build(
        languages=[Language.ENGLISH, Language.GERMAN], corpora=tiny_corpora, settings=settings
    )


@pytest.fixture
def tied_detector(settings):
    """Two languages with identical models: every score ties."""
    text = "abra cadabra abracadabra"
    return LanguageDetector.build(
        languages=[Language.SPANISH, Language.ENGLISH],
        corpora={Language.ENGLISH: text, Language.SPANISH: text},
        settings=settings,
    )


@pytest.fixture(scope="session")
def detector():
    """Detector over all 15 languages, built from the bundled corpora."""
    return LanguageDetector.build(settings=Settings(_env_file=None))
