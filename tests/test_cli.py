from click.testing import CliRunner

from ngram_langid.cli import cli


def _run(*args):
    result = CliRunner().invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result.output.strip()


def test_detect():
    assert _run("detect", "Hallo, wie geht es dir heute?") == "GERMAN"


def test_detect_unknown():
    assert _run("detect", "12345") == "unknown"


def test_confidence():
    assert _run("confidence", "안녕하세요, 오늘 어떠세요?") == "KOREAN:1.000"


def test_multiple_with_restricted_languages():
    output = _run("--languages", "ENGLISH,de", "multiple", "Guten Morgen", "--threshold", "0.0")
    assert sorted(entry.split(":")[0] for entry in output.split(",")) == ["ENGLISH", "GERMAN"]


def test_top():
    output = _run("top", "Chào bạn, hôm nay bạn thế nào?", "-n", "2")
    assert output.startswith("VIETNAMESE:")
    assert len(output.split(",")) == 2


def test_top_zero():
    assert _run("top", "Hello", "-n", "0") == "no_languages_detected"


def test_unknown_language_option():
    result = CliRunner().invoke(cli, ["--languages", "KLINGON", "detect", "hello"])
    assert result.exit_code != 0
    assert "Unknown language" in result.output


def test_threshold_out_of_range():
    result = CliRunner().invoke(cli, ["multiple", "hello", "--threshold", "1.5"])
    assert result.exit_code != 0


def test_demo():
    output = _run("demo")
    assert "KOREAN:1.000" in output
    assert "Mixed Text Results" in output
