import pytest

from greeter.cli import main
from greeter.core import Greeter, LanguageCode


def test_default_greets_world_in_english(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.strip() == Greeter("World").greet(LanguageCode.EN)


@pytest.mark.parametrize(
    ("code", "lang"),
    [
        ("en", LanguageCode.EN),
        ("de", LanguageCode.DE),
        ("es", LanguageCode.ES),
        ("fr", LanguageCode.FR),
    ],
)
def test_lang_option_selects_language(capsys, code, lang):
    assert main(["--name", "Tests", "--lang", code]) == 0
    assert capsys.readouterr().out.strip() == Greeter("Tests").greet(lang)


def test_short_options(capsys):
    assert main(["-n", "Tests", "-l", "de"]) == 0
    assert capsys.readouterr().out.strip() == "Hallo Tests!"


def test_unknown_language_fails(capsys):
    assert main(["--lang", "xx"]) == 1
    captured = capsys.readouterr()
    assert "unknown language code: xx" in captured.err
    assert captured.out == ""


def test_help_prints_description(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "A program to welcome the world!" in out
    assert "--lang" in out


def test_help_takes_precedence_over_bad_language(capsys):
    assert main(["-h", "-l", "xx"]) == 0
    assert "unknown language code" not in capsys.readouterr().err


def test_unknown_option_raises_system_exit():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2