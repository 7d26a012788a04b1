"""Tests for the interactive session using in-memory streams."""

import io

import pytest

from classifier import AgeParseError, MissingAgeError
from config import Settings
from console import InteractiveSession, status


def run_session(stdin_text, **settings):
    stdout = io.StringIO()
    session = InteractiveSession(
        settings=Settings(**settings),
        stdin=io.StringIO(stdin_text),
        stdout=stdout,
    )
    report = session.run()
    return report, stdout.getvalue()


def test_adult_transcript():
    report, out = run_session("Ada\n30\n")
    assert out == (
        "Enter your name: Enter your age: "
        "\nHello, Ada!\n"
        "You are 30 years old.\n"
        "You are an adult.\n"
    )
    assert report.person.name == "Ada"


def test_empty_name_and_zero_age():
    _, out = run_session("\n0\n")
    assert "Hello, !\n" in out
    assert "You are 0 years old.\n" in out
    assert out.endswith("You are a minor.\n")


@pytest.mark.parametrize("age, line", [
    ("17", "You are a minor."),
    ("18", "You are an adult."),
    ("64", "You are an adult."),
    ("65", "You are a senior citizen."),
    ("-5", "You are a minor."),
])
def test_classification_line(age, line):
    _, out = run_session(f"Someone\n{age}\n")
    assert out.endswith(line + "\n")
    lines = out.splitlines()
    assert sum(l.startswith("You are a") for l in lines) == 1


def test_name_with_spaces_and_age_on_later_line():
    _, out = run_session("Grace Brewster Hopper\n\n  85\n")
    assert "Hello, Grace Brewster Hopper!\n" in out
    assert out.endswith("You are a senior citizen.\n")


def test_reprompt_then_valid():
    report, out = run_session("Bob\nabc 99\n42\n")
    assert out == (
        "Enter your name: Enter your age: "
        "'abc' is not a whole number. Please try again.\n"
        "Enter your age: "
        "\nHello, Bob!\n"
        "You are 42 years old.\n"
        "You are an adult.\n"
    )
    assert report.person.age == 42


def test_reprompt_gives_up_after_max_attempts():
    with pytest.raises(AgeParseError) as info:
        run_session("Bob\nx\ny\nz\n30\n", age_max_attempts=3)
    assert info.value.token == "z"


def test_error_policy_stops_on_first_bad_token():
    with pytest.raises(AgeParseError):
        run_session("Bob\nforty\n40\n", age_parse_policy="error")


def test_default_policy_uses_configured_age():
    report, out = run_session("Bob\nforty\n", age_parse_policy="default", age_default=70)
    assert report.person.age == 70
    assert "is not a whole number" not in out
    assert out.endswith("You are 70 years old.\nYou are a senior citizen.\n")


def test_missing_age_raises():
    with pytest.raises(MissingAgeError):
        run_session("")


def test_missing_age_with_default_policy():
    _, out = run_session("Eve\n", age_parse_policy="default")
    assert out.endswith("\nHello, Eve!\nYou are 0 years old.\nYou are a minor.\n")


def test_verbose_status_stays_off_stdout(capsys):
    _, out = run_session("Ada\n30\n", verbose=True)
    assert "✓" not in out
    assert "Classified as adult" in capsys.readouterr().err


def test_status_is_silent_unless_verbose(capsys):
    status("✓ quiet", Settings())
    status("✓ loud", Settings(verbose=True))
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "✓ loud\n"
