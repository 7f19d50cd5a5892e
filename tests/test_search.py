"""Tests for command suggestions"""

import pytest

import search

COMMANDS = ["add", "play", "choose", "quit"]


@pytest.mark.parametrize(
    "typed, expected",
    [
        ("ad", "add"),
        ("chose", "choose"),
        ("CHOOSE!", "choose"),
        ("plya", "play"),
        ("quiet", "quit"),
    ],
)
def test_close_typos_get_suggestion(typed, expected):
    assert search.suggest_command(typed, COMMANDS) == expected


@pytest.mark.parametrize("typed", ["xyz", "dance", "", "   "])
def test_far_input_gets_nothing(typed):
    assert search.suggest_command(typed, COMMANDS) is None


def test_exact_command_is_not_a_typo():
    assert search.suggest_command("play", COMMANDS) is None


def test_max_distance_is_respected():
    assert search.suggest_command("chse", COMMANDS, max_distance=1) is None
    assert search.suggest_command("chse", COMMANDS, max_distance=2) == "choose"


def test_tie_goes_to_first_listed():
    assert search.suggest_command("ab", ["ac", "ad"]) == "ac"
