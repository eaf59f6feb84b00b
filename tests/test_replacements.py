"""Tests for replacement strategies."""

import pytest

from profanity.core.definitions import ReplacementStrategy
from profanity.core.exceptions import ValidationError
from profanity.logic.replacements import (
    BLEEP,
    EMOJI_PLACEHOLDER,
    get_replacer,
    redact,
)


@pytest.mark.parametrize(
    "strategy, matched, expected",
    [
        (ReplacementStrategy.ASTERISK, "crap", "****"),
        (ReplacementStrategy.ASTERISK, "CrAp", "****"),
        (ReplacementStrategy.BLEEP, "WebForms", BLEEP),
        (ReplacementStrategy.EMOJI, "shit", EMOJI_PLACEHOLDER),
        (ReplacementStrategy.MIDDLE_ASTERISK, "fucking", "f*****g"),
        (ReplacementStrategy.MIDDLE_ASTERISK, "Manky", "M***y"),
        (ReplacementStrategy.MIDDLE_ASTERISK, "abc", "a*c"),
        (ReplacementStrategy.MIDDLE_ASTERISK, "ab", "**"),
        (ReplacementStrategy.MIDDLE_ASTERISK, "a", "*"),
        (ReplacementStrategy.VOWEL_ASTERISK, "crAp", "cr*p"),
        (ReplacementStrategy.VOWEL_ASTERISK, "fck", "f*k"),
        (ReplacementStrategy.VOWEL_ASTERISK, "sh1t", "s**t"),
        (ReplacementStrategy.UNDERSCORES, "crap", "____"),
        (ReplacementStrategy.REDACTED_RECTANGLE, "crap", "████"),
    ],
)
def test_redact(strategy, matched, expected):
    assert redact(matched, strategy) == expected


def test_get_replacer_accepts_values_and_reuses_instances():
    assert get_replacer("Bleep") is get_replacer(ReplacementStrategy.BLEEP)


def test_get_replacer_unknown_strategy():
    with pytest.raises(ValidationError):
        get_replacer("Shout")


def test_strike_through_is_not_a_strategy():
    with pytest.raises(ValidationError):
        get_replacer("StrikeThrough")


@pytest.mark.parametrize("strategy", list(ReplacementStrategy))
@pytest.mark.parametrize("matched", ["crap", "CrAp", "fck", "wtf", "ab", "foda-se"])
def test_replacement_never_keeps_the_word(strategy, matched):
    assert redact(matched, strategy).casefold() != matched.casefold()
