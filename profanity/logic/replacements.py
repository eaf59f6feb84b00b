# profanity/logic/replacements.py

"""Replacement strategies that turn a matched word into its redaction."""

import logging
import re
from abc import ABC, abstractmethod
from typing import Dict, Type

from profanity.core.definitions import ReplacementStrategy
from profanity.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

EMOJI_PLACEHOLDER = "🤬"
BLEEP = "bleep"


class Replacer(ABC):
    """Base class for redaction strategies.

    Replacement depends only on the matched text, never on the text
    surrounding it.
    """

    @abstractmethod
    def replace(self, matched: str) -> str:
        """Returns the redacted form of ``matched``.

        Args:
            matched: Text matched by a source pattern

        Returns:
            Replacement string
        """
        pass

    def __call__(self, matched: str) -> str:
        return self.replace(matched)


class AsteriskReplacer(Replacer):
    """Replaces every character with an asterisk."""

    def replace(self, matched: str) -> str:
        return "*" * len(matched)


class BleepReplacer(Replacer):
    def replace(self, matched: str) -> str:
        return BLEEP


class EmojiReplacer(Replacer):
    def replace(self, matched: str) -> str:
        return EMOJI_PLACEHOLDER


class MiddleAsteriskReplacer(Replacer):
    """Keeps the first and last character and masks the rest.

    Words of two characters or fewer have no inner characters to hide and
    are masked completely.
    """

    def replace(self, matched: str) -> str:
        if len(matched) <= 2:
            return "*" * len(matched)

        return matched[0] + "*" * (len(matched) - 2) + matched[-1]


class VowelAsteriskReplacer(Replacer):
    """Masks vowels only, e.g. 'crap' -> 'cr*p'.

    Words without vowels would come out unchanged and match again, so they
    are masked like MiddleAsterisk instead.
    """

    VOWELS = re.compile(r"[aeiou]", re.IGNORECASE)

    def replace(self, matched: str) -> str:
        masked = self.VOWELS.sub("*", matched)

        if masked == matched:
            return MiddleAsteriskReplacer().replace(matched)

        return masked


class UnderscoresReplacer(Replacer):
    def replace(self, matched: str) -> str:
        return "_" * len(matched)


class RedactedRectangleReplacer(Replacer):
    def replace(self, matched: str) -> str:
        return "█" * len(matched)


_REPLACERS: Dict[ReplacementStrategy, Type[Replacer]] = {
    ReplacementStrategy.ASTERISK: AsteriskReplacer,
    ReplacementStrategy.BLEEP: BleepReplacer,
    ReplacementStrategy.EMOJI: EmojiReplacer,
    ReplacementStrategy.MIDDLE_ASTERISK: MiddleAsteriskReplacer,
    ReplacementStrategy.VOWEL_ASTERISK: VowelAsteriskReplacer,
    ReplacementStrategy.UNDERSCORES: UnderscoresReplacer,
    ReplacementStrategy.REDACTED_RECTANGLE: RedactedRectangleReplacer,
}

_replacer_cache: Dict[ReplacementStrategy, Replacer] = {}


def get_replacer(strategy: ReplacementStrategy) -> Replacer:
    """Factory method to retrieve the replacer for a strategy.

    Replacers are stateless, so one instance per strategy is reused.

    Args:
        strategy: Replacement strategy (enum member or its value)

    Returns:
        Replacer instance

    Raises:
        ValidationError: If the strategy is unknown
    """
    try:
        strategy = ReplacementStrategy(strategy)
    except ValueError as e:
        logger.warning(f"No replacer found for strategy: {strategy}")
        raise ValidationError(f"Unknown replacement strategy: {strategy}") from e

    if strategy not in _replacer_cache:
        _replacer_cache[strategy] = _REPLACERS[strategy]()

    return _replacer_cache[strategy]


def redact(matched: str, strategy: ReplacementStrategy) -> str:
    """Returns ``matched`` redacted with ``strategy``."""
    return get_replacer(strategy).replace(matched)
