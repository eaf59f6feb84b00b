# profanity/core/definitions.py

"""Replacement strategy and filter target constants."""

from enum import Enum


class ReplacementStrategy(str, Enum):
    """Redaction rules that can be applied to a matched word."""

    ASTERISK = "Asterisk"
    BLEEP = "Bleep"
    EMOJI = "Emoji"
    MIDDLE_ASTERISK = "MiddleAsterisk"

    # Additional deterministic strategies
    VOWEL_ASTERISK = "VowelAsterisk"
    UNDERSCORES = "Underscores"
    REDACTED_RECTANGLE = "RedactedRectangle"


class FilterTarget(str, Enum):
    """Which text field of the caller's content is being filtered."""

    TITLE = "Title"
    BODY = "Body"
