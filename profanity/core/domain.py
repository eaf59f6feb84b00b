# profanity/core/domain.py

"""Domain models for word sources, filter options and filter results."""

import re
from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Tuple

from profanity.core.definitions import FilterTarget, ReplacementStrategy
from profanity.core.exceptions import ConfigurationError, ValidationError


def normalize_words(words: Iterable[str]) -> Tuple[str, ...]:
    """Strips words, drops blanks and case-insensitive duplicates.

    The first spelling of a word wins and the supplied order is kept, since
    alternation order decides which alternative matches first.
    """
    if isinstance(words, str):
        raise ConfigurationError(
            "Profane words must be a collection of strings, not a single string"
        )

    seen = set()
    unique = []

    for word in words:
        if not isinstance(word, str):
            raise ConfigurationError(f"Profane word must be a string, got {type(word)}")

        clean_word = word.strip()
        key = clean_word.casefold()

        if not clean_word or key in seen:
            continue

        seen.add(key)
        unique.append(clean_word)

    return tuple(unique)


def build_pattern(words: Iterable[str]) -> re.Pattern:
    """Compiles a case-insensitive, whole-word alternation over ``words``."""
    # Lookarounds instead of \b so words starting or ending in a symbol still
    # only match when not embedded in a longer word.
    pattern_str = r"(?<!\w)(?:" + "|".join(re.escape(w) for w in words) + r")(?!\w)"
    return re.compile(pattern_str, re.IGNORECASE)


@dataclass(frozen=True)
class SourceFilter:
    """A named source of profane words and its compiled match pattern.

    Attributes:
        source_name: Identifier of the source (e.g., GoogleBannedWords.txt)
        words: Unique words in the order they were supplied
        pattern: Whole-word, case-insensitive alternation over ``words``

    Raises:
        ConfigurationError: If the name is blank or no words remain after
            dropping blanks and duplicates.
    """

    source_name: str
    words: Tuple[str, ...]
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.source_name, str) or not self.source_name.strip():
            raise ConfigurationError("Source name must be a non-empty string")

        unique_words = normalize_words(self.words)

        if not unique_words:
            raise ConfigurationError(
                f"Source '{self.source_name}' has no profane words"
            )

        object.__setattr__(self, "words", unique_words)
        object.__setattr__(self, "pattern", build_pattern(unique_words))

    @property
    def profane_words(self) -> FrozenSet[str]:
        return frozenset(self.words)


@dataclass(frozen=True)
class FilterOptions:
    """Per-call filtering options.

    ``additional_sources`` may hold SourceFilter instances, ``(name, words)``
    pairs, or be a mapping of name to words. Order is preserved.
    """

    replacement_strategy: ReplacementStrategy = ReplacementStrategy.ASTERISK
    target: FilterTarget = FilterTarget.BODY
    additional_sources: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        try:
            strategy = ReplacementStrategy(self.replacement_strategy)
            target = FilterTarget(self.target)
        except ValueError as e:
            raise ValidationError(f"Invalid filter options: {e}") from e

        sources = self.additional_sources or ()
        if isinstance(sources, Mapping):
            sources = tuple(sources.items())

        object.__setattr__(self, "replacement_strategy", strategy)
        object.__setattr__(self, "target", target)
        object.__setattr__(self, "additional_sources", tuple(sources))


@dataclass(frozen=True)
class Match:
    """A single matched word.

    Attributes:
        value: Matched text as it appeared in the scanned text
        start_index: Position in the text the owning step scanned
        length: Length of the matched text
    """

    value: str
    start_index: int
    length: int

    @property
    def end_index(self) -> int:
        return self.start_index + self.length


@dataclass(frozen=True)
class Step:
    """Outcome of running one source's pattern over the text."""

    profane_source_data: str
    is_filtered: bool
    matches: Tuple[Match, ...] = ()
    output_after_step: Optional[str] = None


@dataclass(frozen=True)
class FilterResult:
    """Result object returned by the filter pipeline.

    Attributes:
        original_input: Text as supplied by the caller
        final_output: Text after every source has been applied
        is_filtered: Whether any source matched anything
        matches: All matches across steps, or None when nothing matched
        steps: One step per consulted source, in processing order
        target: Which text field the caller filtered
    """

    original_input: Optional[str]
    final_output: Optional[str]
    is_filtered: bool = False
    matches: Optional[Tuple[Match, ...]] = None
    steps: Tuple[Step, ...] = ()
    target: FilterTarget = FilterTarget.BODY

    @property
    def filtered_steps(self) -> Tuple[Step, ...]:
        return tuple(step for step in self.steps if step.is_filtered)
