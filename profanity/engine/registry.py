# profanity/engine/registry.py

"""Ordered composition of built-in and caller-supplied word sources."""

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from profanity.core.domain import SourceFilter, normalize_words
from profanity.core.exceptions import ConfigurationError
from profanity.core.loader import LexiconLoader

logger = logging.getLogger(__name__)

SourceEntry = Tuple[str, Tuple[str, ...]]


def _to_entry(source: Any) -> SourceEntry:
    """Converts a SourceFilter or ``(name, words)`` pair to a validated entry.

    Raises:
        ConfigurationError: If the source is malformed or has no words.
    """
    if isinstance(source, SourceFilter):
        return source.source_name, source.words

    if isinstance(source, (tuple, list)) and len(source) == 2:
        name, words = source
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("Source name must be a non-empty string")

        unique_words = normalize_words(words)
        if not unique_words:
            raise ConfigurationError(f"Source '{name}' has no profane words")

        return name, unique_words

    raise ConfigurationError(f"Unsupported word source: {source!r}")


class SourceRegistry:
    """Supplies the ordered word sources to consult for a request.

    Built-in sources come first in their manifest order, followed by
    additional sources in the order the caller gave them. Sources are
    deduplicated by name; the first occurrence wins.
    """

    def __init__(self, builtin_sources: Iterable[SourceEntry]) -> None:
        self._builtin: Tuple[SourceEntry, ...] = tuple(
            _to_entry(source) for source in builtin_sources
        )

    @classmethod
    def from_loader(cls, loader: Optional[LexiconLoader] = None) -> "SourceRegistry":
        loader = loader or LexiconLoader.get_instance()
        return cls(loader.get_sources())

    @property
    def builtin_names(self) -> List[str]:
        return [name for name, _ in self._builtin]

    def get_sources(self, additional_sources: Sequence[Any] = ()) -> List[SourceEntry]:
        """Returns ``(source_name, words)`` pairs in processing order.

        Every additional source is validated, including ones dropped as
        duplicates.
        """
        ordered = {name: words for name, words in self._builtin}

        for source in additional_sources or ():
            name, words = _to_entry(source)

            if name in ordered:
                logger.debug(
                    "Dropping duplicate word source", extra={"source": name}
                )
                continue

            ordered[name] = words

        return list(ordered.items())
