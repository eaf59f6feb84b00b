# profanity/service/pipeline.py

"""Main profanity filter service pipeline."""

import logging
import threading
from typing import List, Optional, Tuple

from profanity.service.config import settings
from profanity.core.domain import FilterOptions, FilterResult, Match, Step
from profanity.core.exceptions import (
    ConfigurationError,
    PipelineError,
    ValidationError,
)
from profanity.core.loader import LexiconLoader
from profanity.engine.cache import PatternCache
from profanity.engine.redactor import MatchRedactor
from profanity.engine.registry import SourceRegistry
from profanity.engine.scanner import claim_spans, exclude_claimed, scan_matches
from profanity.logic.replacements import get_replacer

logger = logging.getLogger(__name__)


def default_options() -> FilterOptions:
    """Returns options built from the configured defaults."""
    return FilterOptions(
        replacement_strategy=settings.default_strategy,
        target=settings.default_target,
    )


class ProfanityFilterService:
    """Runs text through every word source in order, redacting matches.

    Each source scans the text as already redacted by the sources before
    it, so when vocabularies overlap the earliest source claims the word.
    Spans already redacted are tracked and never matched again, whatever
    the replacement leaves behind.
    """

    _instance: Optional["ProfanityFilterService"] = None
    _lock = threading.Lock()

    def __init__(
        self,
        registry: SourceRegistry,
        cache: PatternCache,
        redactor: Optional[MatchRedactor] = None,
    ) -> None:
        self.registry = registry
        self.cache = cache
        self.redactor = redactor or MatchRedactor()

    @classmethod
    def get_instance(cls) -> "ProfanityFilterService":
        """Returns singleton service built from the global settings.

        Raises:
            ConfigurationError: If the built-in lexicons cannot be loaded
        """
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    logger.info("Initializing profanity filter service")
                    loader = LexiconLoader.get_instance(settings.lexicon_manifest)
                    cls._instance = cls(
                        registry=SourceRegistry.from_loader(loader),
                        cache=PatternCache(
                            ttl_seconds=settings.pattern_cache_ttl_seconds,
                            max_entries=settings.pattern_cache_max_entries,
                        ),
                    )
                    logger.info(
                        "Profanity filter service initialized successfully",
                        extra={"source_count": len(loader.get_source_names())},
                    )

        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None

    def filter_profanity(
        self, text: Optional[str], options: Optional[FilterOptions] = None
    ) -> FilterResult:
        """Filters ``text`` against every configured word source.

        Args:
            text: Input text; None or empty returns an unfiltered result
            options: Strategy, target and additional sources. Defaults to
                the configured strategy and target.

        Returns:
            FilterResult with the final output and one step per source

        Raises:
            ConfigurationError: If a word source is invalid
            ValidationError: If the text or options have the wrong type
            PipelineError: If an unexpected error occurs while filtering
        """
        options = options if options is not None else default_options()

        if not isinstance(options, FilterOptions):
            raise ValidationError(f"Invalid options type received: {type(options)}")

        if text is not None and not isinstance(text, str):
            logger.error(f"Invalid input type received: {type(text)}")
            raise ValidationError(f"Text must be a string, got {type(text)}")

        if not text:
            return FilterResult(
                original_input=text,
                final_output=text,
                target=options.target,
            )

        try:
            current_text = text
            steps: List[Step] = []
            all_matches: List[Match] = []
            claimed: List[Tuple[int, int]] = []
            replacer = get_replacer(options.replacement_strategy)

            for source_name, words in self.registry.get_sources(
                options.additional_sources
            ):
                source_filter = self.cache.get_or_build(source_name, words)
                matches = exclude_claimed(
                    scan_matches(source_filter.pattern, current_text), claimed
                )

                if matches:
                    claimed = claim_spans(
                        claimed, matches, [len(replacer(m.value)) for m in matches]
                    )
                    current_text = self.redactor.redact(
                        current_text, matches, options.replacement_strategy
                    )
                    all_matches.extend(matches)

                steps.append(
                    Step(
                        profane_source_data=source_name,
                        is_filtered=bool(matches),
                        matches=tuple(matches),
                        output_after_step=current_text,
                    )
                )

                logger.debug(
                    "Source step completed",
                    extra={"source": source_name, "match_count": len(matches)},
                )

            logger.info(
                "Profanity filtering completed",
                extra={
                    "text_length": len(text),
                    "source_count": len(steps),
                    "match_count": len(all_matches),
                    "strategy": options.replacement_strategy.value,
                    "target": options.target.value,
                },
            )

            return FilterResult(
                original_input=text,
                final_output=current_text,
                is_filtered=bool(all_matches),
                matches=tuple(all_matches) if all_matches else None,
                steps=tuple(steps),
                target=options.target,
            )

        except (ConfigurationError, ValidationError, PipelineError):
            raise
        except Exception as e:
            logger.error(
                "Unexpected critical error in profanity pipeline",
                exc_info=True,
                extra={"text_length": len(text)},
            )
            raise PipelineError(f"Failed to filter text: {e}") from e

    async def filter_profanity_async(
        self, text: Optional[str], options: Optional[FilterOptions] = None
    ) -> FilterResult:
        """Awaitable form of filter_profanity; the work itself never suspends."""
        return self.filter_profanity(text, options)


def filter_profanity(
    text: Optional[str], options: Optional[FilterOptions] = None
) -> FilterResult:
    """Main entry point for profanity filtering.

    Args:
        text: Input text to filter
        options: Filter options, or None for the configured defaults

    Returns:
        FilterResult with redacted text and per-source steps
    """
    return ProfanityFilterService.get_instance().filter_profanity(text, options)


async def filter_profanity_async(
    text: Optional[str], options: Optional[FilterOptions] = None
) -> FilterResult:
    """Awaitable entry point for callers running on an event loop."""
    return await ProfanityFilterService.get_instance().filter_profanity_async(
        text, options
    )
