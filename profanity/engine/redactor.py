# profanity/engine/redactor.py

"""Presidio-based application of redactions to scanned text."""

import logging
from typing import Sequence

from presidio_anonymizer import AnonymizerEngine
from presidio_anonymizer.entities import OperatorConfig, RecognizerResult

from profanity.core.definitions import ReplacementStrategy
from profanity.core.domain import Match
from profanity.core.exceptions import PipelineError
from profanity.logic.replacements import get_replacer

logger = logging.getLogger(__name__)

ENTITY_PREFIX = "PROFANITY"


class MatchRedactor:
    """Rewrites matched spans using Presidio's anonymizer.

    Each match gets its own entity type so the anonymizer never merges
    matches separated only by whitespace into one span.
    """

    def __init__(self) -> None:
        self._anonymizer = AnonymizerEngine()

    def redact(
        self, text: str, matches: Sequence[Match], strategy: ReplacementStrategy
    ) -> str:
        """Returns ``text`` with every match replaced using ``strategy``.

        Args:
            text: Text the matches were found in
            matches: Non-overlapping matches within ``text``
            strategy: Replacement strategy for each matched span

        Returns:
            Redacted text

        Raises:
            ValidationError: If the strategy is unknown
            PipelineError: If the anonymizer rejects the matches
        """
        if not matches:
            return text

        replacer = get_replacer(strategy)

        analyzer_results = [
            RecognizerResult(
                entity_type=f"{ENTITY_PREFIX}_{index}",
                start=match.start_index,
                end=match.end_index,
                score=1.0,
            )
            for index, match in enumerate(matches)
        ]

        operators = {
            "DEFAULT": OperatorConfig(
                "custom", {"lambda": lambda matched: replacer.replace(matched)}
            )
        }

        try:
            anonymized = self._anonymizer.anonymize(
                text=text,
                analyzer_results=analyzer_results,
                operators=operators,
            )
        except Exception as e:
            logger.error(
                "Anonymizer failed to apply redactions",
                exc_info=True,
                extra={"match_count": len(matches), "replacer": type(replacer).__name__},
            )
            raise PipelineError(f"Failed to apply redactions: {e}") from e

        return anonymized.text
