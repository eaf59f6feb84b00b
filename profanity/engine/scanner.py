# profanity/engine/scanner.py

"""Whole-word match scanning over compiled source patterns."""

import re
from typing import List, Optional, Tuple

from profanity.core.domain import Match


def scan_matches(pattern: re.Pattern, text: Optional[str]) -> List[Match]:
    """Finds all non-overlapping matches of ``pattern`` in ``text``.

    Matches are returned left to right. Alternatives are tried in the order
    the source listed them, so the first alternative that satisfies the word
    boundaries at a position wins.

    Args:
        pattern: Compiled pattern from a SourceFilter
        text: Text to scan; None or empty yields no matches

    Returns:
        List of matches ordered by start index
    """
    if not text:
        return []

    return [
        Match(value=m.group(0), start_index=m.start(), length=m.end() - m.start())
        for m in pattern.finditer(text)
        if m.end() > m.start()
    ]


def exclude_claimed(
    matches: List[Match], claimed: List[Tuple[int, int]]
) -> List[Match]:
    """Drops matches overlapping a span an earlier source already redacted.

    Args:
        matches: Matches found in the current text
        claimed: Sorted ``(start, end)`` spans of redactions in the current text

    Returns:
        Matches that touch no claimed span
    """
    kept = []

    for match in matches:
        is_overlapping = False

        # Match overlaps zone if match.start < zone.end and match.end > zone.start
        for zone_start, zone_end in claimed:
            if zone_start >= match.end_index:
                break

            if match.start_index < zone_end and match.end_index > zone_start:
                is_overlapping = True
                break

        if not is_overlapping:
            kept.append(match)

    return kept


def claim_spans(
    claimed: List[Tuple[int, int]],
    matches: List[Match],
    replacement_lengths: List[int],
) -> List[Tuple[int, int]]:
    """Returns all redacted spans in the coordinates of the rewritten text.

    Each match is replaced by a string of the given length, which moves every
    span that follows it. ``claimed`` and ``matches`` must not overlap.
    """
    edits = [
        (match.start_index, match.end_index, new_length - match.length)
        for match, new_length in zip(matches, replacement_lengths)
    ]

    def shift(position: int) -> int:
        return sum(delta for _, end, delta in edits if end <= position)

    spans = [(start + shift(start), end + shift(start)) for start, end in claimed]
    spans.extend(
        (start + shift(start), start + shift(start) + new_length)
        for (start, _, _), new_length in zip(edits, replacement_lengths)
    )

    return sorted(spans)
