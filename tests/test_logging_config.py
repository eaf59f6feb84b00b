"""Tests for structured logging."""

import json
import logging
import sys

from profanity.logging_config import StructuredFormatter, configure_logging


def test_formatter_emits_json_with_extra_fields():
    logger = logging.getLogger("profanity.test")
    record = logger.makeRecord(
        "profanity.test",
        logging.INFO,
        __file__,
        10,
        "Filtered %d words",
        (2,),
        None,
        extra={"source": "GoogleBannedWords.txt", "match_count": 2},
    )

    data = json.loads(StructuredFormatter().format(record))

    assert data["message"] == "Filtered 2 words"
    assert data["level"] == "INFO"
    assert data["source"] == "GoogleBannedWords.txt"
    assert data["match_count"] == 2
    assert "args" not in data


def test_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.getLogger("profanity.test").makeRecord(
            "profanity.test", logging.ERROR, __file__, 1, "failed", (), None
        )
        record.exc_info = sys.exc_info()

    data = json.loads(StructuredFormatter().format(record))
    assert "ValueError: boom" in data["exception"]


def test_configure_logging_installs_structured_handler():
    root = logging.getLogger()
    previous_handlers = list(root.handlers)
    previous_level = root.level

    try:
        configure_logging("warning")

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
