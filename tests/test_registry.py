"""Tests for source ordering and deduplication."""

import pytest

from profanity.core.domain import SourceFilter
from profanity.core.exceptions import ConfigurationError
from profanity.engine.registry import SourceRegistry


@pytest.fixture
def small_registry() -> SourceRegistry:
    return SourceRegistry([("First.txt", ["crap"]), ("Second.txt", ["shit"])])


def test_builtin_order_is_kept(small_registry):
    names = [name for name, _ in small_registry.get_sources()]
    assert names == ["First.txt", "Second.txt"]


def test_additional_sources_follow_builtins_in_caller_order(small_registry):
    sources = small_registry.get_sources(
        [SourceFilter("Zeta", ["z1"]), ("Alpha", ["a1"])]
    )
    assert [name for name, _ in sources] == [
        "First.txt",
        "Second.txt",
        "Zeta",
        "Alpha",
    ]


def test_duplicate_names_first_wins(small_registry):
    sources = dict(
        small_registry.get_sources(
            [("Custom", ["WebForms"]), ("Custom", ["Blazor"]), ("First.txt", ["x1"])]
        )
    )
    assert sources["Custom"] == ("WebForms",)
    assert sources["First.txt"] == ("crap",)
    assert len(sources) == 3


def test_duplicate_with_empty_words_raises(small_registry):
    with pytest.raises(ConfigurationError):
        small_registry.get_sources([("Custom", ["WebForms"]), ("Custom", [])])


def test_unsupported_source_raises(small_registry):
    with pytest.raises(ConfigurationError):
        small_registry.get_sources(["just a string"])


def test_empty_builtin_source_raises():
    with pytest.raises(ConfigurationError):
        SourceRegistry([("Empty.txt", [])])


def test_from_loader_uses_manifest_order(loader):
    registry = SourceRegistry.from_loader(loader)
    assert registry.builtin_names == loader.get_source_names()
