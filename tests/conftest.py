"""Shared fixtures for the profanity filter tests.

Each test gets its own pattern cache so cached filters never leak
between tests.
"""

import pytest

from profanity.core.loader import LexiconLoader
from profanity.engine.cache import PatternCache
from profanity.engine.registry import SourceRegistry
from profanity.service.pipeline import ProfanityFilterService


@pytest.fixture
def loader() -> LexiconLoader:
    return LexiconLoader.get_instance()


@pytest.fixture
def registry(loader) -> SourceRegistry:
    return SourceRegistry.from_loader(loader)


@pytest.fixture
def cache() -> PatternCache:
    return PatternCache()


@pytest.fixture
def service(registry, cache) -> ProfanityFilterService:
    return ProfanityFilterService(registry=registry, cache=cache)


@pytest.fixture
def builtin_count(loader) -> int:
    return len(loader.get_source_names())
