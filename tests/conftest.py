"""Shared fixtures."""

from collections.abc import Callable

import pytest

from career_api.context import AppContext
from career_api.services.admission import AdmissionController
from tests.helpers import FakeCache, FakeOrigin, build_career_page


@pytest.fixture
def career_page() -> Callable[..., str]:
    return build_career_page


@pytest.fixture
def fake_cache() -> FakeCache:
    return FakeCache()


@pytest.fixture
def fake_origin() -> FakeOrigin:
    return FakeOrigin(text=build_career_page())


@pytest.fixture
def context(fake_cache: FakeCache, fake_origin: FakeOrigin) -> AppContext:
    return AppContext(
        origin=fake_origin,
        cache=fake_cache,
        admission=AdmissionController(20),
        cache_ttl=600,
    )
