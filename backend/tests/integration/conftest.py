"""Integration fixtures: the FastAPI app served over httpx ASGITransport.

Repositories are the in-memory singletons of the factory, seeded with the
sample plan from tests/conftest.py and reset after every test.
"""

from typing import AsyncIterator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app import app
from domain.meal_plan.core.entities.meal_plan_tag import MealPlanTag
from infrastructure.persistence.factory import (
    get_meal_plan_repository,
    get_meal_plan_tag_repository,
    reset_repositories,
)


@pytest_asyncio.fixture
async def seeded_repositories(monkeypatch, sample_meal_plan):
    """Factory singletons (in-memory) holding plan 123 and its two tags."""
    monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")
    reset_repositories()

    repository = get_meal_plan_repository()
    tag_repository = get_meal_plan_tag_repository()
    await repository.save(sample_meal_plan)
    await tag_repository.add_tag(sample_meal_plan.id, MealPlanTag(tag_id=2, name="weekly"))
    await tag_repository.add_tag(sample_meal_plan.id, MealPlanTag(tag_id=1, name="family"))

    yield repository, tag_repository

    reset_repositories()


@pytest_asyncio.fixture
async def client(seeded_repositories) -> AsyncIterator[AsyncClient]:
    """HTTP client bound to the app (no network, no lifespan)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
