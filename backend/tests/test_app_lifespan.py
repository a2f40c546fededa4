"""Tests for FastAPI lifespan context manager - repository initialization."""

from unittest.mock import patch

import pytest

from app import app, lifespan
from infrastructure.persistence.factory import get_meal_plan_repository, reset_repositories
from infrastructure.persistence.in_memory.meal_plan_repository import InMemoryMealPlanRepository


@pytest.mark.asyncio
async def test_lifespan_creates_and_resets_repositories(monkeypatch):
    """
    GIVEN: REPOSITORY_BACKEND=inmemory
    WHEN: Lifespan context manager is entered and exited
    THEN: Repositories exist while serving and are reset on shutdown
    """
    monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")
    reset_repositories()

    with patch("app.reset_repositories", wraps=reset_repositories) as mock_reset:
        async with lifespan(app):
            repository = get_meal_plan_repository()
            assert isinstance(repository, InMemoryMealPlanRepository)
            mock_reset.assert_not_called()

        mock_reset.assert_called_once()

    assert get_meal_plan_repository() is not repository
    reset_repositories()
