"""Unit tests for MealPlanAccessGuard."""

from unittest.mock import AsyncMock

import pytest

from application.meal_plan.services.access_guard import MealPlanAccessGuard
from domain.meal_plan.core.exceptions.domain_errors import (
    MealPlanAccessDeniedError,
    MealPlanNotFoundError,
)


@pytest.fixture
def mock_repository():
    repository = AsyncMock()
    repository.exists.return_value = True
    repository.get_owner.return_value = "user-1"
    return repository


@pytest.fixture
def guard(mock_repository):
    return MealPlanAccessGuard(mock_repository)


@pytest.mark.asyncio
async def test_owner_passes(guard, mock_repository):
    await guard.verify(123, "user-1")

    mock_repository.exists.assert_awaited_once_with(123)
    mock_repository.get_owner.assert_awaited_once_with(123)


@pytest.mark.asyncio
async def test_missing_plan_raises_not_found(guard, mock_repository):
    mock_repository.exists.return_value = False

    with pytest.raises(MealPlanNotFoundError, match="Meal plan with ID 123 not found"):
        await guard.verify(123, "user-1")

    mock_repository.get_owner.assert_not_awaited()


@pytest.mark.asyncio
async def test_other_owner_raises_access_denied(guard):
    with pytest.raises(
        MealPlanAccessDeniedError, match="Access denied to meal plan 123 for user user-2"
    ):
        await guard.verify(123, "user-2")


@pytest.mark.asyncio
async def test_denial_is_logged(guard, caplog):
    caplog.set_level("INFO", logger="application.meal_plan.services.access_guard")

    with pytest.raises(MealPlanAccessDeniedError):
        await guard.verify(123, "user-2")

    assert "Meal plan access denied" in caplog.text
