"""Unit tests for GetMealPlanStatisticsQuery and handler."""

from datetime import date

import pytest

from application.meal_plan.queries.get_meal_plan_statistics import (
    GetMealPlanStatisticsQuery,
    GetMealPlanStatisticsQueryHandler,
)
from domain.meal_plan.core.entities.meal_plan import MealPlan
from domain.meal_plan.core.exceptions.domain_errors import (
    MealPlanAccessDeniedError,
    MealPlanNotFoundError,
)
from domain.meal_plan.core.value_objects.meal_type import MealType
from domain.meal_plan.services.statistics_aggregator import StatisticsAggregator

TODAY = date(2024, 4, 1)


@pytest.fixture
def handler(meal_plan_repository):
    return GetMealPlanStatisticsQueryHandler(
        repository=meal_plan_repository,
        aggregator=StatisticsAggregator(today=lambda: TODAY),
    )


@pytest.mark.asyncio
async def test_statistics_for_sample_plan(handler):
    statistics = await handler.handle(
        GetMealPlanStatisticsQuery(meal_plan_id="123", user_id="user-1")
    )

    assert statistics.total_recipes == 3
    assert statistics.days_with_meals == 2
    assert statistics.average_recipes_per_day == 1.5
    assert statistics.start_date == date(2024, 3, 15)
    assert statistics.end_date == date(2024, 3, 18)
    assert statistics.duration == 4
    assert statistics.meal_type_breakdown.dinner == 1


@pytest.mark.asyncio
async def test_statistics_for_empty_plan(handler, meal_plan_repository):
    await meal_plan_repository.save(MealPlan(id=7, user_id="user-1", name="Empty"))

    statistics = await handler.handle(GetMealPlanStatisticsQuery(meal_plan_id="7", user_id="user-1"))

    assert statistics.total_recipes == 0
    assert statistics.duration == 1
    assert statistics.start_date == TODAY
    assert statistics.most_frequent_meal_type is None


@pytest.mark.asyncio
async def test_most_frequent_meal_type(handler, meal_plan_repository, recipe_factory):
    await meal_plan_repository.add_recipe(
        recipe_factory(4, date(2024, 3, 16), MealType.DINNER, "Curry")
    )

    statistics = await handler.handle(
        GetMealPlanStatisticsQuery(meal_plan_id="123", user_id="user-1")
    )

    assert statistics.most_frequent_meal_type is MealType.DINNER
    assert statistics.days_with_meals == 3


@pytest.mark.asyncio
async def test_access_checks(handler):
    with pytest.raises(MealPlanAccessDeniedError):
        await handler.handle(GetMealPlanStatisticsQuery(meal_plan_id="123", user_id="user-2"))

    with pytest.raises(MealPlanNotFoundError):
        await handler.handle(GetMealPlanStatisticsQuery(meal_plan_id="404", user_id="user-1"))
