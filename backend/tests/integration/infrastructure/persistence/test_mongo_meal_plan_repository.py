"""Integration tests for MongoMealPlanRepository.

Tests actual MongoDB operations against a test database.
Requires MONGODB_URI to be set in environment.
"""

import dataclasses
import os
from datetime import date

import pytest
import pytest_asyncio

from domain.meal_plan.core.entities.meal_plan_tag import MealPlanTag
from domain.meal_plan.core.value_objects.meal_type import MealType
from domain.meal_plan.core.value_objects.recipe_filter import RecipeFilter
from infrastructure.persistence.mongodb.meal_plan_repository import MongoMealPlanRepository
from infrastructure.persistence.mongodb.meal_plan_tag_repository import (
    MongoMealPlanTagRepository,
)

pytestmark = pytest.mark.skipif(
    os.getenv("REPOSITORY_BACKEND") != "mongodb",
    reason="MongoDB integration tests require REPOSITORY_BACKEND=mongodb",
)

TEST_PLAN_ID = 990123


@pytest_asyncio.fixture
async def mongo_repo():
    repo = MongoMealPlanRepository()
    yield repo
    # Cleanup: delete everything stored under the test plan id
    await repo._collection.delete_many({"_id": TEST_PLAN_ID})
    await repo.recipes_collection.delete_many({"meal_plan_id": TEST_PLAN_ID})
    await repo.close()


@pytest_asyncio.fixture
async def stored_plan(mongo_repo, sample_meal_plan):
    meal_plan = dataclasses.replace(sample_meal_plan, id=TEST_PLAN_ID, recipes=[])
    await mongo_repo.save(meal_plan)
    for recipe in sample_meal_plan.recipes:
        await mongo_repo.add_recipe(
            dataclasses.replace(recipe, meal_plan_id=TEST_PLAN_ID, meal_plan_recipe_id=None)
        )
    return meal_plan


@pytest.mark.asyncio
async def test_exists_and_owner(mongo_repo, stored_plan):
    assert await mongo_repo.exists(TEST_PLAN_ID)
    assert await mongo_repo.get_owner(TEST_PLAN_ID) == "user-1"
    assert not await mongo_repo.exists(TEST_PLAN_ID + 1)


@pytest.mark.asyncio
async def test_get_with_recipes_filtered(mongo_repo, stored_plan):
    meal_plan = await mongo_repo.get_with_recipes(
        TEST_PLAN_ID, RecipeFilter(meal_type=MealType.LUNCH)
    )

    assert meal_plan.name == "Weekly Family Meal Plan"
    assert [r.recipe.title for r in meal_plan.recipes] == ["Caesar salad"]


@pytest.mark.asyncio
async def test_recipes_for_single_day(mongo_repo, stored_plan):
    recipes = await mongo_repo.get_recipes_for_range(
        TEST_PLAN_ID, date(2024, 3, 15), date(2024, 3, 15)
    )

    assert [r.meal_type for r in recipes] == [MealType.BREAKFAST, MealType.LUNCH]


@pytest.mark.asyncio
async def test_statistics_raw(mongo_repo, stored_plan):
    raw = await mongo_repo.get_statistics_raw(TEST_PLAN_ID)

    assert raw.total_recipes == 3
    assert sorted(raw.unique_dates) == [date(2024, 3, 15), date(2024, 3, 18)]


@pytest.mark.asyncio
async def test_tags_sorted_by_name():
    repo = MongoMealPlanTagRepository()
    try:
        await repo.add_tag(TEST_PLAN_ID, MealPlanTag(tag_id=2, name="weekly"))
        await repo.add_tag(TEST_PLAN_ID, MealPlanTag(tag_id=1, name="family"))

        tags = await repo.find_by_meal_plan_id(TEST_PLAN_ID)

        assert [tag.name for tag in tags] == ["family", "weekly"]
    finally:
        await repo._collection.delete_many({"meal_plan_id": TEST_PLAN_ID})
        await repo.close()
