"""Shared test fixtures.

Sample meal plan used across unit and integration tests:

    plan 123 "Weekly Family Meal Plan" (2024-03-11 .. 2024-03-17), owner user-1
    ├─ 2024-03-15 BREAKFAST -> Pancakes
    ├─ 2024-03-15 LUNCH     -> Caesar salad
    └─ 2024-03-18 DINNER    -> Lasagne

Integration fixtures (app, httpx client) live in tests/integration/conftest.py.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from pathlib import Path
from typing import List

import pytest
import pytest_asyncio
from dotenv import load_dotenv

from domain.meal_plan.core.entities.meal_plan import MealPlan
from domain.meal_plan.core.entities.meal_plan_recipe import MealPlanRecipe, RecipeSummary
from domain.meal_plan.core.entities.meal_plan_tag import MealPlanTag
from domain.meal_plan.core.value_objects.meal_type import MealType
from infrastructure.persistence.in_memory.meal_plan_repository import InMemoryMealPlanRepository
from infrastructure.persistence.in_memory.meal_plan_tag_repository import (
    InMemoryMealPlanTagRepository,
)

# Load .env.test for test runs (overrides .env values)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

OWNER_ID = "user-1"
OTHER_USER_ID = "user-2"
PLAN_ID = 123

CREATED_AT = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


def make_recipe(
    recipe_id: int,
    meal_date: date,
    meal_type: MealType,
    title: str,
    meal_plan_id: int = PLAN_ID,
) -> MealPlanRecipe:
    return MealPlanRecipe(
        meal_plan_id=meal_plan_id,
        recipe_id=recipe_id,
        meal_date=meal_date,
        meal_type=meal_type,
        servings=2,
        recipe=RecipeSummary(recipe_id=recipe_id, title=title, user_id=OWNER_ID),
        meal_plan_recipe_id=recipe_id,
        created_at=CREATED_AT,
    )


@pytest.fixture
def recipe_factory():
    """Build assignments for the sample plan: recipe_factory(id, date, type, title)."""
    return make_recipe


@pytest.fixture
def sample_recipes() -> List[MealPlanRecipe]:
    return [
        make_recipe(1, date(2024, 3, 15), MealType.BREAKFAST, "Pancakes"),
        make_recipe(2, date(2024, 3, 15), MealType.LUNCH, "Caesar salad"),
        make_recipe(3, date(2024, 3, 18), MealType.DINNER, "Lasagne"),
    ]


@pytest.fixture
def sample_meal_plan(sample_recipes) -> MealPlan:
    return MealPlan(
        id=PLAN_ID,
        user_id=OWNER_ID,
        name="Weekly Family Meal Plan",
        description="Dinners for the week",
        start_date=date(2024, 3, 11),
        end_date=date(2024, 3, 17),
        recipes=list(sample_recipes),
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )


@pytest_asyncio.fixture
async def meal_plan_repository(sample_meal_plan) -> InMemoryMealPlanRepository:
    """In-memory repository seeded with the sample plan."""
    repository = InMemoryMealPlanRepository()
    await repository.save(sample_meal_plan)
    return repository


@pytest_asyncio.fixture
async def tag_repository() -> InMemoryMealPlanTagRepository:
    """In-memory tag repository with two tags on the sample plan."""
    repository = InMemoryMealPlanTagRepository()
    await repository.add_tag(PLAN_ID, MealPlanTag(tag_id=2, name="weekly"))
    await repository.add_tag(PLAN_ID, MealPlanTag(tag_id=1, name="family"))
    return repository
