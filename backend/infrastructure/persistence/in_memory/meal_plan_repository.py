"""In-memory meal plan repository implementation.

Provides an in-memory implementation of IMealPlanRepository port for testing.
Uses dictionaries for storage with no external dependencies.
"""

import dataclasses
from collections import Counter
from copy import deepcopy
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

from domain.meal_plan.core.entities.meal_plan import MealPlan
from domain.meal_plan.core.entities.meal_plan_recipe import MealPlanRecipe
from domain.meal_plan.core.exceptions.domain_errors import MealPlanNotFoundError
from domain.meal_plan.core.value_objects.date_range import DateRange
from domain.meal_plan.core.value_objects.meal_type import MealType
from domain.meal_plan.core.value_objects.recipe_filter import RecipeFilter
from domain.meal_plan.core.views.statistics import MealPlanStatisticsRaw, MealTypeCount


def matches_filter(recipe: MealPlanRecipe, recipe_filter: Optional[RecipeFilter]) -> bool:
    """Check an assignment against meal type and date range restrictions."""
    if recipe_filter is None:
        return True
    if recipe_filter.meal_type is not None and recipe.meal_type is not recipe_filter.meal_type:
        return False
    date_range = recipe_filter.date_range
    if date_range is None:
        return True
    if date_range.is_single_day:
        return recipe.meal_date == date_range.start
    return date_range.contains(recipe.meal_date)


class InMemoryMealPlanRepository:
    """
    In-memory implementation of IMealPlanRepository port.

    Meal plans and assignments are stored separately, like the two
    MongoDB collections, and joined on read.

    Thread safety: NOT thread-safe (use locks if needed in production)
    Persistence: Data lost on process restart (in-memory only)

    Example:
        >>> repository = InMemoryMealPlanRepository()
        >>> await repository.save(MealPlan(id=123, user_id="user-1", name="Week"))
        >>> await repository.add_recipe(MealPlanRecipe(meal_plan_id=123, ...))
        >>> plan = await repository.get_with_recipes(123)
    """

    def __init__(self) -> None:
        """Initialize repository with empty storage."""
        self._plans: Dict[int, MealPlan] = {}
        self._recipes: Dict[int, List[MealPlanRecipe]] = {}
        self._next_recipe_id = 1

    async def save(self, meal_plan: MealPlan) -> None:
        """
        Save or update a meal plan.

        When meal_plan carries recipes they replace the stored assignments;
        a plan saved with an empty recipes list keeps them.

        Note:
            - Stores a deep copy to prevent external modifications
            - Updates meal_plan.updated_at to current UTC time
        """
        meal_plan.updated_at = datetime.now(timezone.utc)

        self._plans[meal_plan.id] = deepcopy(dataclasses.replace(meal_plan, recipes=[]))
        self._recipes.setdefault(meal_plan.id, [])

        if meal_plan.recipes:
            self._recipes[meal_plan.id] = []
        for recipe in meal_plan.recipes:
            await self.add_recipe(recipe)

    async def add_recipe(self, recipe: MealPlanRecipe) -> None:
        """
        Store an assignment.

        Raises:
            MealPlanNotFoundError: If the referenced meal plan is unknown
        """
        if recipe.meal_plan_id not in self._plans:
            raise MealPlanNotFoundError(f"Meal plan with ID {recipe.meal_plan_id} not found")

        if recipe.meal_plan_recipe_id is None:
            recipe.meal_plan_recipe_id = self._next_recipe_id
        self._next_recipe_id = max(self._next_recipe_id, recipe.meal_plan_recipe_id) + 1

        self._recipes[recipe.meal_plan_id].append(deepcopy(recipe))

    async def exists(self, meal_plan_id: int) -> bool:
        return meal_plan_id in self._plans

    async def get_owner(self, meal_plan_id: int) -> Optional[str]:
        meal_plan = self._plans.get(meal_plan_id)
        return meal_plan.user_id if meal_plan else None

    async def get_by_id(self, meal_plan_id: int) -> Optional[MealPlan]:
        meal_plan = self._plans.get(meal_plan_id)
        return deepcopy(meal_plan) if meal_plan else None

    async def get_with_recipes(
        self,
        meal_plan_id: int,
        recipe_filter: Optional[RecipeFilter] = None,
    ) -> Optional[MealPlan]:
        """
        Load a meal plan with the assignments matching recipe_filter.

        Returns:
            Deep copy of the plan with ordered recipes, or None if not found
        """
        meal_plan = self._plans.get(meal_plan_id)
        if meal_plan is None:
            return None

        recipes = self._select(meal_plan_id, recipe_filter)
        return dataclasses.replace(deepcopy(meal_plan), recipes=recipes)

    async def get_recipes_for_range(
        self,
        meal_plan_id: int,
        start_date: date,
        end_date: date,
        meal_type: Optional[MealType] = None,
    ) -> List[MealPlanRecipe]:
        recipe_filter = RecipeFilter(
            meal_type=meal_type, date_range=DateRange(start=start_date, end=end_date)
        )
        return self._select(meal_plan_id, recipe_filter)

    async def get_statistics_raw(self, meal_plan_id: int) -> MealPlanStatisticsRaw:
        recipes = self._recipes.get(meal_plan_id, [])
        by_type = Counter(recipe.meal_type.value for recipe in recipes)
        return MealPlanStatisticsRaw(
            total_recipes=len(recipes),
            meal_type_counts=[
                MealTypeCount(meal_type=meal_type, count=count)
                for meal_type, count in by_type.items()
            ],
            unique_dates=sorted({recipe.meal_date for recipe in recipes}),
        )

    def _select(
        self, meal_plan_id: int, recipe_filter: Optional[RecipeFilter]
    ) -> List[MealPlanRecipe]:
        selected = [
            deepcopy(recipe)
            for recipe in self._recipes.get(meal_plan_id, [])
            if matches_filter(recipe, recipe_filter)
        ]
        selected.sort(key=lambda recipe: recipe.sort_key)
        return selected

    def clear(self) -> None:
        """Clear all storage (useful for testing)."""
        self._plans.clear()
        self._recipes.clear()
        self._next_recipe_id = 1

    def count(self) -> int:
        """Number of stored meal plans (useful for testing)."""
        return len(self._plans)
