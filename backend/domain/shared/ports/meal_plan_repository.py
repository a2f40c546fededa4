"""Meal plan repository port (interface).

Defines contract for meal plan persistence operations consumed by the view
and statistics queries. Follows the Dependency Inversion Principle: domain
defines the port, infrastructure provides the implementation.
"""

from datetime import date
from typing import List, Optional, Protocol

from domain.meal_plan.core.entities.meal_plan import MealPlan
from domain.meal_plan.core.entities.meal_plan_recipe import MealPlanRecipe
from domain.meal_plan.core.value_objects.meal_type import MealType
from domain.meal_plan.core.value_objects.recipe_filter import RecipeFilter
from domain.meal_plan.core.views.statistics import MealPlanStatisticsRaw


class IMealPlanRepository(Protocol):
    """
    Interface for meal plan persistence operations.

    Implementations:
    - In-memory repository (for testing)
    - MongoDB repository (for production)

    Ordering contract: every method returning assignments orders them by
    (meal_date ascending, meal_type ascending in MealType declaration order).

    Example usage (application layer):
        >>> class GetMealPlanViewQueryHandler:
        ...     def __init__(self, repository: IMealPlanRepository):
        ...         self._repository = repository
        ...
        ...     async def handle(self, query):
        ...         if not await self._repository.exists(plan_id):
        ...             raise MealPlanNotFoundError(...)
    """

    async def save(self, meal_plan: MealPlan) -> None:
        """
        Save or update a meal plan (without its recipes).

        Args:
            meal_plan: MealPlan entity to save
        """
        ...

    async def add_recipe(self, recipe: MealPlanRecipe) -> None:
        """
        Assign a recipe to a meal plan.

        Args:
            recipe: Assignment to store; recipe.meal_plan_id must exist
        """
        ...

    async def exists(self, meal_plan_id: int) -> bool:
        """
        Check if a meal plan exists, regardless of owner.

        Args:
            meal_plan_id: Meal plan identifier

        Returns:
            True if a meal plan with that id exists
        """
        ...

    async def get_owner(self, meal_plan_id: int) -> Optional[str]:
        """
        Get the owner of a meal plan.

        Args:
            meal_plan_id: Meal plan identifier

        Returns:
            Owner user id, or None if the meal plan does not exist
        """
        ...

    async def get_by_id(self, meal_plan_id: int) -> Optional[MealPlan]:
        """
        Load a meal plan without its recipes.

        Returns:
            MealPlan with empty recipes, or None if not found
        """
        ...

    async def get_with_recipes(
        self,
        meal_plan_id: int,
        recipe_filter: Optional[RecipeFilter] = None,
    ) -> Optional[MealPlan]:
        """
        Load a meal plan with its recipes.

        Args:
            meal_plan_id: Meal plan identifier
            recipe_filter: Optional meal type and date range restriction.
                A single-day date range is matched by exact date.

        Returns:
            MealPlan with matching recipes (each carrying its RecipeSummary
            when known), or None if not found
        """
        ...

    async def get_recipes_for_range(
        self,
        meal_plan_id: int,
        start_date: date,
        end_date: date,
        meal_type: Optional[MealType] = None,
    ) -> List[MealPlanRecipe]:
        """
        Get assignments dated start_date..end_date (inclusive).

        Args:
            meal_plan_id: Meal plan identifier
            start_date: First date (inclusive)
            end_date: Last date (inclusive); equal to start_date means an
                exact-date match
            meal_type: Optional meal type restriction

        Returns:
            Ordered list of assignments (empty if none or plan missing)
        """
        ...

    async def get_statistics_raw(self, meal_plan_id: int) -> MealPlanStatisticsRaw:
        """
        Read the aggregates statistics are derived from.

        Returns:
            Total assignment count, per-meal-type counts and the ascending
            list of distinct assignment dates
        """
        ...
