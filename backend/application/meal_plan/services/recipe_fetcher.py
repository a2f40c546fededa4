"""Recipe filter & fetch - loads a meal plan with the assignments a view needs."""

import dataclasses
from datetime import timedelta
from typing import Optional

from domain.meal_plan.core.entities.meal_plan import MealPlan
from domain.meal_plan.core.exceptions.domain_errors import MealPlanNotFoundError
from domain.meal_plan.core.value_objects.date_range import DateRange
from domain.meal_plan.core.value_objects.recipe_filter import RecipeFilter
from domain.meal_plan.core.value_objects.view_params import MealPlanViewParams, ViewMode
from domain.meal_plan.services.calendar_utils import month_bounds
from domain.shared.ports.meal_plan_repository import IMealPlanRepository


def build_recipe_filter(
    params: MealPlanViewParams, date_range: Optional[DateRange]
) -> RecipeFilter:
    """Combine the requested meal type with the resolved date range."""
    return RecipeFilter(meal_type=params.meal_type, date_range=date_range)


def view_window(params: MealPlanViewParams) -> Optional[DateRange]:
    """Closed date window covered by a calendar view.

    day: the filter date; week: filter start through filter end, or start
    + 6 days when no end is given; month: the month bounds. Full view has
    no window and returns None, as does a calendar view without its date
    filter.
    """
    if params.view_mode is ViewMode.DAY and params.filter_date is not None:
        return DateRange(params.filter_date, params.filter_date)

    if params.view_mode is ViewMode.WEEK and params.filter_start_date is not None:
        end = params.filter_end_date
        if end is None:
            end = params.filter_start_date + timedelta(days=6)
        return DateRange(params.filter_start_date, end)

    if (
        params.view_mode is ViewMode.MONTH
        and params.filter_year is not None
        and params.filter_month is not None
    ):
        return DateRange(*month_bounds(params.filter_year, params.filter_month))

    return None


class MealPlanRecipeFetcher:
    """Loads a meal plan and the assignments its view will project.

    - include_recipes=False: plain load, no assignments
    - full view: plan with recipes matching meal type and date range
    - calendar views: plain load plus the assignments of the view window
    """

    def __init__(self, repository: IMealPlanRepository):
        self._repository = repository

    async def fetch(
        self,
        meal_plan_id: int,
        params: MealPlanViewParams,
        date_range: Optional[DateRange],
    ) -> MealPlan:
        """
        Load the meal plan for a view.

        Args:
            meal_plan_id: Meal plan identifier (access already verified)
            params: View query parameters
            date_range: Range from resolve_date_range()

        Returns:
            MealPlan with recipes ordered by (meal_date, meal_type)

        Raises:
            MealPlanNotFoundError: If the plan disappeared after the access check
        """
        if not params.include_recipes:
            meal_plan = await self._repository.get_by_id(meal_plan_id)
            return self._require(meal_plan, meal_plan_id)

        window = view_window(params)
        if window is None:
            meal_plan = await self._repository.get_with_recipes(
                meal_plan_id, build_recipe_filter(params, date_range)
            )
            return self._require(meal_plan, meal_plan_id)

        meal_plan = self._require(await self._repository.get_by_id(meal_plan_id), meal_plan_id)
        recipes = await self._repository.get_recipes_for_range(
            meal_plan_id, window.start, window.end, params.meal_type
        )
        return dataclasses.replace(meal_plan, recipes=recipes)

    @staticmethod
    def _require(meal_plan: Optional[MealPlan], meal_plan_id: int) -> MealPlan:
        if meal_plan is None:
            raise MealPlanNotFoundError(f"Meal plan with ID {meal_plan_id} not found")
        return meal_plan
