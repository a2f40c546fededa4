"""Meal plan tag repository port (read side only).

Tag management lives outside the view core; views only read the tags of a
plan to decorate the full view.
"""

from typing import List, Protocol

from domain.meal_plan.core.entities.meal_plan_tag import MealPlanTag


class IMealPlanTagRepository(Protocol):
    """Interface for reading tags attached to meal plans."""

    async def find_by_meal_plan_id(self, meal_plan_id: int) -> List[MealPlanTag]:
        """
        Get tags attached to a meal plan.

        Returns:
            Tags ordered by name (empty if none)
        """
        ...
