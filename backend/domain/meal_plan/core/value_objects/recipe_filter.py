"""RecipeFilter value object.

Filter handed to repositories when loading a meal plan's assignments.
"""

from dataclasses import dataclass
from typing import Optional

from domain.meal_plan.core.value_objects.date_range import DateRange
from domain.meal_plan.core.value_objects.meal_type import MealType


@dataclass(frozen=True)
class RecipeFilter:
    """Optional meal type and date range restriction.

    A single-day date_range must be matched by exact date equality in
    adapters, not by an inclusive range query.
    """

    meal_type: Optional[MealType] = None
    date_range: Optional[DateRange] = None

    @property
    def is_empty(self) -> bool:
        return self.meal_type is None and self.date_range is None
