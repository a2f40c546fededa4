"""Core value objects for meal plan domain.

Immutable value objects that form the building blocks of domain entities.
"""

from .date_range import DateRange
from .meal_plan_id import MealPlanId
from .meal_type import MealType
from .recipe_filter import RecipeFilter
from .view_params import MealPlanViewParams, ViewMode

__all__ = [
    "DateRange",
    "MealPlanId",
    "MealPlanViewParams",
    "MealType",
    "RecipeFilter",
    "ViewMode",
]
