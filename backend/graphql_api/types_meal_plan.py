"""GraphQL types for meal plan view queries.

View payloads have four different shapes (full/day/week/month) and are
returned as a JSON scalar; the statistics block is fully typed.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

import strawberry
from strawberry.scalars import JSON

__all__ = [
    "ViewMode",
    "MealType",
    "MealPlanViewInput",
    "MealTypeBreakdown",
    "MealPlanStatistics",
    "MealPlanViewResult",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class ViewMode(Enum):
    """Shape of the projected view."""

    FULL = "full"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@strawberry.enum
class MealType(Enum):
    """Meal slot of a recipe assignment."""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"
    DESSERT = "DESSERT"


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class MealPlanViewInput:
    """View mode and filters for mealPlanView."""

    view_mode: ViewMode = ViewMode.FULL
    filter_date: Optional[date] = None
    filter_start_date: Optional[date] = None
    filter_end_date: Optional[date] = None
    filter_year: Optional[int] = None
    filter_month: Optional[int] = None
    meal_type: Optional[MealType] = None
    group_by_meal_type: bool = False
    include_recipes: bool = True
    include_statistics: bool = False


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class MealTypeBreakdown:
    """Assignment count per meal type."""

    breakfast: int = 0
    lunch: int = 0
    dinner: int = 0
    snack: int = 0
    dessert: int = 0


@strawberry.type
class MealPlanStatistics:
    """Derived statistics of a meal plan."""

    total_recipes: int
    days_with_meals: int
    average_recipes_per_day: float
    total_meal_types: int
    meal_type_breakdown: MealTypeBreakdown
    most_frequent_meal_type: Optional[MealType]
    start_date: date
    end_date: date
    duration: int


@strawberry.type
class MealPlanViewResult:
    """Envelope of mealPlanView."""

    success: bool
    view_mode: ViewMode
    data: JSON
    statistics: Optional[MealPlanStatistics] = None
