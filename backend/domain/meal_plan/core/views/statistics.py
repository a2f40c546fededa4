"""Meal plan statistics records (raw repository rows and derived block)."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from domain.meal_plan.core.value_objects.meal_type import MealType

from .buckets import MealTypeCounts


@dataclass(frozen=True)
class MealTypeCount:
    """One grouped row: how many assignments carry meal_type."""

    meal_type: str
    count: int


@dataclass(frozen=True)
class MealPlanStatisticsRaw:
    """Aggregates read from storage in one call.

    Attributes:
        total_recipes: Number of assignments in the plan
        meal_type_counts: Grouped count per meal type
        unique_dates: Distinct assignment dates, ascending
    """

    total_recipes: int
    meal_type_counts: List[MealTypeCount] = field(default_factory=list)
    unique_dates: List[date] = field(default_factory=list)


@dataclass(frozen=True)
class MealPlanStatistics:
    """Derived statistics block attached to a view response."""

    total_recipes: int
    days_with_meals: int
    average_recipes_per_day: float
    total_meal_types: int
    meal_type_breakdown: MealTypeCounts
    most_frequent_meal_type: Optional[MealType]
    start_date: date
    end_date: date
    duration: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalRecipes": self.total_recipes,
            "daysWithMeals": self.days_with_meals,
            "averageRecipesPerDay": self.average_recipes_per_day,
            "totalMealTypes": self.total_meal_types,
            "mealTypeBreakdown": self.meal_type_breakdown.to_dict(),
            "mostFrequentMealType": (
                self.most_frequent_meal_type.value if self.most_frequent_meal_type else None
            ),
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "duration": self.duration,
        }
