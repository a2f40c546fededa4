"""Projected meal plan views.

Derived, request-scoped shapes built by ViewProjector. None of these is
persisted; to_dict() renders the JSON payload with camelCase keys and
ISO-8601 dates.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Tuple, Union

from domain.meal_plan.core.entities.meal_plan import MealPlan
from domain.meal_plan.core.entities.meal_plan_recipe import MealPlanRecipe
from domain.meal_plan.core.entities.meal_plan_tag import MealPlanTag

from .buckets import MealTypeBuckets, MealTypeCounts


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class FullView:
    """Meal plan with its (possibly filtered) assignments.

    recipes is None when assignments were not loaded, a tuple for the flat
    list, or MealTypeBuckets when grouping by meal type was requested.
    """

    meal_plan: MealPlan
    recipes: Union[None, Tuple[MealPlanRecipe, ...], MealTypeBuckets] = None
    tags: Optional[Tuple[MealPlanTag, ...]] = None

    @property
    def recipe_count(self) -> int:
        if self.recipes is None:
            return 0
        if isinstance(self.recipes, MealTypeBuckets):
            return self.recipes.total
        return len(self.recipes)

    def to_dict(self) -> Dict[str, Any]:
        plan = self.meal_plan
        data: Dict[str, Any] = {
            "id": str(plan.id),
            "userId": plan.user_id,
            "name": plan.name,
            "description": plan.description,
            "startDate": _iso(plan.start_date),
            "endDate": _iso(plan.end_date),
            "isActive": plan.is_active,
            "createdAt": plan.created_at.isoformat(),
            "updatedAt": plan.updated_at.isoformat(),
        }
        if self.recipes is not None:
            if isinstance(self.recipes, MealTypeBuckets):
                data["recipes"] = self.recipes.to_dict()
            else:
                data["recipes"] = [r.to_dict() for r in self.recipes]
            data["recipeCount"] = self.recipe_count
        if plan.duration_days is not None:
            data["durationDays"] = plan.duration_days
        if self.tags is not None:
            data["tags"] = [tag.to_dict() for tag in self.tags]
        return data


@dataclass(frozen=True)
class DayView:
    meal_plan_id: int
    meal_plan_name: str
    date: date
    meals: MealTypeBuckets
    total_meals: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mealPlanId": str(self.meal_plan_id),
            "mealPlanName": self.meal_plan_name,
            "date": self.date.isoformat(),
            "meals": self.meals.to_dict(),
            "totalMeals": self.total_meals,
        }


@dataclass(frozen=True)
class WeekDay:
    date: date
    day_of_week: str
    meals: MealTypeBuckets
    total_meals: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "dayOfWeek": self.day_of_week,
            "meals": self.meals.to_dict(),
            "totalMeals": self.total_meals,
        }


@dataclass(frozen=True)
class WeekView:
    """Seven consecutive days starting at start_date."""

    meal_plan_id: int
    meal_plan_name: str
    start_date: date
    end_date: date
    week_number: int
    days: Tuple[WeekDay, ...]
    total_meals: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mealPlanId": str(self.meal_plan_id),
            "mealPlanName": self.meal_plan_name,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "weekNumber": self.week_number,
            "days": [day.to_dict() for day in self.days],
            "totalMeals": self.total_meals,
        }


@dataclass(frozen=True)
class MonthDay:
    """Calendar cell; lead/trail days of adjacent months have is_current_month False."""

    date: date
    day_of_month: int
    is_current_month: bool
    meal_count: int
    meals: MealTypeCounts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "dayOfMonth": self.day_of_month,
            "isCurrentMonth": self.is_current_month,
            "mealCount": self.meal_count,
            "meals": self.meals.to_dict(),
        }


@dataclass(frozen=True)
class MonthWeek:
    week_number: int
    start_date: date
    end_date: date
    days: Tuple[MonthDay, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weekNumber": self.week_number,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "days": [day.to_dict() for day in self.days],
        }


@dataclass(frozen=True)
class MonthView:
    meal_plan_id: int
    meal_plan_name: str
    year: int
    month: int
    month_name: str
    weeks: Tuple[MonthWeek, ...]
    total_meals: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mealPlanId": str(self.meal_plan_id),
            "mealPlanName": self.meal_plan_name,
            "year": self.year,
            "month": self.month,
            "monthName": self.month_name,
            "weeks": [week.to_dict() for week in self.weeks],
            "totalMeals": self.total_meals,
        }


MealPlanView = Union[FullView, DayView, WeekView, MonthView]
