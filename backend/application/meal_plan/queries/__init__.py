"""CQRS Queries for Meal Plan domain."""

from application.meal_plan.queries.get_meal_plan_view import (
    GetMealPlanViewQuery,
    GetMealPlanViewQueryHandler,
)
from application.meal_plan.queries.get_meal_plan_statistics import (
    GetMealPlanStatisticsQuery,
    GetMealPlanStatisticsQueryHandler,
)

__all__ = [
    "GetMealPlanViewQuery",
    "GetMealPlanViewQueryHandler",
    "GetMealPlanStatisticsQuery",
    "GetMealPlanStatisticsQueryHandler",
]
