"""Application services composing the meal plan view pipeline."""

from application.meal_plan.services.access_guard import MealPlanAccessGuard
from application.meal_plan.services.recipe_fetcher import (
    MealPlanRecipeFetcher,
    build_recipe_filter,
    view_window,
)
from application.meal_plan.services.response_assembler import (
    MealPlanViewEnvelope,
    assemble_response,
)

__all__ = [
    "MealPlanAccessGuard",
    "MealPlanRecipeFetcher",
    "MealPlanViewEnvelope",
    "assemble_response",
    "build_recipe_filter",
    "view_window",
]
