"""Core entities for meal plan domain."""

from .meal_plan_recipe import MealPlanRecipe, RecipeSummary
from .meal_plan_tag import MealPlanTag
from .meal_plan import MealPlan

__all__ = ["MealPlan", "MealPlanRecipe", "MealPlanTag", "RecipeSummary"]
