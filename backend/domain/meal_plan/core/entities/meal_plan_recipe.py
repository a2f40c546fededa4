"""MealPlanRecipe entity - one recipe assigned to a date and meal slot."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from domain.meal_plan.core.value_objects.meal_type import MealType


@dataclass(frozen=True)
class RecipeSummary:
    """Referenced recipe, reduced to what views need.

    Recipe content is owned by another service; only id, title and owner
    travel with an assignment.
    """

    recipe_id: int
    title: str
    user_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recipeId": str(self.recipe_id),
            "title": self.title,
            "userId": self.user_id,
        }


@dataclass
class MealPlanRecipe:
    """
    Entity: recipe assigned to a meal plan on a calendar date.

    Example:
        MealPlanRecipe(meal_plan_id=123, recipe_id=7,
                       meal_date=date(2024, 3, 15), meal_type=MealType.LUNCH)

    Invariants:
    - meal_date is a calendar date (time of day is discarded)
    - meal_type is one of the MealType members

    Several assignments may share a meal_date (different meal types or
    recipes).
    """

    meal_plan_id: int
    recipe_id: int
    meal_date: date
    meal_type: MealType

    servings: Optional[int] = None
    notes: Optional[str] = None
    recipe: Optional[RecipeSummary] = None
    meal_plan_recipe_id: Optional[int] = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Normalize meal_date and meal_type."""
        # datetime is a subclass of date, check it first
        if isinstance(self.meal_date, datetime):
            self.meal_date = self.meal_date.date()
        self.meal_type = MealType.parse(self.meal_type)

    @property
    def sort_key(self) -> tuple:
        """Ordering used by every adapter: (meal_date, meal_type)."""
        return (self.meal_date, self.meal_type.sort_index)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase payload used by views."""
        return {
            "mealPlanRecipeId": (
                str(self.meal_plan_recipe_id) if self.meal_plan_recipe_id is not None else None
            ),
            "mealPlanId": str(self.meal_plan_id),
            "recipeId": str(self.recipe_id),
            "recipeName": self.recipe.title if self.recipe else None,
            "mealDate": self.meal_date.isoformat(),
            "mealType": self.meal_type.value,
            "servings": self.servings,
            "notes": self.notes,
            "recipe": self.recipe.to_dict() if self.recipe else None,
        }
