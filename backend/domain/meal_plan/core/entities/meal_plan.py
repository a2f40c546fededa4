"""MealPlan aggregate root - named, owned date range of recipe assignments."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import List, Optional

from domain.meal_plan.core.exceptions.domain_errors import InvalidMealPlanError

from .meal_plan_recipe import MealPlanRecipe


@dataclass
class MealPlan:
    """
    Aggregate Root: meal plan with its recipe assignments.

    Example:
        MealPlan = "Weekly Family Meal Plan" (2024-03-11 .. 2024-03-17)
        ├─ 2024-03-15 BREAKFAST -> Pancakes
        ├─ 2024-03-15 LUNCH     -> Caesar salad
        └─ 2024-03-18 DINNER    -> Lasagne

    Invariants:
    - start_date <= end_date when both are set
    - exactly one owner (user_id)

    recipes is only populated when the plan is loaded with its
    assignments; a plain load leaves it empty.
    """

    id: int
    user_id: str
    name: str
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: bool = True

    recipes: List[MealPlanRecipe] = field(default_factory=list)

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if isinstance(self.start_date, datetime):
            self.start_date = self.start_date.date()
        if isinstance(self.end_date, datetime):
            self.end_date = self.end_date.date()

        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise InvalidMealPlanError(
                f"start_date {self.start_date} is after end_date {self.end_date}"
            )

    @property
    def duration_days(self) -> Optional[int]:
        """Inclusive number of days between declared start and end."""
        if self.start_date is None or self.end_date is None:
            return None
        return (self.end_date - self.start_date).days + 1
