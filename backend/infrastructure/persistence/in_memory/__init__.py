"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.meal_plan_repository import (
    InMemoryMealPlanRepository,
)
from infrastructure.persistence.in_memory.meal_plan_tag_repository import (
    InMemoryMealPlanTagRepository,
)

__all__ = [
    "InMemoryMealPlanRepository",
    "InMemoryMealPlanTagRepository",
]
