"""Domain ports (interfaces for infrastructure adapters)."""

from domain.shared.ports.meal_plan_repository import IMealPlanRepository
from domain.shared.ports.meal_plan_tag_repository import IMealPlanTagRepository

__all__ = [
    "IMealPlanRepository",
    "IMealPlanTagRepository",
]
