"""In-memory meal plan tag repository implementation."""

from typing import Dict, List

from domain.meal_plan.core.entities.meal_plan_tag import MealPlanTag


class InMemoryMealPlanTagRepository:
    """
    In-memory implementation of IMealPlanTagRepository port.

    Tags are managed by another part of the system; add_tag exists so
    tests and local runs can seed them.
    """

    def __init__(self) -> None:
        self._tags: Dict[int, List[MealPlanTag]] = {}

    async def add_tag(self, meal_plan_id: int, tag: MealPlanTag) -> None:
        tags = self._tags.setdefault(meal_plan_id, [])
        if any(existing.tag_id == tag.tag_id for existing in tags):
            return
        tags.append(tag)

    async def find_by_meal_plan_id(self, meal_plan_id: int) -> List[MealPlanTag]:
        return sorted(self._tags.get(meal_plan_id, []), key=lambda tag: tag.name)

    def clear(self) -> None:
        """Clear all storage (useful for testing)."""
        self._tags.clear()
