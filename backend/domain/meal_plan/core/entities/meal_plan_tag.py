"""MealPlanTag - label attached to a meal plan (managed elsewhere)."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class MealPlanTag:
    tag_id: int
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"tagId": str(self.tag_id), "name": self.name}
