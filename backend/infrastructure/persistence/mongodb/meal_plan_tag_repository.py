"""MongoDB implementation of meal plan tag repository."""

from typing import Any, Dict, List

from domain.meal_plan.core.entities.meal_plan_tag import MealPlanTag
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoMealPlanTagRepository(MongoBaseRepository[MealPlanTag]):
    """
    Tags attached to meal plans.

    Document Schema (meal_plan_tags):
    {
        "meal_plan_id": 123,
        "tag_id": 4,
        "name": "family"
    }
    """

    @property
    def collection_name(self) -> str:
        return "meal_plan_tags"

    def to_document(self, entity: MealPlanTag) -> Dict[str, Any]:
        return {"tag_id": entity.tag_id, "name": entity.name}

    def from_document(self, doc: Dict[str, Any]) -> MealPlanTag:
        return MealPlanTag(tag_id=doc["tag_id"], name=doc["name"])

    async def add_tag(self, meal_plan_id: int, tag: MealPlanTag) -> None:
        await self._insert_one({"meal_plan_id": meal_plan_id, **self.to_document(tag)})

    async def find_by_meal_plan_id(self, meal_plan_id: int) -> List[MealPlanTag]:
        docs = await self._find_many({"meal_plan_id": meal_plan_id}, sort=[("name", 1)])
        return [self.from_document(doc) for doc in docs]
