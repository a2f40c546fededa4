"""MongoDB implementation of meal plan repository.

Provides persistent storage for MealPlan aggregates using MongoDB.
Uses MongoBaseRepository for common patterns.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from domain.meal_plan.core.entities.meal_plan import MealPlan
from domain.meal_plan.core.entities.meal_plan_recipe import MealPlanRecipe, RecipeSummary
from domain.meal_plan.core.value_objects.date_range import DateRange
from domain.meal_plan.core.value_objects.meal_type import MealType
from domain.meal_plan.core.value_objects.recipe_filter import RecipeFilter
from domain.meal_plan.core.views.statistics import MealPlanStatisticsRaw, MealTypeCount
from infrastructure.persistence.mongodb.base import MongoBaseRepository

RECIPES_COLLECTION = "meal_plan_recipes"


def build_recipe_query(
    meal_plan_id: int, recipe_filter: Optional[RecipeFilter] = None
) -> Dict[str, Any]:
    """
    Build the meal_plan_recipes filter for a plan.

    A single-day range becomes an exact meal_date match; other ranges use
    $gte/$lte on whichever bounds are set.

    Example:
        >>> build_recipe_query(123, RecipeFilter(meal_type=MealType.LUNCH))
        {'meal_plan_id': 123, 'meal_type': 'LUNCH'}
    """
    query: Dict[str, Any] = {"meal_plan_id": meal_plan_id}
    if recipe_filter is None:
        return query

    if recipe_filter.meal_type is not None:
        query["meal_type"] = recipe_filter.meal_type.value

    date_range = recipe_filter.date_range
    if date_range is None:
        return query

    if date_range.is_single_day:
        query["meal_date"] = MongoBaseRepository.date_to_datetime(date_range.start)
        return query

    bounds: Dict[str, Any] = {}
    if date_range.start is not None:
        bounds["$gte"] = MongoBaseRepository.date_to_datetime(date_range.start)
    if date_range.end is not None:
        bounds["$lte"] = MongoBaseRepository.date_to_datetime(date_range.end)
    if bounds:
        query["meal_date"] = bounds
    return query


def build_statistics_pipeline(meal_plan_id: int) -> List[Dict[str, Any]]:
    """Single-round-trip pipeline: total, per-type counts and distinct dates."""
    return [
        {"$match": {"meal_plan_id": meal_plan_id}},
        {
            "$facet": {
                "total": [{"$count": "count"}],
                "by_meal_type": [{"$group": {"_id": "$meal_type", "count": {"$sum": 1}}}],
                "dates": [{"$group": {"_id": "$meal_date"}}, {"$sort": {"_id": 1}}],
            }
        },
    ]


class MongoMealPlanRepository(MongoBaseRepository[MealPlan]):
    """
    MongoDB implementation of meal plan repository.

    Storage Strategy:
    - Meal plans live in "meal_plans", one document per plan
    - Assignments live in "meal_plan_recipes", one document each, with
      the referenced recipe summary embedded
    - Calendar dates stored as UTC-midnight datetimes

    Document Schema (meal_plans):
    {
        "_id": 123,
        "user_id": "user-1",
        "name": "Weekly Family Meal Plan",
        "description": "optional-string",
        "start_date": ISODate("2024-03-11T00:00:00Z"),
        "end_date": ISODate("2024-03-17T00:00:00Z"),
        "is_active": true,
        "created_at": ISODate(...),
        "updated_at": ISODate(...)
    }

    Document Schema (meal_plan_recipes):
    {
        "_id": 1,
        "meal_plan_id": 123,
        "recipe_id": 7,
        "meal_date": ISODate("2024-03-15T00:00:00Z"),
        "meal_type": "LUNCH",
        "servings": 2,
        "notes": "optional-string",
        "recipe": {"recipe_id": 7, "title": "Caesar salad", "user_id": "user-1"},
        "created_at": ISODate(...)
    }

    Indexes:
    - meal_plan_recipes (meal_plan_id, meal_date, meal_type)
    """

    @property
    def collection_name(self) -> str:
        """MongoDB collection name."""
        return "meal_plans"

    @property
    def recipes_collection(self) -> Any:
        return self._db[RECIPES_COLLECTION]

    # ============================================================
    # Document Mapping (Domain ↔ MongoDB)
    # ============================================================

    def to_document(self, entity: MealPlan) -> Dict[str, Any]:
        meal_plan = entity
        return {
            "_id": meal_plan.id,
            "user_id": meal_plan.user_id,
            "name": meal_plan.name,
            "description": meal_plan.description,
            "start_date": self.date_to_datetime(meal_plan.start_date),
            "end_date": self.date_to_datetime(meal_plan.end_date),
            "is_active": meal_plan.is_active,
            "created_at": meal_plan.created_at,
            "updated_at": meal_plan.updated_at,
        }

    def from_document(self, doc: Dict[str, Any]) -> MealPlan:
        return MealPlan(
            id=doc["_id"],
            user_id=doc["user_id"],
            name=doc["name"],
            description=doc.get("description"),
            start_date=self.datetime_to_date(doc.get("start_date")),
            end_date=self.datetime_to_date(doc.get("end_date")),
            is_active=doc.get("is_active", True),
            created_at=self.ensure_aware(doc["created_at"]),
            updated_at=self.ensure_aware(doc["updated_at"]),
        )

    def recipe_to_document(self, recipe: MealPlanRecipe) -> Dict[str, Any]:
        doc: Dict[str, Any] = {
            "meal_plan_id": recipe.meal_plan_id,
            "recipe_id": recipe.recipe_id,
            "meal_date": self.date_to_datetime(recipe.meal_date),
            "meal_type": recipe.meal_type.value,
            "servings": recipe.servings,
            "notes": recipe.notes,
            "recipe": (
                {
                    "recipe_id": recipe.recipe.recipe_id,
                    "title": recipe.recipe.title,
                    "user_id": recipe.recipe.user_id,
                }
                if recipe.recipe
                else None
            ),
            "created_at": recipe.created_at,
        }
        if recipe.meal_plan_recipe_id is not None:
            doc["_id"] = recipe.meal_plan_recipe_id
        return doc

    def recipe_from_document(self, doc: Dict[str, Any]) -> MealPlanRecipe:
        summary = doc.get("recipe")
        doc_id = doc.get("_id")
        return MealPlanRecipe(
            meal_plan_id=doc["meal_plan_id"],
            recipe_id=doc["recipe_id"],
            meal_date=self.datetime_to_date(doc["meal_date"]),
            meal_type=doc["meal_type"],
            servings=doc.get("servings"),
            notes=doc.get("notes"),
            recipe=(
                RecipeSummary(
                    recipe_id=summary["recipe_id"],
                    title=summary["title"],
                    user_id=summary["user_id"],
                )
                if summary
                else None
            ),
            meal_plan_recipe_id=doc_id if isinstance(doc_id, int) else None,
            created_at=self.ensure_aware(doc["created_at"]),
        )

    # ============================================================
    # Repository Operations
    # ============================================================

    async def save(self, meal_plan: MealPlan) -> None:
        """Upsert the plan document; recipes are stored via add_recipe."""
        await self._replace_one({"_id": meal_plan.id}, self.to_document(meal_plan), upsert=True)

    async def add_recipe(self, recipe: MealPlanRecipe) -> None:
        await self._insert_one(self.recipe_to_document(recipe), collection=self.recipes_collection)

    async def exists(self, meal_plan_id: int) -> bool:
        return await self._count({"_id": meal_plan_id}, limit=1) > 0

    async def get_owner(self, meal_plan_id: int) -> Optional[str]:
        doc = await self._find_one({"_id": meal_plan_id}, {"user_id": 1})
        return doc["user_id"] if doc else None

    async def get_by_id(self, meal_plan_id: int) -> Optional[MealPlan]:
        doc = await self._find_one({"_id": meal_plan_id})
        return self.from_document(doc) if doc else None

    async def get_with_recipes(
        self,
        meal_plan_id: int,
        recipe_filter: Optional[RecipeFilter] = None,
    ) -> Optional[MealPlan]:
        meal_plan = await self.get_by_id(meal_plan_id)
        if meal_plan is None:
            return None
        meal_plan.recipes = await self._find_recipes(build_recipe_query(meal_plan_id, recipe_filter))
        return meal_plan

    async def get_recipes_for_range(
        self,
        meal_plan_id: int,
        start_date: date,
        end_date: date,
        meal_type: Optional[MealType] = None,
    ) -> List[MealPlanRecipe]:
        recipe_filter = RecipeFilter(
            meal_type=meal_type, date_range=DateRange(start=start_date, end=end_date)
        )
        return await self._find_recipes(build_recipe_query(meal_plan_id, recipe_filter))

    async def get_statistics_raw(self, meal_plan_id: int) -> MealPlanStatisticsRaw:
        rows = await self._aggregate(
            build_statistics_pipeline(meal_plan_id), collection=self.recipes_collection
        )
        facets = rows[0] if rows else {}
        total = facets.get("total") or []
        return MealPlanStatisticsRaw(
            total_recipes=total[0]["count"] if total else 0,
            meal_type_counts=[
                MealTypeCount(meal_type=row["_id"], count=row["count"])
                for row in facets.get("by_meal_type", [])
            ],
            unique_dates=[self.datetime_to_date(row["_id"]) for row in facets.get("dates", [])],
        )

    async def _find_recipes(self, query: Dict[str, Any]) -> List[MealPlanRecipe]:
        docs = await self._find_many(
            query,
            sort=[("meal_date", 1)],
            collection=self.recipes_collection,
        )
        recipes = [self.recipe_from_document(doc) for doc in docs]
        # meal_type is stored by name; order by declaration order in Python
        recipes.sort(key=lambda recipe: recipe.sort_key)
        return recipes
