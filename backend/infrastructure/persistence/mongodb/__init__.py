"""MongoDB repository implementations."""

from .base import MongoBaseRepository, create_mongo_client
from .meal_plan_repository import MongoMealPlanRepository, build_recipe_query
from .meal_plan_tag_repository import MongoMealPlanTagRepository

__all__ = [
    "MongoBaseRepository",
    "MongoMealPlanRepository",
    "MongoMealPlanTagRepository",
    "build_recipe_query",
    "create_mongo_client",
]
