"""Repository Factory for Persistence Layer.

Environment-based repository selection with graceful fallback to in-memory.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- .env.test (pytest): REPOSITORY_BACKEND=inmemory (fast, isolated tests)
- Default: inmemory (safe fallback if env vars not set)

Usage:
    from infrastructure.persistence.factory import (
        get_meal_plan_repository,
        get_meal_plan_tag_repository,
    )

    repo = get_meal_plan_repository()      # Singleton instance
    tags = get_meal_plan_tag_repository()  # Shares the Mongo client
"""

import logging
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient

# Protocol interfaces (Dependency Inversion)
from domain.shared.ports.meal_plan_repository import IMealPlanRepository
from domain.shared.ports.meal_plan_tag_repository import IMealPlanTagRepository
from infrastructure.config import get_mongodb_uri, get_repository_backend

# In-memory repositories (fast, transient)
from infrastructure.persistence.in_memory.meal_plan_repository import InMemoryMealPlanRepository
from infrastructure.persistence.in_memory.meal_plan_tag_repository import (
    InMemoryMealPlanTagRepository,
)

# MongoDB repositories (persistent, requires connection)
from infrastructure.persistence.mongodb.base import create_mongo_client
from infrastructure.persistence.mongodb.meal_plan_repository import MongoMealPlanRepository
from infrastructure.persistence.mongodb.meal_plan_tag_repository import (
    MongoMealPlanTagRepository,
)

logger = logging.getLogger(__name__)

_mongo_client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None


def _use_mongodb() -> bool:
    """Check REPOSITORY_BACKEND.

    Raises:
        ValueError: If mongodb is selected but MONGODB_URI is not set
    """
    if get_repository_backend() != "mongodb":
        return False
    if not get_mongodb_uri():
        raise ValueError(
            "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
            "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
        )
    return True


def _get_mongo_client() -> AsyncIOMotorClient[Dict[str, Any]]:
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = create_mongo_client()
        logger.info("mongodb.client_created")
    return _mongo_client


def create_meal_plan_repository() -> IMealPlanRepository:
    """Create meal plan repository based on REPOSITORY_BACKEND env var.

    Environment variable: REPOSITORY_BACKEND
    Values:
        - "inmemory": In-memory repository (default, fast, transient)
        - "mongodb": MongoDB repository (persistent, requires MONGODB_URI)

    Raises:
        ValueError: If mongodb selected but MONGODB_URI not set
    """
    if _use_mongodb():
        return MongoMealPlanRepository(client=_get_mongo_client())

    # Default: inmemory (safe fallback)
    return InMemoryMealPlanRepository()


def create_meal_plan_tag_repository() -> IMealPlanTagRepository:
    """Create meal plan tag repository based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        return MongoMealPlanTagRepository(client=_get_mongo_client())
    return InMemoryMealPlanTagRepository()


# Singleton instances (lazy initialization)
_meal_plan_repository: Optional[IMealPlanRepository] = None
_meal_plan_tag_repository: Optional[IMealPlanTagRepository] = None


def get_meal_plan_repository() -> IMealPlanRepository:
    """Get singleton meal plan repository instance."""
    global _meal_plan_repository
    if _meal_plan_repository is None:
        _meal_plan_repository = create_meal_plan_repository()
    return _meal_plan_repository


def get_meal_plan_tag_repository() -> IMealPlanTagRepository:
    """Get singleton meal plan tag repository instance."""
    global _meal_plan_tag_repository
    if _meal_plan_tag_repository is None:
        _meal_plan_tag_repository = create_meal_plan_tag_repository()
    return _meal_plan_tag_repository


def reset_repositories() -> None:
    """Reset singleton repository instances and close the Mongo client.

    Useful for testing to force re-creation with different env vars.

    Example:
        # In tests:
        reset_repositories()
        os.environ["REPOSITORY_BACKEND"] = "inmemory"
        repo = get_meal_plan_repository()  # Creates new instance
    """
    global _meal_plan_repository, _meal_plan_tag_repository, _mongo_client
    _meal_plan_repository = None
    _meal_plan_tag_repository = None
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
