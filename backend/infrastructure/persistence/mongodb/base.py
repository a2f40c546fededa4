"""Base MongoDB repository with reusable patterns.

Provides common functionality for all MongoDB repositories:
- Connection management
- Document mapping (domain ↔ MongoDB)
- Error handling
- Logging

All concrete MongoDB repositories should inherit from MongoBaseRepository.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from domain.meal_plan.core.exceptions.domain_errors import MealPlanPersistenceError
from infrastructure.config import get_mongodb_database, get_mongodb_uri

# Domain entity type
TEntity = TypeVar("TEntity")

logger = logging.getLogger(__name__)


def create_mongo_client() -> AsyncIOMotorClient[Dict[str, Any]]:
    """
    Create a Motor client from MONGODB_URI.

    Raises:
        ValueError: If MONGODB_URI is not configured
    """
    uri = get_mongodb_uri()
    if not uri:
        raise ValueError(
            "MONGODB_URI not configured. "
            "Set MONGODB_URI, MONGODB_USER, "
            "and MONGODB_PASSWORD environment variables."
        )
    return AsyncIOMotorClient(uri, tz_aware=True)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Provides common functionality:
    - Connection pooling (motor handles this automatically)
    - Document ↔ Entity mapping
    - Error handling: driver errors are logged and raised as
      MealPlanPersistenceError
    - date ↔ UTC-midnight datetime conversion (BSON has no date type)

    Subclasses must implement:
    - collection_name: Name of the primary MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Helpers default to the primary collection; pass another collection
    handle (from self._db) to query secondary collections.
    """

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)
        """
        self._client = client if client is not None else create_mongo_client()

        database_name = get_mongodb_database()
        self._db = self._client[database_name]
        self._collection = self._db[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} " f"for collection '{self.collection_name}'"
        )

    # ============================================================
    # Abstract Properties/Methods (must be implemented)
    # ============================================================

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Convert domain entity to MongoDB document."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            KeyError: If document is missing required fields
        """
        pass

    # ============================================================
    # Protected Utility Methods (for subclasses)
    # ============================================================

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        """Get MongoDB collection handle."""
        return self._collection

    @staticmethod
    def date_to_datetime(value: Optional[date]) -> Optional[datetime]:
        """Store a calendar date as UTC midnight."""
        if value is None:
            return None
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    @staticmethod
    def datetime_to_date(value: Optional[datetime]) -> Optional[date]:
        """Read a stored UTC-midnight datetime back as a calendar date."""
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()

    @staticmethod
    def ensure_aware(value: datetime) -> datetime:
        """Treat naive datetimes from the driver as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def _fail(self, operation: str, error: Exception, **context: Any) -> MealPlanPersistenceError:
        logger.error(
            f"Error in {operation}: repository={self.__class__.__name__}",
            extra={"error": str(error), **context},
        )
        return MealPlanPersistenceError(f"Database error during {operation}")

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        projection: Optional[Dict[str, int]] = None,
        collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Find single document with error handling.

        Returns:
            Document dict or None if not found

        Raises:
            MealPlanPersistenceError: If MongoDB operation fails
        """
        target = collection if collection is not None else self._collection
        try:
            return await target.find_one(filter_dict, projection)
        except PyMongoError as e:
            raise self._fail("find_one", e, filter=str(filter_dict)) from e

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: Optional[int] = None,
        projection: Optional[Dict[str, int]] = None,
        collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents with error handling.

        Args:
            filter_dict: MongoDB filter
            sort: Sort specification [(field, direction), ...]
            limit: Max documents to return
            projection: Optional projection
            collection: Collection to query (default: primary)

        Raises:
            MealPlanPersistenceError: If MongoDB operation fails
        """
        target = collection if collection is not None else self._collection
        try:
            cursor = target.find(filter_dict, projection)
            if sort:
                cursor = cursor.sort(sort)
            if limit:
                cursor = cursor.limit(limit)
            return await cursor.to_list(length=limit)
        except PyMongoError as e:
            raise self._fail("find_many", e, filter=str(filter_dict)) from e

    async def _aggregate(
        self,
        pipeline: List[Dict[str, Any]],
        collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Run an aggregation pipeline with error handling.

        Raises:
            MealPlanPersistenceError: If MongoDB operation fails
        """
        target = collection if collection is not None else self._collection
        try:
            cursor = target.aggregate(pipeline)
            return await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._fail("aggregate", e) from e

    async def _insert_one(
        self,
        document: Dict[str, Any],
        collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None,
    ) -> Any:
        """
        Insert single document with error handling.

        Returns:
            The inserted _id

        Raises:
            MealPlanPersistenceError: If MongoDB operation fails
        """
        target = collection if collection is not None else self._collection
        try:
            result = await target.insert_one(document)
            return result.inserted_id
        except PyMongoError as e:
            raise self._fail("insert_one", e) from e

    async def _replace_one(
        self,
        filter_dict: Dict[str, Any],
        document: Dict[str, Any],
        upsert: bool = False,
    ) -> None:
        """
        Replace single document in the primary collection.

        Raises:
            MealPlanPersistenceError: If MongoDB operation fails
        """
        try:
            await self._collection.replace_one(filter_dict, document, upsert=upsert)
        except PyMongoError as e:
            raise self._fail("replace_one", e, filter=str(filter_dict)) from e

    async def _count(
        self,
        filter_dict: Dict[str, Any],
        limit: int = 0,
        collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None,
    ) -> int:
        """
        Count documents with error handling.

        Raises:
            MealPlanPersistenceError: If MongoDB operation fails
        """
        target = collection if collection is not None else self._collection
        try:
            if limit:
                return await target.count_documents(filter_dict, limit=limit)
            return await target.count_documents(filter_dict)
        except PyMongoError as e:
            raise self._fail("count", e, filter=str(filter_dict)) from e

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info(f"Closed connection for {self.__class__.__name__}")
