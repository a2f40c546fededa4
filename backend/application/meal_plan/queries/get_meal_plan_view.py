"""Get meal plan view query - project a meal plan into full/day/week/month views."""

from dataclasses import dataclass, field
from typing import List, Optional
import logging

from application.meal_plan.services.access_guard import MealPlanAccessGuard
from application.meal_plan.services.recipe_fetcher import MealPlanRecipeFetcher
from application.meal_plan.services.response_assembler import (
    MealPlanViewEnvelope,
    assemble_response,
)
from domain.meal_plan.core.entities.meal_plan_tag import MealPlanTag
from domain.meal_plan.core.value_objects.meal_plan_id import MealPlanId
from domain.meal_plan.core.value_objects.view_params import MealPlanViewParams, ViewMode
from domain.meal_plan.core.views.statistics import MealPlanStatistics
from domain.meal_plan.services.date_range_resolver import resolve_date_range
from domain.meal_plan.services.query_validation import validate_view_params
from domain.meal_plan.services.statistics_aggregator import StatisticsAggregator
from domain.meal_plan.services.view_projector import ViewProjector
from domain.shared.ports.meal_plan_repository import IMealPlanRepository
from domain.shared.ports.meal_plan_tag_repository import IMealPlanTagRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetMealPlanViewQuery:
    """
    Query: Get a projected view of one meal plan.

    Read-only operation with authorization.

    Attributes:
        meal_plan_id: Meal plan id as received (decimal string)
        user_id: Requesting user, checked against the plan owner
        params: View mode and filters
    """

    meal_plan_id: str
    user_id: str
    params: MealPlanViewParams = field(default_factory=MealPlanViewParams)


class GetMealPlanViewQueryHandler:
    """Handler for GetMealPlanViewQuery.

    Pipeline (strictly sequential, fail-fast):
        validate params -> parse id -> existence/ownership ->
        resolve date range -> fetch -> project -> tags (full view) ->
        statistics (if requested) -> envelope
    """

    def __init__(
        self,
        repository: IMealPlanRepository,
        tag_repository: IMealPlanTagRepository,
        projector: Optional[ViewProjector] = None,
        aggregator: Optional[StatisticsAggregator] = None,
    ):
        """
        Initialize handler.

        Args:
            repository: Meal plan repository port
            tag_repository: Tag repository port (full view decoration)
            projector: View projector (default: system clock)
            aggregator: Statistics aggregator (default: system clock)
        """
        self._repository = repository
        self._tag_repository = tag_repository
        self._access_guard = MealPlanAccessGuard(repository)
        self._fetcher = MealPlanRecipeFetcher(repository)
        self._projector = projector or ViewProjector()
        self._aggregator = aggregator or StatisticsAggregator()

    async def handle(self, query: GetMealPlanViewQuery) -> MealPlanViewEnvelope:
        """
        Execute query.

        Args:
            query: GetMealPlanViewQuery

        Returns:
            MealPlanViewEnvelope with the projected view

        Raises:
            MealPlanValidationError: Invalid view parameters
            MealPlanNotFoundError: Unknown or unparsable meal plan id
            MealPlanAccessDeniedError: Meal plan owned by another user

        Example:
            >>> handler = GetMealPlanViewQueryHandler(repository, tag_repository)
            >>> query = GetMealPlanViewQuery(
            ...     meal_plan_id="123",
            ...     user_id="user-a",
            ...     params=MealPlanViewParams(view_mode="day", filter_date=date(2024, 3, 15)),
            ... )
            >>> envelope = await handler.handle(query)
            >>> envelope.to_dict()["data"]["totalMeals"]
            2
        """
        params = query.params
        validate_view_params(params)

        meal_plan_id = MealPlanId.parse(query.meal_plan_id).value
        await self._access_guard.verify(meal_plan_id, query.user_id)

        date_range = resolve_date_range(params)
        meal_plan = await self._fetcher.fetch(meal_plan_id, params, date_range)
        view = self._projector.project(meal_plan, params)

        tags: Optional[List[MealPlanTag]] = None
        if params.view_mode is ViewMode.FULL:
            tags = await self._tag_repository.find_by_meal_plan_id(meal_plan_id)

        statistics: Optional[MealPlanStatistics] = None
        if params.include_statistics:
            raw = await self._repository.get_statistics_raw(meal_plan_id)
            statistics = self._aggregator.aggregate(raw)

        logger.debug(
            "Meal plan view projected",
            extra={
                "meal_plan_id": str(meal_plan_id),
                "user_id": query.user_id,
                "view_mode": params.view_mode.value,
                "recipe_count": len(meal_plan.recipes),
                "with_statistics": statistics is not None,
            },
        )

        return assemble_response(params.view_mode, view, statistics=statistics, tags=tags)
