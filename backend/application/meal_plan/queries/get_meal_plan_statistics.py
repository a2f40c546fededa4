"""Get meal plan statistics query - statistics block without a view."""

from dataclasses import dataclass
from typing import Optional
import logging

from application.meal_plan.services.access_guard import MealPlanAccessGuard
from domain.meal_plan.core.value_objects.meal_plan_id import MealPlanId
from domain.meal_plan.core.views.statistics import MealPlanStatistics
from domain.meal_plan.services.statistics_aggregator import StatisticsAggregator
from domain.shared.ports.meal_plan_repository import IMealPlanRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetMealPlanStatisticsQuery:
    """
    Query: Get statistics of one meal plan.

    Attributes:
        meal_plan_id: Meal plan id as received (decimal string)
        user_id: Requesting user, checked against the plan owner
    """

    meal_plan_id: str
    user_id: str


class GetMealPlanStatisticsQueryHandler:
    """Handler for GetMealPlanStatisticsQuery."""

    def __init__(
        self,
        repository: IMealPlanRepository,
        aggregator: Optional[StatisticsAggregator] = None,
    ):
        self._repository = repository
        self._access_guard = MealPlanAccessGuard(repository)
        self._aggregator = aggregator or StatisticsAggregator()

    async def handle(self, query: GetMealPlanStatisticsQuery) -> MealPlanStatistics:
        """
        Execute query.

        Raises:
            MealPlanNotFoundError: Unknown or unparsable meal plan id
            MealPlanAccessDeniedError: Meal plan owned by another user
        """
        meal_plan_id = MealPlanId.parse(query.meal_plan_id).value
        await self._access_guard.verify(meal_plan_id, query.user_id)

        raw = await self._repository.get_statistics_raw(meal_plan_id)
        statistics = self._aggregator.aggregate(raw)

        logger.debug(
            "Meal plan statistics computed",
            extra={
                "meal_plan_id": str(meal_plan_id),
                "user_id": query.user_id,
                "total_recipes": statistics.total_recipes,
            },
        )
        return statistics
