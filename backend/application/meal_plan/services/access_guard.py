"""Access guard - existence and ownership checks for meal plans."""

import logging

from domain.meal_plan.core.exceptions.domain_errors import (
    MealPlanAccessDeniedError,
    MealPlanNotFoundError,
)
from domain.shared.ports.meal_plan_repository import IMealPlanRepository

logger = logging.getLogger(__name__)


class MealPlanAccessGuard:
    """Verifies that a meal plan exists and belongs to the requesting user.

    Existence and ownership are two separate repository calls so callers
    can tell "does not exist" (404) from "exists but not yours" (403).
    """

    def __init__(self, repository: IMealPlanRepository):
        self._repository = repository

    async def verify(self, meal_plan_id: int, user_id: str) -> None:
        """
        Check existence then ownership.

        Args:
            meal_plan_id: Meal plan identifier
            user_id: Requesting user

        Raises:
            MealPlanNotFoundError: If the meal plan does not exist
            MealPlanAccessDeniedError: If it exists but is owned by someone else
        """
        if not await self._repository.exists(meal_plan_id):
            raise MealPlanNotFoundError(f"Meal plan with ID {meal_plan_id} not found")

        owner = await self._repository.get_owner(meal_plan_id)
        if owner != user_id:
            logger.info(
                "Meal plan access denied",
                extra={"meal_plan_id": str(meal_plan_id), "user_id": user_id},
            )
            raise MealPlanAccessDeniedError(
                f"Access denied to meal plan {meal_plan_id} for user {user_id}"
            )
