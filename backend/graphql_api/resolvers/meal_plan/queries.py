"""Query resolvers for meal plan views.

These resolvers delegate to CQRS query handlers:
- mealPlanView: Full/day/week/month projection of one meal plan
- mealPlanStatistics: Statistics block of one meal plan

Domain errors are not caught here; strawberry reports them in the
response's error list.
"""

from typing import Any, Optional

import strawberry

from application.meal_plan.queries.get_meal_plan_statistics import (
    GetMealPlanStatisticsQuery,
    GetMealPlanStatisticsQueryHandler,
)
from application.meal_plan.queries.get_meal_plan_view import (
    GetMealPlanViewQuery,
    GetMealPlanViewQueryHandler,
)
from domain.meal_plan.core.value_objects.view_params import MealPlanViewParams
from domain.meal_plan.core.views.statistics import MealPlanStatistics as DomainStatistics
from graphql_api.types_meal_plan import (
    MealPlanStatistics,
    MealPlanViewInput,
    MealPlanViewResult,
    MealType,
    MealTypeBreakdown,
    ViewMode,
)


def map_view_input(view_input: Optional[MealPlanViewInput]) -> MealPlanViewParams:
    """Map GraphQL input to domain view parameters."""
    if view_input is None:
        return MealPlanViewParams()
    return MealPlanViewParams(
        view_mode=view_input.view_mode.value,
        filter_date=view_input.filter_date,
        filter_start_date=view_input.filter_start_date,
        filter_end_date=view_input.filter_end_date,
        filter_year=view_input.filter_year,
        filter_month=view_input.filter_month,
        meal_type=view_input.meal_type.value if view_input.meal_type else None,
        group_by_meal_type=view_input.group_by_meal_type,
        include_recipes=view_input.include_recipes,
        include_statistics=view_input.include_statistics,
    )


def map_statistics_to_graphql(statistics: DomainStatistics) -> MealPlanStatistics:
    """Map domain statistics to GraphQL MealPlanStatistics type."""
    breakdown = statistics.meal_type_breakdown
    most_frequent = statistics.most_frequent_meal_type
    return MealPlanStatistics(
        total_recipes=statistics.total_recipes,
        days_with_meals=statistics.days_with_meals,
        average_recipes_per_day=statistics.average_recipes_per_day,
        total_meal_types=statistics.total_meal_types,
        meal_type_breakdown=MealTypeBreakdown(
            breakfast=breakdown.breakfast,
            lunch=breakdown.lunch,
            dinner=breakdown.dinner,
            snack=breakdown.snack,
            dessert=breakdown.dessert,
        ),
        most_frequent_meal_type=MealType(most_frequent.value) if most_frequent else None,
        start_date=statistics.start_date,
        end_date=statistics.end_date,
        duration=statistics.duration,
    )


def _require(context: Any, key: str) -> Any:
    dependency = context.get(key)
    if dependency is None:
        raise ValueError(f"{key} not available in context")
    return dependency


@strawberry.type
class MealPlanQueries:
    """Meal plan view queries."""

    @strawberry.field(description="Meal plan projected into a full, day, week or month view")
    async def meal_plan_view(
        self,
        info: strawberry.types.Info,
        meal_plan_id: str,
        user_id: str,
        input: Optional[MealPlanViewInput] = None,
    ) -> MealPlanViewResult:
        """Get a projected meal plan view.

        Example:
            query {
              mealPlanView(
                mealPlanId: "123", userId: "user-1",
                input: {viewMode: DAY, filterDate: "2024-03-15"}
              ) {
                success, viewMode, data
              }
            }
        """
        handler = GetMealPlanViewQueryHandler(
            repository=_require(info.context, "meal_plan_repository"),
            tag_repository=_require(info.context, "meal_plan_tag_repository"),
        )
        params = map_view_input(input)
        envelope = await handler.handle(
            GetMealPlanViewQuery(meal_plan_id=meal_plan_id, user_id=user_id, params=params)
        )

        return MealPlanViewResult(
            success=envelope.success,
            view_mode=ViewMode(envelope.view_mode.value),
            data=envelope.data.to_dict(),
            statistics=(
                map_statistics_to_graphql(envelope.statistics) if envelope.statistics else None
            ),
        )

    @strawberry.field(description="Statistics of a meal plan")
    async def meal_plan_statistics(
        self,
        info: strawberry.types.Info,
        meal_plan_id: str,
        user_id: str,
    ) -> MealPlanStatistics:
        """Get statistics of a meal plan.

        Example:
            query {
              mealPlanStatistics(mealPlanId: "123", userId: "user-1") {
                totalRecipes, averageRecipesPerDay, duration
              }
            }
        """
        handler = GetMealPlanStatisticsQueryHandler(
            repository=_require(info.context, "meal_plan_repository"),
        )
        statistics = await handler.handle(
            GetMealPlanStatisticsQuery(meal_plan_id=meal_plan_id, user_id=user_id)
        )
        return map_statistics_to_graphql(statistics)
