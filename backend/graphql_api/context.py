"""GraphQL context factory for dependency injection.

Provides the repositories required by meal plan resolvers.
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from domain.shared.ports.meal_plan_repository import IMealPlanRepository
from domain.shared.ports.meal_plan_tag_repository import IMealPlanTagRepository


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    This context is injected into all GraphQL resolvers via the
    `info` parameter. Resolvers access dependencies using
    `info.context.get("service_name")`.

    Attributes:
        meal_plan_repository: Repository for meal plan reads
        meal_plan_tag_repository: Repository for meal plan tags
        request: FastAPI request object
    """

    def __init__(
        self,
        meal_plan_repository: IMealPlanRepository,
        meal_plan_tag_repository: IMealPlanTagRepository,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.meal_plan_repository = meal_plan_repository
        self.meal_plan_tag_repository = meal_plan_tag_repository
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Example:
            >>> repository = info.context.get("meal_plan_repository")
        """
        return getattr(self, key, None)


def create_context(
    meal_plan_repository: IMealPlanRepository,
    meal_plan_tag_repository: IMealPlanTagRepository,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Example:
        >>> from graphql_api.context import create_context
        >>> context = create_context(
        ...     meal_plan_repository=InMemoryMealPlanRepository(),
        ...     meal_plan_tag_repository=InMemoryMealPlanTagRepository(),
        ... )
    """
    return GraphQLContext(
        meal_plan_repository=meal_plan_repository,
        meal_plan_tag_repository=meal_plan_tag_repository,
        request=request,
    )
