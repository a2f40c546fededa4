"""Main GraphQL schema factory for the meal plan service.

Usage:
    from graphql_api.schema import create_schema
    schema = create_schema()
"""

import datetime

import strawberry

from graphql_api.resolvers.meal_plan.queries import MealPlanQueries


@strawberry.type
class Query(MealPlanQueries):
    @strawberry.field
    def server_time(self) -> str:
        return datetime.datetime.now(datetime.timezone.utc).isoformat()

    @strawberry.field
    def health(self) -> str:
        return "ok"


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all meal plan resolvers."""
    return strawberry.Schema(query=Query)
