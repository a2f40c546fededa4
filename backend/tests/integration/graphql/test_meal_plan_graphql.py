"""Integration tests for meal plan queries over the /graphql endpoint."""

import pytest

VIEW_QUERY = """
    query View($id: String!, $user: String!, $input: MealPlanViewInput) {
      mealPlanView(mealPlanId: $id, userId: $user, input: $input) {
        success
        viewMode
        data
        statistics { totalRecipes daysWithMeals mostFrequentMealType }
      }
    }
"""


async def post_query(client, query, variables=None):
    response = await client.post("/graphql", json={"query": query, "variables": variables or {}})
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_day_view(client):
    body = await post_query(
        client,
        VIEW_QUERY,
        {
            "id": "123",
            "user": "user-1",
            "input": {"viewMode": "DAY", "filterDate": "2024-03-15"},
        },
    )

    assert "errors" not in body
    view = body["data"]["mealPlanView"]
    assert view["viewMode"] == "DAY"
    assert view["data"]["totalMeals"] == 2
    assert view["statistics"] is None


@pytest.mark.asyncio
async def test_grouped_full_view_with_statistics(client):
    body = await post_query(
        client,
        VIEW_QUERY,
        {
            "id": "123",
            "user": "user-1",
            "input": {"groupByMealType": True, "includeStatistics": True},
        },
    )

    view = body["data"]["mealPlanView"]
    assert set(view["data"]["recipes"]) == {"breakfast", "lunch", "dinner", "snack", "dessert"}
    assert view["data"]["recipeCount"] == 3
    assert view["statistics"] == {
        "totalRecipes": 3,
        "daysWithMeals": 2,
        "mostFrequentMealType": "BREAKFAST",
    }


@pytest.mark.asyncio
async def test_statistics_query(client):
    body = await post_query(
        client,
        '{ mealPlanStatistics(mealPlanId: "123", userId: "user-1") { totalRecipes duration } }',
    )

    assert body["data"]["mealPlanStatistics"] == {"totalRecipes": 3, "duration": 4}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "meal_plan_id,user_id,message",
    [
        ("999", "user-1", "Meal plan with ID 999 not found"),
        ("123", "user-2", "Access denied to meal plan 123 for user user-2"),
    ],
)
async def test_domain_errors_in_error_list(client, meal_plan_id, user_id, message):
    body = await post_query(client, VIEW_QUERY, {"id": meal_plan_id, "user": user_id})

    assert body["data"] is None
    assert body["errors"][0]["message"] == message


@pytest.mark.asyncio
async def test_health_field(client):
    body = await post_query(client, "{ health }")

    assert body["data"] == {"health": "ok"}
