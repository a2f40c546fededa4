"""REST API endpoints for meal plan views.

Thin HTTP layer over the CQRS query handlers: reads query parameters and
the requesting user, runs the handler, returns the envelope as JSON.
Domain errors are translated by meal_plan_error_handler (registered in
app.py).
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Path, Query, Request
from fastapi.responses import JSONResponse

from application.meal_plan.queries.get_meal_plan_statistics import (
    GetMealPlanStatisticsQuery,
    GetMealPlanStatisticsQueryHandler,
)
from application.meal_plan.queries.get_meal_plan_view import (
    GetMealPlanViewQuery,
    GetMealPlanViewQueryHandler,
)
from domain.meal_plan.core.exceptions.domain_errors import (
    MealPlanAccessDeniedError,
    MealPlanDomainError,
    MealPlanNotFoundError,
    MealPlanValidationError,
)
from domain.meal_plan.core.value_objects.view_params import MealPlanViewParams
from domain.shared.ports.meal_plan_repository import IMealPlanRepository
from domain.shared.ports.meal_plan_tag_repository import IMealPlanTagRepository
from infrastructure.persistence.factory import (
    get_meal_plan_repository,
    get_meal_plan_tag_repository,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/meal-plans", tags=["meal-plans"])

_STATUS_BY_ERROR = (
    (MealPlanValidationError, 400),
    (MealPlanNotFoundError, 404),
    (MealPlanAccessDeniedError, 403),
)


def status_for(error: MealPlanDomainError) -> int:
    """HTTP status for a domain error; anything unmapped is a 500."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return 500


async def meal_plan_error_handler(request: Request, exc: MealPlanDomainError) -> JSONResponse:
    """Translate MealPlanDomainError into {"success": false, "error": ...}."""
    status_code = status_for(exc)
    if status_code == 500:
        logger.error(
            "Meal plan request failed",
            extra={"path": request.url.path, "error": str(exc)},
        )
        message = "Internal server error"
    else:
        message = str(exc)
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def parse_query_date(name: str, raw: Optional[str]) -> Optional[date]:
    """Parse an ISO date or datetime query parameter to a calendar date.

    Raises:
        MealPlanValidationError: If raw is not ISO 8601
    """
    if raw is None or raw == "":
        return None
    try:
        return datetime.fromisoformat(raw.strip().replace("Z", "+00:00")).date()
    except ValueError:
        raise MealPlanValidationError(f"Invalid {name}: {raw}") from None


def require_user_id(x_user_id: Optional[str] = Header(None, alias="X-User-Id")) -> str:
    """Requesting user, set by the gateway after authentication."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id


@router.get("/{meal_plan_id}")
async def get_meal_plan_view(
    meal_plan_id: str = Path(..., description="Meal plan ID (integer)"),
    view_mode: Optional[str] = Query(None, alias="viewMode"),
    filter_date: Optional[str] = Query(None, alias="filterDate"),
    filter_start_date: Optional[str] = Query(None, alias="filterStartDate"),
    filter_end_date: Optional[str] = Query(None, alias="filterEndDate"),
    filter_year: Optional[int] = Query(None, alias="filterYear"),
    filter_month: Optional[int] = Query(None, alias="filterMonth"),
    meal_type: Optional[str] = Query(None, alias="mealType"),
    group_by_meal_type: bool = Query(False, alias="groupByMealType"),
    include_recipes: bool = Query(True, alias="includeRecipes"),
    include_statistics: bool = Query(False, alias="includeStatistics"),
    user_id: str = Depends(require_user_id),
    repository: IMealPlanRepository = Depends(get_meal_plan_repository),
    tag_repository: IMealPlanTagRepository = Depends(get_meal_plan_tag_repository),
) -> Dict[str, Any]:
    """Get a meal plan projected into a full, day, week or month view.

    Example:
        ```bash
        curl -H "X-User-Id: user-1" \\
          "http://localhost:8080/meal-plans/123?viewMode=day&filterDate=2024-03-15"
        ```

        Response:
        ```json
        {
          "success": true,
          "viewMode": "day",
          "data": {"mealPlanId": "123", "date": "2024-03-15", "totalMeals": 2, ...}
        }
        ```
    """
    params = MealPlanViewParams(
        view_mode=view_mode,
        filter_date=parse_query_date("filterDate", filter_date),
        filter_start_date=parse_query_date("filterStartDate", filter_start_date),
        filter_end_date=parse_query_date("filterEndDate", filter_end_date),
        filter_year=filter_year,
        filter_month=filter_month,
        meal_type=meal_type or None,
        group_by_meal_type=group_by_meal_type,
        include_recipes=include_recipes,
        include_statistics=include_statistics,
    )

    handler = GetMealPlanViewQueryHandler(repository, tag_repository)
    envelope = await handler.handle(
        GetMealPlanViewQuery(meal_plan_id=meal_plan_id, user_id=user_id, params=params)
    )
    return envelope.to_dict()


@router.get("/{meal_plan_id}/statistics")
async def get_meal_plan_statistics(
    meal_plan_id: str = Path(..., description="Meal plan ID (integer)"),
    user_id: str = Depends(require_user_id),
    repository: IMealPlanRepository = Depends(get_meal_plan_repository),
) -> Dict[str, Any]:
    """Get the statistics block of a meal plan without projecting a view."""
    handler = GetMealPlanStatisticsQueryHandler(repository)
    statistics = await handler.handle(
        GetMealPlanStatisticsQuery(meal_plan_id=meal_plan_id, user_id=user_id)
    )
    return {"success": True, "data": statistics.to_dict()}
