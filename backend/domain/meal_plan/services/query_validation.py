"""Validation of view-mode specific query parameters.

Pure gate run before any storage access. Each rule raises
MealPlanValidationError with a message naming the offending field.
"""

from datetime import timedelta

from domain.meal_plan.core.exceptions.domain_errors import MealPlanValidationError
from domain.meal_plan.core.value_objects.view_params import MealPlanViewParams, ViewMode

MIN_FILTER_YEAR = 2020
MAX_FILTER_YEAR = 2100
MAX_FILTER_RANGE = timedelta(days=365)


def validate_view_params(params: MealPlanViewParams) -> None:
    """Check that params hold what the requested view mode needs.

    Rules:
        - day view requires filter_date
        - week view requires filter_start_date
        - month view requires filter_year and filter_month, with the month
          in 1..12 and the year in 2020..2100
        - when both filter_start_date and filter_end_date are given (any
          view mode) start <= end and the span is at most 365 days

    Raises:
        MealPlanValidationError: On the first violated rule.
    """
    view_mode = params.view_mode

    if view_mode is ViewMode.DAY and params.filter_date is None:
        raise MealPlanValidationError("filterDate is required for day view mode")

    if view_mode is ViewMode.WEEK and params.filter_start_date is None:
        raise MealPlanValidationError("filterStartDate is required for week view mode")

    if view_mode is ViewMode.MONTH:
        if params.filter_year is None or params.filter_month is None:
            raise MealPlanValidationError(
                "filterYear and filterMonth are required for month view mode"
            )
        if not 1 <= params.filter_month <= 12:
            raise MealPlanValidationError("filterMonth must be between 1 and 12")
        if not MIN_FILTER_YEAR <= params.filter_year <= MAX_FILTER_YEAR:
            raise MealPlanValidationError(
                f"filterYear must be between {MIN_FILTER_YEAR} and {MAX_FILTER_YEAR}"
            )

    if params.filter_start_date is not None and params.filter_end_date is not None:
        if params.filter_start_date > params.filter_end_date:
            raise MealPlanValidationError("Start date must be before or equal to end date")
        if params.filter_end_date - params.filter_start_date > MAX_FILTER_RANGE:
            raise MealPlanValidationError("Date range cannot exceed one year")
