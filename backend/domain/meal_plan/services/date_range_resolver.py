"""Maps view query parameters to the date window used for fetching."""

from typing import Optional

from domain.meal_plan.core.exceptions.domain_errors import MealPlanValidationError
from domain.meal_plan.core.value_objects.date_range import DateRange
from domain.meal_plan.core.value_objects.view_params import MealPlanViewParams

from .calendar_utils import month_bounds


def resolve_date_range(params: MealPlanViewParams) -> Optional[DateRange]:
    """Resolve the canonical date window of a query.

    Precedence:
        1. filter_date -> that single day
        2. filter_start_date and/or filter_end_date -> range with the
           supplied side(s); open-ended ranges are allowed
        3. filter_year and filter_month -> first..last day of that month
        4. otherwise None (no date scoping)

    Raises:
        MealPlanValidationError: If a year/month window is requested with a
            month outside 1..12 (only the month view validates this up
            front).
    """
    if params.filter_date is not None:
        return DateRange(start=params.filter_date, end=params.filter_date)

    if params.filter_start_date is not None or params.filter_end_date is not None:
        return DateRange(start=params.filter_start_date, end=params.filter_end_date)

    if params.filter_year is not None and params.filter_month is not None:
        if not 1 <= params.filter_month <= 12:
            raise MealPlanValidationError("filterMonth must be between 1 and 12")
        try:
            first, last = month_bounds(params.filter_year, params.filter_month)
        except ValueError as exc:
            raise MealPlanValidationError(f"Invalid filterYear: {params.filter_year}") from exc
        return DateRange(start=first, end=last)

    return None
