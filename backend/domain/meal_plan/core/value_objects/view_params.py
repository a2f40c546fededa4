"""View query parameters.

ViewMode selects the projection; MealPlanViewParams carries every optional
filter a caller can send with a meal plan view request.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from domain.meal_plan.core.exceptions.domain_errors import MealPlanValidationError
from domain.meal_plan.core.value_objects.meal_type import MealType


class ViewMode(str, Enum):
    """Shape of the projected meal plan view."""

    FULL = "full"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"

    @classmethod
    def parse(cls, value: Union[str, "ViewMode", None]) -> "ViewMode":
        """Parse a case-insensitive view mode; None means FULL.

        Raises:
            MealPlanValidationError: If value is not a known view mode.
        """
        if value is None:
            return cls.FULL
        if isinstance(value, ViewMode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise MealPlanValidationError(f"Invalid viewMode: {value}") from None


def _as_date(value: Optional[date]) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class MealPlanViewParams:
    """Query parameters for a meal plan view.

    Attributes:
        view_mode: full | day | week | month (default full)
        filter_date: Day shown by the day view; exact-day filter otherwise
        filter_start_date: Week start for the week view; range start otherwise
        filter_end_date: Range end (inclusive)
        filter_year: Year shown by the month view
        filter_month: Month (1-12) shown by the month view
        meal_type: Restrict assignments to one meal type
        group_by_meal_type: Full view returns buckets instead of a flat list
        include_recipes: Load assignments at all (default True)
        include_statistics: Attach the statistics block to the response
    """

    view_mode: ViewMode = ViewMode.FULL
    filter_date: Optional[date] = None
    filter_start_date: Optional[date] = None
    filter_end_date: Optional[date] = None
    filter_year: Optional[int] = None
    filter_month: Optional[int] = None
    meal_type: Optional[MealType] = None
    group_by_meal_type: bool = False
    include_recipes: bool = True
    include_statistics: bool = False

    def __post_init__(self) -> None:
        """Coerce loosely typed inputs (strings, datetimes) to domain types."""
        object.__setattr__(self, "view_mode", ViewMode.parse(self.view_mode))
        if self.meal_type is not None:
            object.__setattr__(self, "meal_type", MealType.parse(self.meal_type))
        for name in ("filter_date", "filter_start_date", "filter_end_date"):
            object.__setattr__(self, name, _as_date(getattr(self, name)))
