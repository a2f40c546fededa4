"""Derived (non persisted) meal plan views and statistics."""

from .buckets import MealTypeBuckets, MealTypeCounts
from .models import (
    DayView,
    FullView,
    MealPlanView,
    MonthDay,
    MonthView,
    MonthWeek,
    WeekDay,
    WeekView,
)
from .statistics import MealPlanStatistics, MealPlanStatisticsRaw, MealTypeCount

__all__ = [
    "DayView",
    "FullView",
    "MealPlanStatistics",
    "MealPlanStatisticsRaw",
    "MealPlanView",
    "MealTypeBuckets",
    "MealTypeCount",
    "MealTypeCounts",
    "MonthDay",
    "MonthView",
    "MonthWeek",
    "WeekDay",
    "WeekView",
]
