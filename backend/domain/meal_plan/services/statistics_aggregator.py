"""Statistics aggregator - derived counts for a meal plan.

Turns the raw aggregates read from storage (total, per-type counts,
distinct dates) into the statistics block returned with a view.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

from domain.meal_plan.core.views.buckets import MealTypeCounts
from domain.meal_plan.core.views.statistics import MealPlanStatistics, MealPlanStatisticsRaw

from .calendar_utils import inclusive_day_span

_TWO_PLACES = Decimal("0.01")


def round_half_up(value: Decimal) -> float:
    return float(value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


class StatisticsAggregator:
    """Computes MealPlanStatistics from MealPlanStatisticsRaw.

    Date bounds come from the first and last assignment date, not from the
    plan's declared start_date/end_date. An empty plan gets zeroed counts,
    duration 1 and both bounds set to today.
    """

    def __init__(self, today: Callable[[], date] = date.today):
        self._today = today

    def aggregate(self, raw: MealPlanStatisticsRaw) -> MealPlanStatistics:
        """
        Compute statistics.

        Args:
            raw: Aggregates read from the repository

        Returns:
            MealPlanStatistics

        Example:
            3 assignments on 2024-03-15 (x2) and 2024-03-18 give
            average_recipes_per_day=1.5 and duration=4.
        """
        if raw.total_recipes == 0:
            today = self._today()
            return MealPlanStatistics(
                total_recipes=0,
                days_with_meals=0,
                average_recipes_per_day=0.0,
                total_meal_types=0,
                meal_type_breakdown=MealTypeCounts(),
                most_frequent_meal_type=None,
                start_date=today,
                end_date=today,
                duration=1,
            )

        breakdown = MealTypeCounts.from_pairs(
            (row.meal_type, row.count) for row in raw.meal_type_counts
        )
        unique_dates = sorted(raw.unique_dates)
        days_with_meals = len(unique_dates)

        if days_with_meals:
            average = round_half_up(Decimal(raw.total_recipes) / Decimal(days_with_meals))
            start_date, end_date = unique_dates[0], unique_dates[-1]
        else:
            # counts without dates: inconsistent snapshot between the two reads
            average = 0.0
            start_date = end_date = self._today()

        return MealPlanStatistics(
            total_recipes=raw.total_recipes,
            days_with_meals=days_with_meals,
            average_recipes_per_day=average,
            total_meal_types=len(breakdown.non_zero_types),
            meal_type_breakdown=breakdown,
            most_frequent_meal_type=breakdown.most_frequent,
            start_date=start_date,
            end_date=end_date,
            duration=inclusive_day_span(start_date, end_date),
        )
