"""View projector - builds full/day/week/month views from a meal plan.

Every variant is a pure transform of a MealPlan (with its assignments
already loaded) and the query parameters. The only ambient input is the
clock, used when a view is requested without its date filter.
"""

from datetime import date, timedelta
from typing import Callable, List, Optional, Sequence, Tuple

from domain.meal_plan.core.entities.meal_plan import MealPlan
from domain.meal_plan.core.entities.meal_plan_recipe import MealPlanRecipe
from domain.meal_plan.core.value_objects.view_params import MealPlanViewParams, ViewMode
from domain.meal_plan.core.views.buckets import MealTypeBuckets, MealTypeCounts
from domain.meal_plan.core.views.models import (
    DayView,
    FullView,
    MealPlanView,
    MonthDay,
    MonthView,
    MonthWeek,
    WeekDay,
    WeekView,
)

from .calendar_utils import (
    day_name,
    days_from,
    iso_week_number,
    month_bounds,
    month_grid,
    month_name,
    same_day,
    week_start,
)


def recipes_on(recipes: Sequence[MealPlanRecipe], day: date) -> List[MealPlanRecipe]:
    """Assignments whose meal_date falls on day."""
    return [recipe for recipe in recipes if same_day(recipe.meal_date, day)]


def recipes_between(
    recipes: Sequence[MealPlanRecipe], start: date, end: date
) -> List[MealPlanRecipe]:
    """Assignments dated start..end inclusive."""
    return [recipe for recipe in recipes if start <= recipe.meal_date <= end]


class ViewProjector:
    """Projects a meal plan into the view selected by view_mode.

    Example:
        >>> projector = ViewProjector()
        >>> params = MealPlanViewParams(view_mode="day", filter_date=date(2024, 3, 15))
        >>> view = projector.project(meal_plan, params)
        >>> view.total_meals
        2
    """

    def __init__(self, today: Callable[[], date] = date.today):
        """
        Initialize projector.

        Args:
            today: Clock returning the current date; used as fallback when
                a calendar view is built without its date filter.
        """
        self._today = today

    def project(self, meal_plan: MealPlan, params: MealPlanViewParams) -> MealPlanView:
        """Build the view requested by params.view_mode.

        Args:
            meal_plan: Plan with its (already filtered) recipes
            params: View query parameters

        Returns:
            FullView, DayView, WeekView or MonthView
        """
        if params.view_mode is ViewMode.DAY:
            return self.day_view(meal_plan, params.filter_date)
        if params.view_mode is ViewMode.WEEK:
            return self.week_view(meal_plan, params.filter_start_date)
        if params.view_mode is ViewMode.MONTH:
            return self.month_view(meal_plan, params.filter_year, params.filter_month)
        return self.full_view(
            meal_plan,
            include_recipes=params.include_recipes,
            group_by_meal_type=params.group_by_meal_type,
        )

    def full_view(
        self,
        meal_plan: MealPlan,
        include_recipes: bool = True,
        group_by_meal_type: bool = False,
    ) -> FullView:
        if not include_recipes:
            return FullView(meal_plan=meal_plan)
        if group_by_meal_type:
            return FullView(
                meal_plan=meal_plan,
                recipes=MealTypeBuckets.from_recipes(meal_plan.recipes),
            )
        return FullView(meal_plan=meal_plan, recipes=tuple(meal_plan.recipes))

    def day_view(self, meal_plan: MealPlan, target: Optional[date] = None) -> DayView:
        target = target if target is not None else self._today()
        day_recipes = recipes_on(meal_plan.recipes, target)
        meals = MealTypeBuckets.from_recipes(day_recipes)
        return DayView(
            meal_plan_id=meal_plan.id,
            meal_plan_name=meal_plan.name,
            date=target,
            meals=meals,
            total_meals=meals.total,
        )

    def week_view(self, meal_plan: MealPlan, start: Optional[date] = None) -> WeekView:
        start = start if start is not None else week_start(self._today())
        end = start + timedelta(days=6)
        week_recipes = recipes_between(meal_plan.recipes, start, end)

        days: List[WeekDay] = []
        for day in days_from(start, 7):
            meals = MealTypeBuckets.from_recipes(recipes_on(week_recipes, day))
            days.append(
                WeekDay(
                    date=day,
                    day_of_week=day_name(day),
                    meals=meals,
                    total_meals=meals.total,
                )
            )

        return WeekView(
            meal_plan_id=meal_plan.id,
            meal_plan_name=meal_plan.name,
            start_date=start,
            end_date=end,
            week_number=iso_week_number(start),
            days=tuple(days),
            total_meals=sum(day.total_meals for day in days),
        )

    def month_view(
        self,
        meal_plan: MealPlan,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> MonthView:
        today = self._today()
        year = year if year is not None else today.year
        month = month if month is not None else today.month

        month_start, month_end = month_bounds(year, month)
        month_recipes = recipes_between(meal_plan.recipes, month_start, month_end)

        return MonthView(
            meal_plan_id=meal_plan.id,
            meal_plan_name=meal_plan.name,
            year=year,
            month=month,
            month_name=month_name(month),
            weeks=self._build_month_weeks(year, month, month_recipes),
            total_meals=len(month_recipes),
        )

    def _build_month_weeks(
        self, year: int, month: int, month_recipes: Sequence[MealPlanRecipe]
    ) -> Tuple[MonthWeek, ...]:
        """Grid of weeks; only month_recipes are counted, so lead/trail days show zero."""
        weeks: List[MonthWeek] = []
        for week_days in month_grid(year, month):
            cells = []
            for day in week_days:
                day_recipes = recipes_on(month_recipes, day)
                cells.append(
                    MonthDay(
                        date=day,
                        day_of_month=day.day,
                        is_current_month=(day.year == year and day.month == month),
                        meal_count=len(day_recipes),
                        meals=MealTypeCounts.from_recipes(day_recipes),
                    )
                )
            weeks.append(
                MonthWeek(
                    week_number=iso_week_number(week_days[0]),
                    start_date=week_days[0],
                    end_date=week_days[-1],
                    days=tuple(cells),
                )
            )
        return tuple(weeks)
