"""Unit tests for ViewProjector."""

import dataclasses
from datetime import date, timedelta

import pytest

from domain.meal_plan.core.value_objects.meal_type import MealType
from domain.meal_plan.core.value_objects.view_params import MealPlanViewParams
from domain.meal_plan.core.views.buckets import MealTypeBuckets
from domain.meal_plan.core.views.models import DayView, FullView, MonthView, WeekView
from domain.meal_plan.services.view_projector import ViewProjector, recipes_between, recipes_on

TODAY = date(2024, 3, 15)


@pytest.fixture
def projector():
    return ViewProjector(today=lambda: TODAY)


class TestHelpers:
    def test_recipes_on(self, sample_recipes):
        assert [r.recipe_id for r in recipes_on(sample_recipes, date(2024, 3, 15))] == [1, 2]

    def test_recipes_between_inclusive(self, sample_recipes):
        selected = recipes_between(sample_recipes, date(2024, 3, 16), date(2024, 3, 18))
        assert [r.recipe_id for r in selected] == [3]


class TestFullView:
    def test_flat_recipes(self, projector, sample_meal_plan):
        view = projector.full_view(sample_meal_plan)
        data = view.to_dict()
        assert view.recipe_count == 3
        assert [r["recipeId"] for r in data["recipes"]] == ["1", "2", "3"]
        assert data["recipeCount"] == 3
        assert data["durationDays"] == 7
        assert data["id"] == "123"
        assert "tags" not in data

    def test_grouped_by_meal_type(self, projector, sample_meal_plan):
        view = projector.full_view(sample_meal_plan, group_by_meal_type=True)
        assert isinstance(view.recipes, MealTypeBuckets)
        data = view.to_dict()
        assert list(data["recipes"]) == ["breakfast", "lunch", "dinner", "snack", "dessert"]
        assert data["recipeCount"] == 3

    def test_without_recipes(self, projector, sample_meal_plan):
        data = projector.full_view(sample_meal_plan, include_recipes=False).to_dict()
        assert "recipes" not in data
        assert "recipeCount" not in data

    def test_no_duration_without_dates(self, projector, sample_meal_plan):
        plan = dataclasses.replace(sample_meal_plan, start_date=None, end_date=None)
        assert "durationDays" not in projector.full_view(plan).to_dict()


class TestDayView:
    def test_buckets_for_date(self, projector, sample_meal_plan):
        view = projector.day_view(sample_meal_plan, date(2024, 3, 15))
        assert view.total_meals == 2
        assert len(view.meals.breakfast) == 1
        assert len(view.meals.lunch) == 1
        assert view.meals.dinner == ()
        assert view.meals.dessert == ()

    def test_total_is_sum_of_buckets(self, projector, sample_meal_plan):
        view = projector.day_view(sample_meal_plan, date(2024, 3, 18))
        assert view.total_meals == sum(len(view.meals.get(mt)) for mt in MealType) == 1

    def test_defaults_to_today(self, projector, sample_meal_plan):
        view = projector.day_view(sample_meal_plan)
        assert view.date == TODAY
        assert view.total_meals == 2

    def test_empty_day(self, projector, sample_meal_plan):
        data = projector.day_view(sample_meal_plan, date(2024, 3, 16)).to_dict()
        assert data["totalMeals"] == 0
        assert data["meals"] == {
            "breakfast": [],
            "lunch": [],
            "dinner": [],
            "snack": [],
            "dessert": [],
        }


class TestWeekView:
    def test_seven_contiguous_days(self, projector, sample_meal_plan):
        view = projector.week_view(sample_meal_plan, date(2024, 3, 11))
        assert len(view.days) == 7
        assert [d.date for d in view.days] == [
            date(2024, 3, 11) + timedelta(days=offset) for offset in range(7)
        ]
        assert view.end_date == date(2024, 3, 17)
        assert view.days[0].day_of_week == "Monday"
        assert view.days[4].day_of_week == "Friday"

    def test_counts_only_days_in_window(self, projector, sample_meal_plan):
        view = projector.week_view(sample_meal_plan, date(2024, 3, 11))
        assert view.days[4].total_meals == 2
        assert view.total_meals == 2
        assert view.week_number == 11

    def test_week_may_start_midweek(self, projector, sample_meal_plan):
        view = projector.week_view(sample_meal_plan, date(2024, 3, 13))
        assert view.end_date == date(2024, 3, 19)
        assert view.days[0].day_of_week == "Wednesday"
        assert view.total_meals == 3

    def test_defaults_to_current_week(self, projector, sample_meal_plan):
        view = projector.week_view(sample_meal_plan)
        assert view.start_date == date(2024, 3, 11)


class TestMonthView:
    def test_march_2024_grid(self, projector, sample_meal_plan):
        view = projector.month_view(sample_meal_plan, 2024, 3)
        assert view.month_name == "March"
        assert len(view.weeks) == 5
        first_week = view.weeks[0]
        assert first_week.start_date == date(2024, 2, 26)
        assert first_week.week_number == 9
        lead_days = first_week.days[:4]
        assert [d.date for d in lead_days] == [
            date(2024, 2, 26),
            date(2024, 2, 27),
            date(2024, 2, 28),
            date(2024, 2, 29),
        ]
        assert all(not d.is_current_month for d in lead_days)
        assert first_week.days[4].is_current_month
        assert first_week.days[4].day_of_month == 1

    def test_cells_count_meals(self, projector, sample_meal_plan):
        view = projector.month_view(sample_meal_plan, 2024, 3)
        cells = {cell.date: cell for week in view.weeks for cell in week.days}
        assert cells[date(2024, 3, 15)].meal_count == 2
        assert cells[date(2024, 3, 15)].meals.breakfast == 1
        assert cells[date(2024, 3, 18)].meals.dinner == 1
        assert view.total_meals == 3

    def test_lead_days_show_zero_even_with_recipes(
        self, projector, sample_meal_plan, recipe_factory
    ):
        february = recipe_factory(9, date(2024, 2, 28), MealType.LUNCH, "Risotto")
        plan = dataclasses.replace(sample_meal_plan, recipes=sample_meal_plan.recipes + [february])
        view = projector.month_view(plan, 2024, 3)
        lead_cell = view.weeks[0].days[2]
        assert lead_cell.date == date(2024, 2, 28)
        assert lead_cell.meal_count == 0
        assert view.total_meals == 3

    def test_defaults_to_current_month(self, projector, sample_meal_plan):
        view = projector.month_view(sample_meal_plan)
        assert (view.year, view.month) == (2024, 3)

    def test_to_dict(self, projector, sample_meal_plan):
        data = projector.month_view(sample_meal_plan, 2024, 3).to_dict()
        assert data["monthName"] == "March"
        assert data["weeks"][0]["days"][0] == {
            "date": "2024-02-26",
            "dayOfMonth": 26,
            "isCurrentMonth": False,
            "mealCount": 0,
            "meals": {"breakfast": 0, "lunch": 0, "dinner": 0, "snack": 0, "dessert": 0},
        }


class TestProject:
    @pytest.mark.parametrize(
        "params,view_type",
        [
            (MealPlanViewParams(), FullView),
            (MealPlanViewParams(view_mode="day", filter_date=TODAY), DayView),
            (MealPlanViewParams(view_mode="week", filter_start_date=TODAY), WeekView),
            (MealPlanViewParams(view_mode="month", filter_year=2024, filter_month=3), MonthView),
        ],
    )
    def test_dispatch_on_view_mode(self, projector, sample_meal_plan, params, view_type):
        assert isinstance(projector.project(sample_meal_plan, params), view_type)

    def test_projection_is_deterministic(self, projector, sample_meal_plan):
        params = MealPlanViewParams(view_mode="month", filter_year=2024, filter_month=3)
        first = projector.project(sample_meal_plan, params).to_dict()
        second = projector.project(sample_meal_plan, params).to_dict()
        assert first == second
