"""Unit tests for the response envelope."""

from datetime import date

from application.meal_plan.services.response_assembler import assemble_response
from domain.meal_plan.core.entities.meal_plan_tag import MealPlanTag
from domain.meal_plan.core.value_objects.view_params import ViewMode
from domain.meal_plan.core.views.statistics import MealPlanStatisticsRaw, MealTypeCount
from domain.meal_plan.services.statistics_aggregator import StatisticsAggregator
from domain.meal_plan.services.view_projector import ViewProjector


def test_envelope_without_statistics(sample_meal_plan):
    view = ViewProjector().day_view(sample_meal_plan, date(2024, 3, 15))

    payload = assemble_response(ViewMode.DAY, view).to_dict()

    assert payload["success"] is True
    assert payload["viewMode"] == "day"
    assert payload["data"]["totalMeals"] == 2
    assert "statistics" not in payload


def test_envelope_with_statistics(sample_meal_plan):
    view = ViewProjector().full_view(sample_meal_plan)
    statistics = StatisticsAggregator().aggregate(
        MealPlanStatisticsRaw(
            total_recipes=1,
            meal_type_counts=[MealTypeCount("LUNCH", 1)],
            unique_dates=[date(2024, 3, 15)],
        )
    )

    payload = assemble_response(ViewMode.FULL, view, statistics=statistics).to_dict()

    assert payload["statistics"]["totalRecipes"] == 1


def test_tags_merged_into_full_view(sample_meal_plan):
    view = ViewProjector().full_view(sample_meal_plan)
    tags = [MealPlanTag(tag_id=1, name="family")]

    payload = assemble_response(ViewMode.FULL, view, tags=tags).to_dict()

    assert payload["data"]["tags"] == [{"tagId": "1", "name": "family"}]


def test_tags_ignored_for_calendar_views(sample_meal_plan):
    view = ViewProjector().day_view(sample_meal_plan, date(2024, 3, 15))

    payload = assemble_response(ViewMode.DAY, view, tags=[MealPlanTag(1, "family")]).to_dict()

    assert "tags" not in payload["data"]
