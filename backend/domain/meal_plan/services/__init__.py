"""Domain services for meal plan views (pure, no I/O)."""

from .date_range_resolver import resolve_date_range
from .query_validation import validate_view_params
from .statistics_aggregator import StatisticsAggregator
from .view_projector import ViewProjector

__all__ = [
    "StatisticsAggregator",
    "ViewProjector",
    "resolve_date_range",
    "validate_view_params",
]
