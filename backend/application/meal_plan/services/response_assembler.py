"""Response assembler - wraps a projected view in the response envelope."""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from domain.meal_plan.core.entities.meal_plan_tag import MealPlanTag
from domain.meal_plan.core.value_objects.view_params import ViewMode
from domain.meal_plan.core.views.models import FullView, MealPlanView
from domain.meal_plan.core.views.statistics import MealPlanStatistics


@dataclass(frozen=True)
class MealPlanViewEnvelope:
    """Envelope returned for every meal plan view request.

    Attributes:
        view_mode: View that was projected
        data: Projected view
        statistics: Statistics block, only when requested
        success: Always True; failures are raised, never enveloped
    """

    view_mode: ViewMode
    data: MealPlanView
    statistics: Optional[MealPlanStatistics] = None
    success: bool = True

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "success": self.success,
            "viewMode": self.view_mode.value,
            "data": self.data.to_dict(),
        }
        if self.statistics is not None:
            payload["statistics"] = self.statistics.to_dict()
        return payload


def assemble_response(
    view_mode: ViewMode,
    view: MealPlanView,
    statistics: Optional[MealPlanStatistics] = None,
    tags: Optional[Sequence[MealPlanTag]] = None,
) -> MealPlanViewEnvelope:
    """Build the envelope; tags are merged into full views only."""
    if tags is not None and isinstance(view, FullView):
        view = dataclasses.replace(view, tags=tuple(tags))
    return MealPlanViewEnvelope(view_mode=view_mode, data=view, statistics=statistics)
