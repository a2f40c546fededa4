"""Fixed per-meal-type records.

One field per MealType member. Grouping through these records cannot lose
an assignment to an unexpected key: every MealPlanRecipe carries a parsed
MealType, and every MealType has a field.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from domain.meal_plan.core.entities.meal_plan_recipe import MealPlanRecipe
from domain.meal_plan.core.exceptions.domain_errors import InvalidMealTypeError
from domain.meal_plan.core.value_objects.meal_type import MealType


@dataclass(frozen=True)
class MealTypeBuckets:
    """Assignments of one day (or one plan) partitioned by meal type."""

    breakfast: Tuple[MealPlanRecipe, ...] = ()
    lunch: Tuple[MealPlanRecipe, ...] = ()
    dinner: Tuple[MealPlanRecipe, ...] = ()
    snack: Tuple[MealPlanRecipe, ...] = ()
    dessert: Tuple[MealPlanRecipe, ...] = ()

    @classmethod
    def from_recipes(cls, recipes: Iterable[MealPlanRecipe]) -> "MealTypeBuckets":
        """Partition recipes by meal type, preserving input order."""
        grouped: Dict[MealType, List[MealPlanRecipe]] = {mt: [] for mt in MealType}
        for recipe in recipes:
            grouped[recipe.meal_type].append(recipe)
        return cls(**{mt.key: tuple(items) for mt, items in grouped.items()})

    def get(self, meal_type: MealType) -> Tuple[MealPlanRecipe, ...]:
        return getattr(self, meal_type.key)

    @property
    def total(self) -> int:
        return sum(len(self.get(mt)) for mt in MealType)

    def to_dict(self) -> Dict[str, Any]:
        return {mt.key: [r.to_dict() for r in self.get(mt)] for mt in MealType}


@dataclass(frozen=True)
class MealTypeCounts:
    """Number of assignments per meal type."""

    breakfast: int = 0
    lunch: int = 0
    dinner: int = 0
    snack: int = 0
    dessert: int = 0

    @classmethod
    def from_recipes(cls, recipes: Iterable[MealPlanRecipe]) -> "MealTypeCounts":
        counter = Counter(recipe.meal_type for recipe in recipes)
        return cls(**{mt.key: counter.get(mt, 0) for mt in MealType})

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[Tuple[Union[str, MealType], int]]
    ) -> "MealTypeCounts":
        """Build from raw (meal_type, count) rows.

        Rows with an unrecognised meal type are skipped; repeated rows for
        the same type are summed.
        """
        totals: Dict[MealType, int] = {mt: 0 for mt in MealType}
        for raw_type, count in pairs:
            try:
                meal_type = MealType.parse(raw_type)
            except InvalidMealTypeError:
                continue
            totals[meal_type] += int(count)
        return cls(**{mt.key: totals[mt] for mt in MealType})

    def get(self, meal_type: MealType) -> int:
        return getattr(self, meal_type.key)

    @property
    def total(self) -> int:
        return sum(self.get(mt) for mt in MealType)

    @property
    def non_zero_types(self) -> List[MealType]:
        return [mt for mt in MealType if self.get(mt) > 0]

    @property
    def most_frequent(self) -> Optional[MealType]:
        """Meal type with the highest count; ties go to declaration order."""
        best: Optional[MealType] = None
        for meal_type in MealType:
            count = self.get(meal_type)
            if count > 0 and (best is None or count > self.get(best)):
                best = meal_type
        return best

    def to_dict(self) -> Dict[str, int]:
        return {mt.key: self.get(mt) for mt in MealType}
