"""MealType value object.

Fixed enumeration of the meal slots a recipe can be assigned to.
"""

from enum import Enum
from typing import Union

from domain.meal_plan.core.exceptions.domain_errors import InvalidMealTypeError


class MealType(str, Enum):
    """Meal slot of a recipe assignment.

    Declaration order is the canonical sort order (breakfast first,
    dessert last) and is used wherever assignments are ordered by type.

    Examples:
        >>> MealType.parse("lunch")
        <MealType.LUNCH: 'LUNCH'>
        >>> MealType.DINNER.key
        'dinner'
    """

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"
    DESSERT = "DESSERT"

    @property
    def key(self) -> str:
        """Lower-case key used in bucket records and JSON payloads."""
        return self.value.lower()

    @property
    def sort_index(self) -> int:
        """Position in declaration order."""
        return list(MealType).index(self)

    @classmethod
    def parse(cls, value: Union[str, "MealType"]) -> "MealType":
        """Create MealType from a case-insensitive string.

        Args:
            value: Meal type name (e.g. "breakfast", "BREAKFAST") or MealType.

        Returns:
            MealType instance.

        Raises:
            InvalidMealTypeError: If value is not a known meal type.
        """
        if isinstance(value, MealType):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise InvalidMealTypeError(
                f"Invalid mealType: {value}. Expected one of: {allowed}"
            ) from None
