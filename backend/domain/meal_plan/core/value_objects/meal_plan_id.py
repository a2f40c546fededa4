"""MealPlanId value object.

Meal plans are identified by 64-bit integers. Identifiers arrive from the
delivery layer as decimal strings and are parsed here.
"""

import re
from dataclasses import dataclass

from domain.meal_plan.core.exceptions.domain_errors import MealPlanNotFoundError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_DECIMAL_ID = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class MealPlanId:
    """Value object for Meal Plan ID.

    Examples:
        >>> MealPlanId.parse("123")
        MealPlanId(123)
        >>> str(MealPlanId(123))
        '123'
    """

    value: int

    @classmethod
    def parse(cls, raw: str) -> "MealPlanId":
        """Parse a decimal string into a MealPlanId.

        A string that is not an integer, or that does not fit in a signed
        64-bit integer, is reported as a missing meal plan rather than as a
        validation failure.

        Args:
            raw: ASCII decimal digits with an optional sign (surrounding
                whitespace is ignored).

        Returns:
            MealPlanId instance.

        Raises:
            MealPlanNotFoundError: If raw cannot be parsed.
        """
        text = str(raw).strip()
        if not _DECIMAL_ID.fullmatch(text):
            raise MealPlanNotFoundError(f"Invalid meal plan ID: {raw}")
        value = int(text)

        if not INT64_MIN <= value <= INT64_MAX:
            raise MealPlanNotFoundError(f"Invalid meal plan ID: {raw}")

        return cls(value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"MealPlanId({self.value})"
