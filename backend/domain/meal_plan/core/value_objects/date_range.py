"""DateRange value object.

Inclusive calendar window; either side may be open.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar dates.

    Attributes:
        start: First date in range, or None for no lower bound.
        end: Last date in range, or None for no upper bound.
    """

    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def is_single_day(self) -> bool:
        """True when both bounds are set to the same date."""
        return self.start is not None and self.start == self.end

    def contains(self, day: date) -> bool:
        """Check whether day falls inside the range (bounds inclusive)."""
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True
