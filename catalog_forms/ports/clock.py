from datetime import date
from typing import Protocol


class ClockPort(Protocol):
    def today(self) -> date:
        """Return the current local calendar date."""
        ...
