from datetime import date


class SystemClock:
    def today(self) -> date:
        return date.today()


class FrozenClock:
    """Clock that always returns the same date. Useful for tests."""

    def __init__(self, frozen: date) -> None:
        self._frozen = frozen

    def today(self) -> date:
        return self._frozen
