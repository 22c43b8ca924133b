# lemonstand/exceptions.py


class LemonStandError(Exception):
    """Base class for simulation errors."""


class InsufficientFunds(LemonStandError):
    """A day's purchase order costs more than the stand's cash."""

    def __init__(self, day: int, required: float, available: float):
        self.day = day
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient cash for purchases on day {day}. "
            f"Need ${required:.2f}, have ${available:.2f}"
        )
