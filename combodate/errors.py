"""
Combodate - Exceptions Module.

Classes:
    CombodateError: Base class for all Combodate errors.
    InvalidMonthError: A month number outside 1-12 was supplied.
    ClockUnavailableError: The system clock could not be read.
"""


class CombodateError(Exception):
    """Base class for all Combodate errors."""


class InvalidMonthError(CombodateError, ValueError):
    """
    Raised when a month number is outside the range 1-12.

    Real timestamps always carry a valid month, so this indicates a
    logic defect rather than a runtime condition.

    Attributes:
        month: The invalid month number that was supplied.
    """

    def __init__(self, month: int):
        self.month = month
        super().__init__(f"Month must be between 1 and 12, got {month}")


class ClockUnavailableError(CombodateError, RuntimeError):
    """Raised when the operating system cannot provide the current time."""
