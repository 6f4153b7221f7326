"""Domain-specific exceptions for the expense calculator."""


class UnknownMonthError(ValueError):
    """Raised when a month name is not one of the twelve calendar months."""


class UnknownThemeError(ValueError):
    """Raised when a theme name has no palette."""
