"""Custom exceptions."""


class FeiertageError(Exception):
    """Base exception for feiertage."""


class InvalidArgumentError(FeiertageError, ValueError):
    """Raised when a caller passes a value outside a closed set or range."""


class UnknownRegionError(InvalidArgumentError):
    """Raised when a region code is not known."""


class UnknownHolidayTypeError(InvalidArgumentError):
    """Raised when a holiday type code is not known."""


class InvalidYearError(InvalidArgumentError):
    """Raised when a year is outside the supported Gregorian range."""


class InvalidLanguageError(InvalidArgumentError):
    """Raised when a language code is empty."""


class ConfigNotFoundError(FeiertageError):
    """Raised when configuration is not found."""
