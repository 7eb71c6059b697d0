"""Exceptions raised while loading the equipment and character catalogue."""


class DataError(Exception):
    """Base exception for catalogue loading."""


class DataLoadError(DataError):
    """Raised when a catalogue file is missing or is not valid JSON."""


class DataValidationError(DataError):
    """Raised when a catalogue entry has the wrong shape or out-of-range values."""


class DataReferenceError(DataError):
    """Raised when a character references equipment that is not in the catalogue."""
