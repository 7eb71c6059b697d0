"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a character cannot be built from the catalogue."""


class ConfigurationError(Exception):
    """Raised when fighters or simulation settings cannot produce a valid battle."""
