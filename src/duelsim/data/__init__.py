"""Data layer utilities for loading the JSON equipment catalogue."""

from .errors import DataError, DataLoadError, DataReferenceError, DataValidationError
from .paths import get_definitions_path, get_repo_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataReferenceError",
    "DataValidationError",
    "get_definitions_path",
    "get_repo_root",
]
