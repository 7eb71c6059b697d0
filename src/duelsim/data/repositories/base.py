"""Base repository implementation for JSON definition data."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, Iterable, TypeVar

from duelsim.data.errors import DataValidationError
from duelsim.data.json_loader import load_json
from duelsim.data import paths

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self) -> dict[str, object]:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        return raw

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._definitions is None:
            raw = self._load_raw()
            self._definitions = self._build(raw)

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        try:
            return self._definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        return [self._definitions[key] for key in sorted(self._definitions.keys())]

    def ids(self) -> list[str]:
        self._ensure_loaded()
        assert self._definitions is not None
        return sorted(self._definitions.keys())

    def __contains__(self, def_id: object) -> bool:
        self._ensure_loaded()
        assert self._definitions is not None
        return def_id in self._definitions

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        # bool is an int subclass; a stray true/false is almost certainly a typo.
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @classmethod
    def _require_non_negative_int(cls, value: object, context: str) -> int:
        number = cls._require_int(value, context)
        if number < 0:
            raise DataValidationError(f"{context} must not be negative.")
        return number

    @classmethod
    def _require_choice(cls, value: object, choices: Iterable[str], context: str) -> str:
        text = cls._require_str(value, context)
        allowed = tuple(choices)
        if text not in allowed:
            raise DataValidationError(f"{context} must be one of {', '.join(allowed)}.")
        return text

    @staticmethod
    def _assert_exact_fields(
        payload: dict[str, object],
        expected_keys: set[str],
        context: str,
        *,
        optional_fields: set[str] | None = None,
    ) -> None:
        actual_keys = set(payload.keys())
        optional = optional_fields or set()
        missing = expected_keys - actual_keys
        unknown = actual_keys - expected_keys - optional
        if missing or unknown:
            msg_parts = []
            if missing:
                msg_parts.append(f"missing fields: {sorted(missing)}")
            if unknown:
                msg_parts.append(f"unknown fields: {sorted(unknown)}")
            raise DataValidationError(f"{context} has schema issues ({'; '.join(msg_parts)}).")
