from __future__ import annotations

from typing import Mapping


class InvalidParameterError(Exception):
    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.details = {"parameter": name}


def require_int(params: Mapping[str, str], name: str) -> int:
    raw_value = params.get(name)
    if raw_value is None or not raw_value.strip():
        raise InvalidParameterError(name, f"query parameter '{name}' is required")
    try:
        return int(raw_value.strip())
    except ValueError as exc:
        raise InvalidParameterError(name, f"query parameter '{name}' must be an integer") from exc


def parse_bool(value: str | None) -> bool:
    return value is not None and value.strip().lower() == "true"
