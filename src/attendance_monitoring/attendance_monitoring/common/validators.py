from __future__ import annotations

from typing import Any

from ..core.exceptions import InvalidInputError


def require_present(value: Any, field_name: str) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidInputError(f"{field_name} is required")
    return value


def require_non_empty_list(value: Any, field_name: str) -> list:
    require_present(value, field_name)
    if not isinstance(value, list):
        raise InvalidInputError(f"{field_name} must be a list")
    if not value:
        raise InvalidInputError(f"{field_name} must not be empty")
    return value
