from typing import Any, Dict, Optional

from portfolio_api.errors import ValidationError


def require_json_object(data: Any) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def required_str(data: Dict[str, Any], field: str) -> str:
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"'{field}' is required")
    return value


def optional_str(data: Dict[str, Any], field: str) -> Optional[str]:
    value = data.get(field)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"'{field}' must be a string")
    return value


def optional_int(data: Dict[str, Any], field: str) -> Optional[int]:
    value = data.get(field)
    # bool is an int subclass; reject it explicitly
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValidationError(f"'{field}' must be an integer")
    return value


def merge_fields(entity, data: Dict[str, Any], field_map: Dict[str, str], int_fields=()) -> list:
    """
    Replace-if-present merge.

    ``field_map`` maps payload keys to model attributes. A key overwrites the
    stored value only when it is present, non-null and, for strings, non-blank.
    Returns the attribute names that actually changed.
    """
    changed_fields = []

    for key, attr in field_map.items():
        if key in int_fields:
            value = optional_int(data, key)
        else:
            value = optional_str(data, key)

        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue

        if getattr(entity, attr) != value:
            setattr(entity, attr, value)
            changed_fields.append(attr)

    return changed_fields
