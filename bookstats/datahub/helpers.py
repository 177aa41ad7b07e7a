from __future__ import annotations

import math
from typing import Any, Mapping


def ensure_mapping(row: Any) -> Mapping[str, Any]:
    """Guarantee catalog rows behave like mappings."""
    if isinstance(row, Mapping):
        return row
    raise TypeError(f"Unexpected row type: {type(row)}")


def is_missing(value: Any) -> bool:
    """True for None, NaN and blank strings."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def to_text(value: Any) -> str:
    """Strip strings and stringify scalars such as numeric language codes."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def to_float(value: Any) -> float:
    """Robustly convert CSV fields to floats."""
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to float")
    try:
        result = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Cannot convert {value!r} to float") from exc
    if not math.isfinite(result):
        raise ValueError(f"Non-finite value {value!r}")
    return result


def to_int(value: Any) -> int:
    """Robustly convert CSV fields to ints, accepting integral floats like ``352.0``."""
    if value is None:
        raise ValueError("Expected integer-like value, received None")
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Cannot convert {value!r} to int")
        return int(value)
    try:
        return int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Cannot convert {value!r} to int") from exc


__all__ = ["ensure_mapping", "is_missing", "to_float", "to_int", "to_text"]
