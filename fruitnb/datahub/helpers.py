from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

import numpy as np


def ensure_mapping(row: Any) -> Mapping[str, Any]:
    """Guarantee JSON entries behave like mappings."""
    if isinstance(row, Mapping):
        return row
    raise TypeError(f"Unexpected entry type: {type(row)}")


def to_optional_float(value: Any) -> Optional[float]:
    """Convert a CSV cell to float, mapping blanks and NaN to None."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Cannot convert {value!r} to float") from exc
    if np.isnan(number):
        return None
    return number


def to_int_band(value: Any, size: int, *, name: str) -> Sequence[int]:
    """Read a threshold band such as ``[h1, h2]``, padding missing bounds with zero."""
    if value is None:
        return [0] * size
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{name} must be a list of at most {size} integers, got {value!r}")
    if len(value) > size:
        raise ValueError(f"{name} accepts at most {size} bounds, got {len(value)}")
    try:
        band = [int(item) for item in value]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} bounds must be integers, got {value!r}") from exc
    return band + [0] * (size - len(band))
