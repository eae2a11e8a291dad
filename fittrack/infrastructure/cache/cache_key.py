"""
Deterministic cache keys for catalog reads.

A key is the operation name plus a canonical JSON rendering of the request
parameters, so logically identical requests share one cache slot no matter
how the caller built them.
"""

from __future__ import annotations

import json
import math
import re
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from fittrack.domain.shared.errors import CacheKeyError

_INT_RE = re.compile(r"^[+-]?\d+$")
_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")


def _canonical_number(value: Any) -> str:
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise CacheKeyError(f"Non-finite number in cache key: {value!r}")
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _canonical_numeric_text(text: str) -> str:
    try:
        if _INT_RE.match(text):
            return str(int(text))
        return _canonical_number(float(text))
    except (OverflowError, ValueError) as e:
        raise CacheKeyError(f"Number not usable in cache key: {text[:40]}") from e


def canonicalize(value: Any) -> Any:
    """Normalise a parameter value into a JSON-serialisable canonical form.

    Rules:
        - ``None`` entries are dropped from mappings (absent == unset)
        - Pydantic models are dumped without unset/None fields
        - Enums are replaced by their value
        - Numbers and number-looking strings become the same text,
          so ``10``, ``10.0`` and ``"10"`` are one key
        - Other strings are stripped of surrounding whitespace
        - Sets are sorted; lists and tuples keep their order

    Raises:
        CacheKeyError: For values with no canonical form (objects, bytes, ...)
    """
    if isinstance(value, BaseModel):
        return canonicalize(value.model_dump(exclude_none=True))
    if isinstance(value, Enum):
        return canonicalize(value.value)
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return _canonical_number(value)
    if isinstance(value, str):
        text = value.strip()
        if _NUMBER_RE.match(text):
            return _canonical_numeric_text(text)
        return text
    if isinstance(value, Mapping):
        return {
            str(k): canonicalize(v) for k, v in value.items() if v is not None
        }
    if isinstance(value, (list, tuple)):
        return [canonicalize(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted((canonicalize(v) for v in value), key=lambda v: json.dumps(v))
    raise CacheKeyError(f"Unsupported cache key parameter type: {type(value).__name__}")


def build_key(operation: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Build the cache key for an operation call.

    Args:
        operation: Logical operation name (e.g. ``"search"``)
        params: Request parameters; order and representation do not matter

    Returns:
        ``"<operation>"`` when there are no parameters, otherwise
        ``"<operation>:<canonical json>"``

    Raises:
        CacheKeyError: If operation is empty or params are not serialisable

    Example:
        >>> build_key("exercises", {"offset": 0, "limit": 100})
        'exercises:{"limit":"100","offset":"0"}'
        >>> build_key("categories")
        'categories'
    """
    if not isinstance(operation, str) or not operation.strip():
        raise CacheKeyError("Cache key operation must be a non-empty string")

    canonical = canonicalize(dict(params)) if params else {}
    if not canonical:
        return operation

    try:
        rendered = json.dumps(
            canonical, sort_keys=True, separators=(",", ":"), ensure_ascii=False
        )
    except (TypeError, ValueError) as e:
        raise CacheKeyError(f"Cache key parameters not serialisable: {e}") from e
    return f"{operation}:{rendered}"
