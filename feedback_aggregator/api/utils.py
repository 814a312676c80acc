"""
Query-parameter parsing helpers.

Functions
---------
parse_non_negative_int(raw, default) -> int
    Lenient integer parsing: anything malformed or negative becomes `default`.
optional_enum(enum_cls, raw) -> Enum | None
    Map a raw filter value onto a closed enumeration; `ValueError` if it
    names no member.
"""

from enum import Enum
from typing import Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


def parse_non_negative_int(raw: Optional[str], default: int) -> int:
    """
    Parse a query-string integer without ever rejecting the request.

    Parameters
    ----------
    raw : str | None
        Raw parameter value.
    default : int
        Value used when `raw` is missing, malformed or negative.

    Returns
    -------
    int
    """
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= 0 else default


def optional_enum(enum_cls: Type[E], raw: Optional[str]) -> Optional[E]:
    """
    Return the `enum_cls` member whose value is `raw`, or None when `raw` is empty.

    Raises
    ------
    ValueError
        If `raw` is non-empty and names no member.
    """
    if raw is None or raw == "":
        return None
    return enum_cls(raw)
