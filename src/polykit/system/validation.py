# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Generic validator functions module"""

from __future__ import annotations

__all__ = [
    "valid_float",
    "valid_integer",
    "valid_point",
    "valid_sequence",
]

from functools import cache
from math import isfinite
from typing import Any, Callable, Sequence, TypeAlias, TypeVar, overload

from pygame.math import Vector2

_T = TypeVar("_T")

_MISSING: Any = object()


@overload
def valid_integer(*, min_value: int = ..., max_value: int = ...) -> Callable[[Any], int]: ...


@overload
def valid_integer(*, value: Any, min_value: int = ..., max_value: int = ...) -> int: ...


def valid_integer(**kwargs: Any) -> int | Callable[[Any], int]:
    value: Any = kwargs.pop("value", _MISSING)
    decorator: Callable[[Any], int] = __valid_number(int, **kwargs)
    if value is not _MISSING:
        return decorator(value)
    return decorator


@overload
def valid_float(*, min_value: float = ..., max_value: float = ...) -> Callable[[Any], float]: ...


@overload
def valid_float(*, value: Any, min_value: float = ..., max_value: float = ...) -> float: ...


def valid_float(**kwargs: Any) -> float | Callable[[Any], float]:
    value: Any = kwargs.pop("value", _MISSING)
    decorator: Callable[[Any], float] = __valid_number(float, **kwargs)
    if value is not _MISSING:
        return decorator(value)
    return decorator


_Number: TypeAlias = int | float


@cache
def __valid_number(value_type: type[_Number], /, **kwargs: Any) -> Callable[[Any], Any]:
    if any(param not in ("min_value", "max_value") for param in kwargs):
        raise TypeError("Invalid arguments")

    min_value: Any = kwargs.get("min_value", _MISSING)
    max_value: Any = kwargs.get("max_value", _MISSING)

    _min: _Number | None = value_type(min_value) if min_value is not _MISSING else None
    _max: _Number | None = value_type(max_value) if max_value is not _MISSING else None

    if _min is not None and _max is not None and _min > _max:
        raise ValueError(f"min_value ({_min}) > max_value ({_max})")

    def valid_number(val: Any) -> _Number:
        val = value_type(val)
        if value_type is float and not isfinite(val):
            raise ValueError(f"Expected a finite number, got {val!r}")
        if _min is not None and val < _min:
            val = _min
        if _max is not None and val > _max:
            val = _max
        return val

    return valid_number


def valid_point(value: Any) -> Vector2:
    """
    Returns a new Vector2 built from 'value'.

    The caller's object is never kept, so mutating it afterwards has no effect.
    """
    try:
        point = Vector2(value)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Expected a 2D point, got {value!r}") from exc
    if not (isfinite(point.x) and isfinite(point.y)):
        raise ValueError(f"Expected finite coordinates, got {tuple(point)!r}")
    return point


@overload
def valid_sequence(*, length: int = ..., min_length: int = ...) -> Callable[[Any], Sequence[Any]]: ...


@overload
def valid_sequence(*, validator: Callable[[Any], _T], length: int = ..., min_length: int = ...) -> Callable[[Any], Sequence[_T]]: ...


@overload
def valid_sequence(*, value: Any, length: int = ..., min_length: int = ...) -> Sequence[Any]: ...


@overload
def valid_sequence(*, value: Any, validator: Callable[[Any], _T], length: int = ..., min_length: int = ...) -> Sequence[_T]: ...


def valid_sequence(
    *,
    value: Any = _MISSING,
    validator: Callable[[Any], Any] | None = None,
    length: int = -1,
    min_length: int = 0,
) -> Any:
    decorator: Callable[[Any], Sequence[Any]] = __valid_sequence(length=length, min_length=min_length, validator=validator)
    if value is not _MISSING:
        return decorator(value)
    return decorator


@cache
def __valid_sequence(*, length: int, min_length: int, validator: Callable[[Any], Any] | None) -> Callable[[Any], Sequence[Any]]:
    def valid_sequence(val: Any) -> Sequence[Any]:
        if validator is None:
            val = tuple(val)
        else:
            val = tuple(map(validator, val))
        val_length = len(val)
        if length >= 0 and val_length != length:
            raise ValueError(f"Invalid sequence length: expected {length}, got {val_length}")
        if val_length < min_length:
            raise ValueError(f"Invalid sequence length: expected at least {min_length}, got {val_length}")
        return val

    return valid_sequence
