"""Built-in kinds for primitive values.

Each kind only supplies its predicate; everything else lives in Kind.
"""

from __future__ import annotations

from typing import Any

from klaw_optional.types.kind import Kind

__all__ = ['ANY', 'BOOL', 'FLOAT', 'INT', 'STR', 'instance_of']


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_int(value: Any) -> bool:
    # bool subclasses int but has its own kind
    return isinstance(value, int) and not isinstance(value, bool)


def _is_float(value: Any) -> bool:
    return isinstance(value, float)


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_anything(value: Any) -> bool:
    return True


BOOL: Kind[bool] = Kind('bool', _is_bool)
INT: Kind[int] = Kind('int', _is_int)
FLOAT: Kind[float] = Kind('float', _is_float)
STR: Kind[str] = Kind('str', _is_str)
ANY: Kind[Any] = Kind('any', _is_anything)
"""Accepts every non-None value; a convenient ``map`` target."""

instance_of = Kind.instance_of
