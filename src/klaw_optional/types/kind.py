"""Kind: the per-type half of an Optional.

A Kind pairs a name with a ``supports`` predicate. Every validating path of an
Optional asks its kind whether a value belongs to it, and each kind owns one
cached empty Optional for the lifetime of the process.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from klaw_optional._internal.sync import OnceMap
from klaw_optional._logging import get_logger
from klaw_optional.errors import InvalidConstructionError, InvalidFallbackError
from klaw_optional.types.optional import _EMPTY_TOKEN, Absent, Present

__all__ = ['IsInstance', 'Kind']

_log = get_logger(__name__)

_EMPTY: OnceMap[Kind[Any], Absent[Any]] = OnceMap()
"""Process-wide cache of empty Optionals, one per kind, never evicted."""


class IsInstance(msgspec.Struct, frozen=True):
    """Predicate accepting instances of a class.

    A struct rather than a lambda so that two kinds built for the same class
    compare equal and share one empty Optional.
    """

    cls: type

    def __call__(self, value: object) -> bool:
        return isinstance(value, self.cls)


class Kind[T](msgspec.Struct, frozen=True):
    """A named kind of value an Optional can hold.

    Kinds are equal when both name and predicate are equal, and are hashable,
    so the same kind defined twice shares its cached empty Optional.

    Attributes:
        name: Name shown in str() output and error messages.
        supports: Pure, total predicate over non-None values.

    Examples:
        >>> EVEN = Kind('even', lambda v: isinstance(v, int) and v % 2 == 0)
        >>> EVEN.of(4).get()
        4
        >>> EVEN.of_nullable(None).is_present()
        False
    """

    name: str
    supports: Callable[[Any], bool]

    @classmethod
    def instance_of(cls, type_: type[T], name: str | None = None) -> Kind[T]:
        """Build a kind accepting instances of type_ (subclasses included).

        Args:
            type_: Class whose instances the kind accepts.
            name: Kind name. Defaults to the class name.
        """
        return cls(name or type_.__name__, IsInstance(type_))

    def accepts(self, value: object) -> bool:
        """Return True if value is not None and supported by this kind."""
        return value is not None and self.supports(value)

    def of(self, value: T) -> Present[T]:
        """Return an Optional describing the given non-None value.

        Args:
            value: The value to be present.

        Returns:
            A Present holding value.

        Raises:
            InvalidConstructionError: If value is None (use of_nullable instead)
                or not supported by this kind.
        """
        return Present(self, value)

    def of_empty(self) -> Absent[T]:
        """Return the empty Optional for this kind.

        The instance is created on first request and the same object is
        returned from then on, from any thread.
        """
        return _EMPTY.get_or_init(self, self._create_empty)

    def of_nullable(self, value: T | None) -> Present[T] | Absent[T]:
        """Return a Present for a non-None value, else the empty Optional.

        Raises:
            InvalidConstructionError: If value is not None and not supported.
        """
        if value is None:
            return self.of_empty()
        return self.of(value)

    def require(self, value: object) -> T:
        """Validate a value for storage in a Present.

        Raises:
            InvalidConstructionError: If value is None or unsupported.
        """
        if value is None:
            self._reject(value, 'construction')
            raise InvalidConstructionError(self.name, 'value cannot be None, use of_nullable or of_empty instead')
        if not self.supports(value):
            self._reject(value, 'construction')
            raise InvalidConstructionError(self.name, f'unsupported value of type {type(value).__name__}')
        return value  # type: ignore[return-value]

    def require_fallback(self, value: object, *, allow_none: bool) -> T | None:
        """Validate a fallback value handed to or_else/or_else_get.

        Args:
            value: Candidate fallback.
            allow_none: Whether None passes through (or_else) or is rejected (or_else_get).

        Raises:
            InvalidFallbackError: If value is rejected.
        """
        if value is None:
            if allow_none:
                return None
            self._reject(value, 'fallback')
            raise InvalidFallbackError(self.name, 'supplier cannot return None')
        if not self.supports(value):
            self._reject(value, 'fallback')
            raise InvalidFallbackError(self.name, f'unsupported fallback of type {type(value).__name__}')
        return value  # type: ignore[return-value]

    def _reject(self, value: object, stage: str) -> None:
        _log.debug('optional_value_rejected', kind=self.name, stage=stage, value_type=type(value).__name__)

    def _create_empty(self) -> Absent[T]:
        _log.debug('empty_optional_created', kind=self.name)
        return Absent(self, _EMPTY_TOKEN)
