"""Optional type: Present[T] | Absent[T] for validated optional values."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

from klaw_optional._config import get_config
from klaw_optional.errors import InvalidConstructionError, InvalidMapperResultError, NoValuePresentError

if TYPE_CHECKING:
    from klaw_optional.types.kind import Kind

__all__ = ['Absent', 'Optional', 'Present', 'is_optional']

_EMPTY_TOKEN = object()
"""Passed by Kind when it fills its empty cache; any other Absent() call is rejected."""


def _check_mapper_result(kind: Kind[Any], result: object, source: str) -> Optional[Any]:
    if result is None:
        raise InvalidMapperResultError(kind.name, f'{source} cannot return None, return an empty Optional instead')
    if not is_optional(result):
        raise InvalidMapperResultError(kind.name, f'{source} must return an Optional, got {type(result).__name__}')
    return result


@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Present[T]:
    """Present variant of Optional holding a validated value of kind T.

    A Present is only ever created with a value its kind supports; None and
    unsupported values are rejected at construction, so a Present can never
    be half-valid. Prefer ``kind.of(value)`` over calling the class directly.

    Examples:
        >>> from klaw_optional import INT
        >>> INT.of(42).get()
        42
        >>> str(INT.of(21).map(lambda x: x * 2))
        'Optional<int>[42]'
    """

    kind: Kind[T]
    value: T
    __match_args__ = ('value',)

    def __post_init__(self) -> None:
        self.kind.require(self.value)

    def __bool__(self) -> NoReturn:
        raise TypeError('Optional has no truth value; use .is_present() / .is_empty().')

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def is_present(self) -> TypeIs[Present[T]]:
        """Return True since this is Present.

        This method provides type narrowing - after checking is_present(),
        the type checker knows the optional is Present[T].
        """
        return True

    def is_empty(self) -> TypeIs[Absent[T]]:
        """Return False since this is Present."""
        return False

    def get(self) -> T:
        """Return the contained value.

        Since this is Present, this always succeeds.
        """
        return self.value

    def to_nullable(self) -> T:
        """Return the contained value (None would mean Absent)."""
        return self.value

    def if_present(self, action: Callable[[T], object]) -> Present[T]:
        """Call action with the value and return self for chaining."""
        action(self.value)
        return self

    def if_absent(self, action: Callable[[], object]) -> None:  # noqa: ARG002
        """Do nothing since a value is present.

        Returns None on purpose: after branching on absence there is nothing
        meaningful left to chain.
        """
        return None

    def if_present_or_else(self, action: Callable[[T], object], empty_action: Callable[[], object]) -> None:  # noqa: ARG002
        """Call action with the value; empty_action is ignored."""
        action(self.value)

    def map[U](self, mapper: Callable[[T], U | None], kind: Kind[U] | None = None) -> Optional[U]:
        """Apply a function to the value and wrap the result.

        The result is wrapped as if by ``of_nullable``: a mapper returning
        None yields an empty Optional instead of failing.

        Args:
            mapper: Function to apply to the value.
            kind: Kind of the result. Defaults to this optional's kind.

        Returns:
            Optional of the target kind describing mapper's result.

        Raises:
            InvalidConstructionError: If the result is not supported by the target kind.
        """
        target = self.kind if kind is None else kind
        return target.of_nullable(mapper(self.value))

    def flat_map[U](self, mapper: Callable[[T], Optional[U]]) -> Optional[U]:
        """Apply a function that returns an Optional to the value.

        Also known as and_then or bind. The returned Optional may be of any
        kind and is passed through unchanged.

        Args:
            mapper: Function that takes T and returns an Optional.

        Returns:
            The Optional returned by mapper.

        Raises:
            InvalidMapperResultError: If mapper returns None or a non-Optional.
        """
        return _check_mapper_result(self.kind, mapper(self.value), 'mapper')

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return self if the predicate is satisfied, else the kind's empty Optional.

        Args:
            predicate: Function that returns True to keep the value.
        """
        if predicate(self.value):
            return self
        return self.kind.of_empty()

    def or_else(self, other: T | None) -> T:  # noqa: ARG002
        """Return the contained value; other is neither validated nor used."""
        return self.value

    def or_else_get(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling supplier."""
        return self.value

    def or_else_raise(self, exception_supplier: Callable[[], BaseException]) -> T:  # noqa: ARG002
        """Return the contained value without calling exception_supplier."""
        return self.value

    def or_else_optional(self, supplier: Callable[[], Optional[T]]) -> Present[T]:  # noqa: ARG002
        """Return self unchanged since a value is present."""
        return self

    def equals(self, other: object) -> bool:
        """Return True if other is this instance or a Present holding an equal value of the same type.

        Kinds are not compared, but value types are: ``INT.of(1)`` equals
        ``ANY.of(1)`` and not ``BOOL.of(True)`` or ``FLOAT.of(1.0)``.
        """
        if other is self:
            return True
        return isinstance(other, Present) and type(other.value) is type(self.value) and other.value == self.value

    def __eq__(self, other: object) -> bool:
        if not is_optional(other):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return f'Optional<{self.kind.name}>[{self.value}]'

    def __repr__(self) -> str:
        return f'Present(kind={self.kind.name!r}, value={self.value!r})'


@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Absent[T]:
    """Absent variant of Optional representing no value of kind T.

    There is one Absent per kind, cached for the life of the process. It is
    obtained through ``kind.of_empty()``; calling ``Absent(kind)`` raises, and
    copying or unpickling yields the cached instance.

    Examples:
        >>> from klaw_optional import INT
        >>> INT.of_empty() is INT.of_empty()
        True
        >>> INT.of_empty().or_else(0)
        0
    """

    kind: Kind[T]
    _token: object = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self._token is not _EMPTY_TOKEN:
            raise InvalidConstructionError(self.kind.name, 'use of_empty() to obtain the empty Optional')

    def __copy__(self) -> Absent[T]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Absent[T]:  # noqa: ARG002
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self.kind).of_empty, (self.kind,)

    def __bool__(self) -> NoReturn:
        raise TypeError('Optional has no truth value; use .is_present() / .is_empty().')

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def is_present(self) -> TypeIs[Present[T]]:
        """Return False since this is Absent."""
        return False

    def is_empty(self) -> TypeIs[Absent[T]]:
        """Return True since this is Absent."""
        return True

    def get(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            NoValuePresentError: Always.
        """
        raise NoValuePresentError(self.kind.name)

    def to_nullable(self) -> None:
        """Return None."""
        return None

    def if_present(self, action: Callable[[T], object]) -> Absent[T]:  # noqa: ARG002
        """Return self without calling action."""
        return self

    def if_absent(self, action: Callable[[], object]) -> None:
        """Call action with no arguments."""
        action()

    def if_present_or_else(self, action: Callable[[T], object], empty_action: Callable[[], object]) -> None:  # noqa: ARG002
        """Call empty_action with no arguments."""
        empty_action()

    def map[U](self, mapper: Callable[[T], U | None], kind: Kind[U] | None = None) -> Absent[U]:  # noqa: ARG002
        """Return the empty Optional of the target kind without calling mapper."""
        target = self.kind if kind is None else kind
        return target.of_empty()

    def flat_map[U](self, mapper: Callable[[T], Optional[U]]) -> Absent[T]:  # noqa: ARG002
        """Return the kind's empty Optional without calling mapper."""
        return self.kind.of_empty()

    def filter(self, predicate: Callable[[T], bool]) -> Absent[T]:  # noqa: ARG002
        """Return self without calling predicate."""
        return self

    def or_else(self, other: T | None) -> T | None:
        """Return other, which may be None.

        Raises:
            InvalidFallbackError: If other is not None and the kind does not support it.
        """
        return self.kind.require_fallback(other, allow_none=True)

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Compute the fallback with supplier and return it.

        Raises:
            InvalidFallbackError: If supplier returns None or an unsupported value.
        """
        return self.kind.require_fallback(supplier(), allow_none=False)  # type: ignore[return-value]

    def or_else_raise(self, exception_supplier: Callable[[], BaseException]) -> NoReturn:
        """Raise the exception built by exception_supplier, unmodified."""
        raise exception_supplier()

    def or_else_optional(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        """Return the Optional produced by supplier, present or not.

        Raises:
            InvalidMapperResultError: If supplier returns None or a non-Optional.
        """
        return _check_mapper_result(self.kind, supplier(), 'supplier')

    def equals(self, other: object) -> bool:
        """Return True if other is this instance or any other empty Optional."""
        return other is self or isinstance(other, Absent)

    def __eq__(self, other: object) -> bool:
        if not is_optional(other):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(Absent)

    def __str__(self) -> str:
        return f'Optional<{self.kind.name}>[{get_config().empty_marker}]'

    def __repr__(self) -> str:
        return f'Absent(kind={self.kind.name!r})'


type Optional[T] = Present[T] | Absent[T]


def is_optional(obj: object) -> TypeIs[Present[Any] | Absent[Any]]:
    """Return True if obj is a Present or an Absent.

    Optional is a type alias, so ``isinstance(obj, Optional)`` does not work;
    use this instead.
    """
    return isinstance(obj, (Present, Absent))


