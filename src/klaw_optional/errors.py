"""Optional error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidArgumentError',
    'InvalidConstruction',
    'InvalidConstructionError',
    'InvalidFallback',
    'InvalidFallbackError',
    'InvalidMapperResult',
    'InvalidMapperResultError',
    'NoValuePresent',
    'NoValuePresentError',
    'OptionalError',
]


class OptionalError(Exception):
    """Base exception class for klaw-optional errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from klaw_optional import INT, OptionalError

        try:
            INT.of('not an int')
        except OptionalError as e:
            print(e.code)  # INVALID_CONSTRUCTION
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class InvalidArgumentError(OptionalError, ValueError):
    """A value handed to an Optional was rejected.

    Also a ValueError, so callers that only know the builtin hierarchy can
    still catch it.
    """

    def __init__(self, message: str, code: str | None = 'INVALID_ARGUMENT') -> None:
        super().__init__(message, code)


# --- Construction Errors ---


class InvalidConstruction(msgspec.Struct, frozen=True, gc=False):
    """Present-value factory rejected its input - struct variant."""

    kind: str
    reason: str

    def to_exception(self) -> InvalidConstructionError:
        """Convert to exception for raise-based code."""
        return InvalidConstructionError(self.kind, self.reason)


class InvalidConstructionError(InvalidArgumentError):
    """Present-value factory rejected its input - exception variant.

    Raised by ``Kind.of`` (and everything built on it) when the value is None
    or fails the kind's predicate.
    """

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f'Optional<{kind}>: {reason}', code='INVALID_CONSTRUCTION')

    def to_struct(self) -> InvalidConstruction:
        """Convert to struct for Result-based code."""
        return InvalidConstruction(self.kind, self.reason)


# --- Fallback Errors ---


class InvalidFallback(msgspec.Struct, frozen=True, gc=False):
    """Fallback value rejected by or_else/or_else_get - struct variant."""

    kind: str
    reason: str

    def to_exception(self) -> InvalidFallbackError:
        """Convert to exception for raise-based code."""
        return InvalidFallbackError(self.kind, self.reason)


class InvalidFallbackError(InvalidArgumentError):
    """Fallback value rejected by or_else/or_else_get - exception variant."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f'Optional<{kind}>: {reason}', code='INVALID_FALLBACK')

    def to_struct(self) -> InvalidFallback:
        """Convert to struct for Result-based code."""
        return InvalidFallback(self.kind, self.reason)


# --- Mapper Errors ---


class InvalidMapperResult(msgspec.Struct, frozen=True, gc=False):
    """Callback did not return an Optional - struct variant."""

    kind: str
    reason: str

    def to_exception(self) -> InvalidMapperResultError:
        """Convert to exception for raise-based code."""
        return InvalidMapperResultError(self.kind, self.reason)


class InvalidMapperResultError(InvalidArgumentError):
    """Callback did not return an Optional - exception variant.

    Raised by ``flat_map`` and ``or_else_optional``.
    """

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f'Optional<{kind}>: {reason}', code='INVALID_MAPPER_RESULT')

    def to_struct(self) -> InvalidMapperResult:
        """Convert to struct for Result-based code."""
        return InvalidMapperResult(self.kind, self.reason)


# --- Access Errors ---


class NoValuePresent(msgspec.Struct, frozen=True, gc=False):
    """get() called on an empty Optional - struct variant."""

    kind: str

    def to_exception(self) -> NoValuePresentError:
        """Convert to exception for raise-based code."""
        return NoValuePresentError(self.kind)


class NoValuePresentError(OptionalError, RuntimeError):
    """get() called on an empty Optional - exception variant.

    This is a programming error: check ``is_present()`` first or use one of
    the ``or_else*`` operations.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f'No value present in Optional<{kind}>, use or_else instead', code='NO_VALUE_PRESENT')

    def to_struct(self) -> NoValuePresent:
        """Convert to struct for Result-based code."""
        return NoValuePresent(self.kind)
