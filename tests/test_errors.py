"""Tests for error types and their struct twins."""

from __future__ import annotations

import msgspec
import pytest
from klaw_optional import INT, STR, OptionalError
from klaw_optional.errors import (
    InvalidArgumentError,
    InvalidConstruction,
    InvalidConstructionError,
    InvalidFallback,
    InvalidFallbackError,
    InvalidMapperResult,
    InvalidMapperResultError,
    NoValuePresent,
    NoValuePresentError,
)


class TestErrorHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        'error_type',
        [InvalidConstructionError, InvalidFallbackError, InvalidMapperResultError],
    )
    def test_invalid_argument_family(self, error_type) -> None:
        assert issubclass(error_type, InvalidArgumentError)
        assert issubclass(error_type, ValueError)
        assert issubclass(error_type, OptionalError)

    def test_no_value_present_is_runtime_error(self) -> None:
        assert issubclass(NoValuePresentError, RuntimeError)
        assert issubclass(NoValuePresentError, OptionalError)
        assert not issubclass(NoValuePresentError, ValueError)

    def test_base_error_str(self) -> None:
        assert str(OptionalError('boom')) == 'boom'
        assert str(OptionalError('boom', code='X')) == '[X] boom'

    def test_invalid_argument_default_code(self) -> None:
        assert InvalidArgumentError('bad').code == 'INVALID_ARGUMENT'


class TestRaisedErrors:
    """Errors raised by Optional operations carry kind and code."""

    def test_construction_error_fields(self) -> None:
        with pytest.raises(InvalidConstructionError) as exc_info:
            INT.of('x')
        error = exc_info.value
        assert error.kind == 'int'
        assert error.code == 'INVALID_CONSTRUCTION'
        assert str(error) == '[INVALID_CONSTRUCTION] Optional<int>: unsupported value of type str'

    def test_fallback_error_fields(self) -> None:
        with pytest.raises(InvalidFallbackError) as exc_info:
            STR.of_empty().or_else(1)
        assert exc_info.value.kind == 'str'
        assert exc_info.value.code == 'INVALID_FALLBACK'

    def test_mapper_error_fields(self) -> None:
        with pytest.raises(InvalidMapperResultError) as exc_info:
            INT.of(1).flat_map(str)
        assert exc_info.value.kind == 'int'
        assert exc_info.value.code == 'INVALID_MAPPER_RESULT'

    def test_no_value_error_fields(self) -> None:
        with pytest.raises(NoValuePresentError) as exc_info:
            STR.of_empty().get()
        assert exc_info.value.kind == 'str'
        assert exc_info.value.code == 'NO_VALUE_PRESENT'


class TestStructConversion:
    """Tests for struct <-> exception conversion."""

    @pytest.mark.parametrize(
        ('struct', 'error_type'),
        [
            (InvalidConstruction('int', 'value cannot be None'), InvalidConstructionError),
            (InvalidFallback('str', 'supplier cannot return None'), InvalidFallbackError),
            (InvalidMapperResult('int', 'mapper must return an Optional'), InvalidMapperResultError),
            (NoValuePresent('int'), NoValuePresentError),
        ],
    )
    def test_round_trip(self, struct, error_type) -> None:
        error = struct.to_exception()
        assert isinstance(error, error_type)
        assert error.to_struct() == struct

    def test_struct_from_raised_error(self) -> None:
        with pytest.raises(InvalidConstructionError) as exc_info:
            INT.of(None)
        struct = exc_info.value.to_struct()
        assert struct.kind == 'int'
        assert 'of_nullable' in struct.reason

    def test_struct_json_encoding(self) -> None:
        encoded = msgspec.json.encode(InvalidFallback('int', 'supplier cannot return None'))
        assert msgspec.json.decode(encoded) == {'kind': 'int', 'reason': 'supplier cannot return None'}
        assert msgspec.json.decode(encoded, type=InvalidFallback) == InvalidFallback('int', 'supplier cannot return None')

    def test_structs_are_frozen(self) -> None:
        struct = NoValuePresent('int')
        with pytest.raises(AttributeError):
            struct.kind = 'str'  # type: ignore[misc]
