"""Tests for Kind: factories, equality and the empty-instance cache."""

from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

import msgspec
import pytest
from klaw_optional import INT, Absent, InvalidConstructionError, Kind, Present
from klaw_optional.types.kind import IsInstance

from tests.models import Book


def _is_even(value: object) -> bool:
    return isinstance(value, int) and value % 2 == 0


class TestKindDefinition:
    """Tests for defining kinds."""

    def test_custom_predicate(self):
        even = Kind('even', _is_even)
        assert even.of(4).get() == 4
        with pytest.raises(InvalidConstructionError):
            even.of(3)

    def test_kind_is_frozen(self):
        with pytest.raises(AttributeError):
            INT.name = 'integer'  # type: ignore[misc]

    def test_equal_definitions_are_equal(self):
        """Same name and predicate means same kind."""
        assert Kind('even', _is_even) == Kind('even', _is_even)
        assert hash(Kind('even', _is_even)) == hash(Kind('even', _is_even))

    def test_different_names_differ(self):
        assert Kind('even', _is_even) != Kind('pair', _is_even)

    def test_accepts(self):
        assert INT.accepts(1) is True
        assert INT.accepts('1') is False
        assert INT.accepts(None) is False

    def test_supports_never_sees_none(self):
        """The predicate is only called with non-None values."""
        seen = []

        def supports(value):
            seen.append(value)
            return True

        kind = Kind('spy', supports)
        kind.of_nullable(None)
        kind.accepts(None)
        with pytest.raises(InvalidConstructionError):
            kind.of(None)
        assert seen == []


class TestInstanceOf:
    """Tests for Kind.instance_of()."""

    def test_instance_of_accepts_instances(self, book_kind):
        book = Book(pages=3)
        assert book_kind.of(book).get() is book

    def test_instance_of_rejects_others(self, book_kind):
        with pytest.raises(InvalidConstructionError, match='unsupported value of type int'):
            book_kind.of(3)

    def test_instance_of_default_name(self, book_kind):
        assert book_kind.name == 'Book'

    def test_instance_of_custom_name(self):
        assert Kind.instance_of(Book, name='book').name == 'book'

    def test_instance_of_accepts_subclasses(self):
        class Novel(Book):
            pass

        assert Kind.instance_of(Book).of(Novel(pages=300)).is_present()

    def test_instance_of_twice_is_same_kind(self):
        """Building the same kind twice shares its empty instance."""
        first = Kind.instance_of(Book)
        second = Kind.instance_of(Book)
        assert first == second
        assert first.of_empty() is second.of_empty()

    def test_is_instance_predicate(self):
        predicate = IsInstance(int)
        assert predicate(1) is True
        assert predicate('1') is False
        assert predicate == IsInstance(int)

    def test_is_instance_as_dict(self):
        """The predicate struct is plain data."""
        assert msgspec.structs.asdict(IsInstance(int)) == {'cls': int}


class TestEmptyCache:
    """Tests for the per-kind empty instance cache."""

    def test_of_empty_identity(self):
        kind = Kind('cache-identity', _is_even)
        assert kind.of_empty() is kind.of_empty()

    def test_of_empty_type(self):
        empty = Kind('cache-type', _is_even).of_empty()
        assert isinstance(empty, Absent)
        assert empty.is_empty()

    def test_combinators_yield_cached_empty(self):
        kind = Kind('cache-combinators', _is_even)
        empty = kind.of_empty()
        assert kind.of(2).filter(lambda _: False) is empty
        assert kind.of(2).map(lambda _: None) is empty
        assert kind.of_nullable(None) is empty
        assert empty.map(lambda x: x) is empty
        assert empty.flat_map(kind.of) is empty

    def test_fallback_does_not_touch_cache(self):
        """or_else_get on the empty instance leaves the cache intact."""
        kind = Kind('cache-fallback', _is_even)
        empty = kind.of_empty()
        assert empty.or_else_get(lambda: 8) == 8
        assert kind.of_empty() is empty
        assert empty.is_empty()

    def test_present_is_never_cached(self):
        kind = Kind('cache-present', _is_even)
        assert kind.of(2) is not kind.of(2)
        assert isinstance(kind.of(2), Present)

    def test_concurrent_first_use_creates_one_instance(self):
        """Racing threads all observe the same empty instance."""
        kind = Kind('cache-concurrent', _is_even)
        workers = 16
        barrier = Barrier(workers)

        def fetch():
            barrier.wait()
            return kind.of_empty()

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda _: fetch(), range(workers)))

        assert all(result is results[0] for result in results)
        assert kind.of_empty() is results[0]
