"""Tests for the untagged Maybe helpers."""

import pytest
from hypothesis import given
from msgspec import UNSET

from adtkit import Nothing, Some, UnwrapError, maybe
from tests.strategies import exceptions, maybes


class TestMaybeConstructors:
    def test_just_is_the_value(self):
        value = [1, 2]
        assert maybe.just(value) is value

    def test_nothing_variants(self):
        assert maybe.nothing() is None
        assert maybe.nothing_none() is None
        assert maybe.nothing_unset() is UNSET

    def test_from_nullable_is_identity(self):
        assert maybe.from_nullable(3) == 3
        assert maybe.from_nullable(None) is None

    def test_from_predicate(self):
        assert maybe.from_predicate(3, lambda x: x > 1) == 3
        assert maybe.from_predicate(0, lambda x: x > 1) is None

    @given(exceptions)
    def test_from_throwable_never_raises(self, exc):
        def boom():
            raise exc

        assert maybe.from_throwable(boom) is None

    def test_from_throwable_value(self):
        assert maybe.from_throwable(lambda: "x") == "x"

    def test_option_round_trip(self):
        assert maybe.from_option(Some(1)) == 1
        assert maybe.from_option(Nothing) is None
        assert maybe.to_option(1) == Some(1)
        assert maybe.to_option(None) is Nothing
        assert maybe.to_option(UNSET) is Nothing


class TestMaybeGuards:
    def test_both_sentinels_are_nothing(self):
        assert maybe.is_nothing(None)
        assert maybe.is_nothing(UNSET)
        assert not maybe.is_just(None)
        assert not maybe.is_just(UNSET)

    def test_falsy_values_are_just(self):
        for value in (0, "", [], False):
            assert maybe.is_just(value)

    def test_narrow_guards(self):
        assert maybe.is_none_value(None)
        assert not maybe.is_none_value(UNSET)
        assert maybe.is_unset(UNSET)
        assert not maybe.is_unset(None)

    @given(maybes)
    def test_guards_exclusive(self, m):
        assert maybe.is_just(m) != maybe.is_nothing(m)


class TestMaybeTransformation:
    def test_map(self):
        assert maybe.map(3, lambda x: x + 1) == 4

    @pytest.mark.parametrize("sentinel", [None, UNSET])
    def test_map_nothing(self, sentinel, recorder):
        fn = recorder()
        assert maybe.map(sentinel, fn) is None
        assert not fn.called

    def test_flat_map(self):
        assert maybe.flat_map(3, lambda x: None) is None
        assert maybe.flat_map(3, lambda x: x * 2) == 6
        assert maybe.flat_map(None, lambda x: x * 2) is None

    def test_filter(self):
        assert maybe.filter(4, lambda x: x > 3) == 4
        assert maybe.filter(2, lambda x: x > 3) is None
        assert maybe.filter(None, lambda x: x > 3) is None

    def test_fold_and_match(self):
        assert maybe.fold(2, lambda: 0, lambda x: x * 10) == 20
        assert maybe.fold(UNSET, lambda: 0, lambda x: x * 10) == 0
        assert maybe.match(None, just=str, nothing=lambda: "none") == "none"
        assert maybe.match(5, just=str, nothing=lambda: "none") == "5"

    def test_tap(self, recorder):
        fn = recorder()
        assert maybe.tap(1, fn) == 1
        assert maybe.tap(None, fn) is None
        assert fn.calls == [(1,)]

    def test_tap_nothing(self, recorder):
        fn = recorder()
        assert maybe.tap_nothing(UNSET, fn) is UNSET
        assert maybe.tap_nothing(1, fn) == 1
        assert fn.calls == [()]


class TestMaybeExtraction:
    def test_get_or_else(self):
        assert maybe.get_or_else(None, 0) == 0
        assert maybe.get_or_else(UNSET, 0) == 0
        assert maybe.get_or_else(0, 5) == 0

    def test_get_or_else_lazy(self):
        assert maybe.get_or_else_lazy(None, lambda: 9) == 9
        assert maybe.get_or_else_lazy(1, lambda: 9) == 1

    def test_get_or_none_normalizes(self):
        assert maybe.get_or_none(UNSET) is None
        assert maybe.to_optional(UNSET) is None
        assert maybe.to_unset(None) is UNSET
        assert maybe.to_unset(3) == 3

    def test_get_or_raise(self):
        assert maybe.get_or_raise(3) == 3
        assert maybe.unwrap(3) == 3
        with pytest.raises(UnwrapError, match="Maybe is nothing"):
            maybe.get_or_raise(None)
        with pytest.raises(KeyError):
            maybe.get_or_raise(UNSET, lambda: KeyError("missing"))


class TestMaybeCombination:
    def test_zip(self):
        assert maybe.zip(1, "a") == (1, "a")
        assert maybe.zip(None, "a") is None
        assert maybe.zip(1, UNSET) is None

    def test_apply(self):
        assert maybe.apply(str, 1) == "1"
        assert maybe.apply(None, 1) is None
        assert maybe.apply(str, None) is None

    def test_or_else(self):
        assert maybe.or_else(1, 2) == 1
        assert maybe.or_else(None, 2) == 2
        assert maybe.or_else(None, UNSET) is UNSET
