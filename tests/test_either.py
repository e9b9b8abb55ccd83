"""Tests for Either type (Left and Right)."""

import pytest
from hypothesis import given

from adtkit import Err, Left, Ok, Right, UnwrapError, either
from tests.strategies import eithers, exceptions


class TestEitherCreation:
    def test_constructors(self):
        assert either.left("e") == Left("e")
        assert either.right(1) == Right(1)

    def test_left_and_right_with_same_value_differ(self):
        assert Left(1) != Right(1)

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            Right(1).value = 2  # type: ignore[misc]

    def test_pattern_match(self):
        def describe(e):
            match e:
                case Left(value):
                    return f"left {value}"
                case Right(value):
                    return f"right {value}"

        assert describe(Left("x")) == "left x"
        assert describe(Right(2)) == "right 2"


class TestEitherConversions:
    def test_from_nullable(self):
        assert either.from_nullable(5, "missing") == Right(5)
        assert either.from_nullable(None, "missing") == Left("missing")

    def test_from_predicate(self):
        assert either.from_predicate("abc", str.isalpha, "not alpha") == Right("abc")
        assert either.from_predicate("a1", str.isalpha, "not alpha") == Left("not alpha")

    def test_from_throwable(self):
        assert either.from_throwable(lambda: 3) == Right(3)
        assert either.from_throwable(lambda: {}["k"], lambda e: "no key") == Left("no key")

    @given(exceptions)
    def test_from_throwable_never_raises(self, exc):
        def boom():
            raise exc

        assert either.from_throwable(boom) == Left(exc)

    def test_from_result(self):
        assert either.from_result(Ok(1)) == Right(1)
        assert either.from_result(Err("e")) == Left("e")


class TestEitherGuards:
    def test_methods(self):
        assert Left(1).is_left() is True
        assert Left(1).is_right() is False
        assert Right(1).is_left() is False
        assert Right(1).is_right() is True

    @given(eithers)
    def test_guards_exclusive(self, e):
        assert either.is_left(e) != either.is_right(e)


class TestEitherTransformation:
    def test_map(self):
        assert either.map(Right(2), lambda x: x + 1) == Right(3)

    def test_map_left_value_untouched(self, recorder):
        fn = recorder()
        original = Left("e")
        assert either.map(original, fn) is original
        assert not fn.called

    def test_map_left(self):
        assert either.map_left(Left("e"), str.upper) == Left("E")
        assert either.map_left(Right(1), str.upper) == Right(1)

    def test_bimap(self):
        assert either.bimap(Left("e"), str.upper, lambda x: x + 1) == Left("E")
        assert either.bimap(Right(1), str.upper, lambda x: x + 1) == Right(2)

    def test_flat_map_and_chain(self):
        def positive(x: int):
            return Right(x) if x > 0 else Left("not positive")

        assert either.flat_map(Right(1), positive) == Right(1)
        assert either.chain(Right(-1), positive) == Left("not positive")
        assert either.chain(Left("e"), positive) == Left("e")

    def test_filter(self):
        assert either.filter(Right(4), lambda x: x > 3, "small") == Right(4)
        assert either.filter(Right(2), lambda x: x > 3, "small") == Left("small")
        assert either.filter(Left("e"), lambda x: x > 3, "small") == Left("e")

    def test_fold_and_match(self):
        assert either.fold(Left("e"), len, lambda x: x) == 1
        assert either.fold(Right(7), len, lambda x: x) == 7
        assert either.match(Left("ab"), left=len, right=lambda x: x) == 2

    def test_swap(self):
        assert either.swap(Left(1)) == Right(1)
        assert either.swap(Right(1)) == Left(1)

    def test_tap_and_tap_left(self, recorder):
        on_right = recorder()
        on_left = recorder()
        either.tap(Right(1), on_right)
        either.tap(Left("e"), on_right)
        either.tap_left(Left("e"), on_left)
        either.tap_left(Right(1), on_left)
        assert on_right.calls == [(1,)]
        assert on_left.calls == [("e",)]

    def test_recover(self):
        assert either.recover(Left("abc"), len) == Right(3)
        assert either.recover(Right(1), len) == Right(1)


class TestEitherExtraction:
    def test_get_left_and_right(self):
        assert either.get_left(Left("e")) == "e"
        assert either.get_right(Right(1)) == 1

    def test_get_or_else(self):
        assert either.get_or_else(Right(1), 0) == 1
        assert either.get_or_else(Left("e"), 0) == 0
        assert either.get_or_else_lazy(Left("abc"), len) == 3

    def test_get_or_none(self):
        assert either.get_or_none(Right(1)) == 1
        assert either.get_or_none(Left("e")) is None

    def test_get_or_raise(self):
        assert either.get_or_raise(Right(1)) == 1
        with pytest.raises(UnwrapError, match="Either is Left"):
            either.get_or_raise(Left("e"))
        with pytest.raises(KeyError):
            either.get_or_raise(Left(KeyError("k")))
        with pytest.raises(ValueError, match="bad input: e"):
            either.get_or_raise(Left("e"), lambda v: ValueError(f"bad input: {v}"))


class TestEitherCombination:
    def test_zip(self):
        assert either.zip(Right(1), Right("a")) == Right((1, "a"))
        assert either.zip(Left("bad"), Right("a")) == Left("bad")
        assert either.zip(Left("first"), Left("second")) == Left("first")
        assert either.zip(Right(1), Left("second")) == Left("second")

    def test_apply(self):
        assert either.apply(Right(str), Right(1)) == Right("1")
        assert either.apply(Left("fn"), Left("arg")) == Left("fn")
        assert either.apply(Right(str), Left("arg")) == Left("arg")

    def test_or_else(self):
        assert either.or_else(Right(1), Right(2)) == Right(1)
        assert either.or_else(Left("e"), Left("f")) == Left("f")

    def test_partition(self):
        assert either.partition([Left("a"), Right(1), Left("b")]) == (["a", "b"], [1])
