"""Tests for Option type (Some and Nothing) and the option namespace."""

import pytest

from adtkit import Done, Fail, Nothing, NothingType, Pair, Some, UnwrapError, option


class TestSomeCreation:
    """Tests for Some instantiation and basic properties."""

    def test_some_creation(self):
        """Some wraps a value."""
        assert Some(42).value == 42

    def test_some_with_none(self):
        """The raw constructor keeps None as a payload."""
        some = Some(None)
        assert some.value is None
        assert some != Nothing

    def test_some_is_frozen(self):
        """Some instances are immutable."""
        some = Some(42)
        with pytest.raises(AttributeError):
            some.value = 100  # type: ignore[misc]

    def test_some_pattern_matching(self):
        """Some supports structural pattern matching."""
        match Some(3):
            case Some(value):
                assert value == 3
            case _:
                pytest.fail("Some did not match")


class TestNothingCreation:
    """Tests for the Nothing singleton."""

    def test_nothing_is_singleton(self):
        assert option.none() is Nothing
        assert isinstance(Nothing, NothingType)

    def test_nothing_type_instances_equal(self):
        assert NothingType() == Nothing

    def test_nothing_hashable(self):
        assert {Nothing: "value"}[NothingType()] == "value"


class TestConstructors:
    """Tests for some, new and from_* conversions."""

    def test_some_function_keeps_none(self):
        assert option.some(None) == Some(None)

    def test_new_maps_none_to_nothing(self):
        assert option.new(None) is Nothing
        assert option.new(0) == Some(0)

    @pytest.mark.parametrize("value", [0, "", False, [], 1, "x"])
    def test_from_nullable_present(self, value):
        """Falsy values are still present."""
        assert option.from_nullable(value) == Some(value)

    def test_from_nullable_absent(self):
        assert option.from_nullable(None) is Nothing

    def test_from_predicate(self):
        assert option.from_predicate(4, lambda x: x % 2 == 0) == Some(4)
        assert option.from_predicate(3, lambda x: x % 2 == 0) is Nothing

    def test_from_throwable_success(self):
        assert option.from_throwable(lambda: 7) == Some(7)

    def test_from_throwable_discards_exception(self):
        def boom() -> int:
            raise ValueError("boom")

        assert option.from_throwable(boom) is Nothing

    def test_from_throwable_lets_base_exceptions_through(self):
        def interrupt() -> int:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            option.from_throwable(interrupt)

    def test_from_throwable_narrowed_exceptions(self):
        """Only the listed exception types become Nothing."""
        assert option.from_throwable(lambda: {}["missing"], exceptions=(KeyError,)) is Nothing
        with pytest.raises(ZeroDivisionError):
            option.from_throwable(lambda: 1 / 0, exceptions=(KeyError,))

    def test_from_throwable_widened_exceptions(self):
        def interrupt() -> int:
            raise KeyboardInterrupt

        assert option.from_throwable(interrupt, exceptions=(BaseException,)) is Nothing

    def test_from_throwable_narrowing_is_per_call(self):
        """A narrowed call leaves the default at other call sites untouched."""
        with pytest.raises(ZeroDivisionError):
            option.from_throwable(lambda: 1 / 0, exceptions=())
        assert option.from_throwable(lambda: 1 / 0) is Nothing

    def test_first(self):
        assert option.first([3, 4]) == Some(3)
        assert option.first([]) is Nothing
        assert option.first([None, 1]) is Nothing
        assert option.first(iter("ab")) == Some("a")


class TestGuards:
    def test_is_some(self):
        assert option.is_some(Some(1)) is True
        assert option.is_some(Nothing) is False
        assert Some(1).is_some() is True

    def test_is_none(self):
        assert option.is_none(Nothing) is True
        assert option.is_none(Some(1)) is False
        assert Nothing.is_none() is True


class TestOps:
    """Tests for map, flat_map, filter and match."""

    def test_map_some(self):
        assert option.map(Some(5), lambda x: x * 2) == Some(10)

    def test_map_nothing_skips_function(self):
        calls = []
        assert option.map(Nothing, calls.append) is Nothing
        assert calls == []

    def test_map_does_not_catch(self):
        """Exceptions from the mapping function propagate."""
        with pytest.raises(ZeroDivisionError):
            option.map(Some(1), lambda x: x / 0)

    def test_flat_map(self):
        half = lambda x: Some(x // 2) if x % 2 == 0 else Nothing  # noqa: E731
        assert option.flat_map(Some(4), half) == Some(2)
        assert option.flat_map(Some(3), half) is Nothing
        assert option.flat_map(Nothing, half) is Nothing

    def test_filter(self):
        assert option.filter(Some(4), lambda x: x > 3) == Some(4)
        assert option.filter(Some(2), lambda x: x > 3) is Nothing
        assert option.filter(Nothing, lambda x: True) is Nothing

    def test_match(self):
        assert option.match(Some(2), some=lambda x: x + 1, none=lambda: 0) == 3
        assert option.match(Nothing, some=lambda x: x + 1, none=lambda: 0) == 0


class TestExtract:
    def test_get_or_else(self):
        assert option.get_or_else(Some(1), 0) == 1
        assert option.get_or_else(Nothing, 0) == 0

    def test_get_or_none(self):
        assert option.get_or_none(Some(1)) == 1
        assert option.get_or_none(Nothing) is None

    def test_get_or_throw_present(self):
        assert option.get_or_throw(Some(1), KeyError("missing")) == 1

    def test_get_or_throw_absent_raises_given_error(self):
        err = KeyError("missing")
        with pytest.raises(KeyError) as excinfo:
            option.get_or_throw(Nothing, err)
        assert excinfo.value is err

    def test_unwrap(self):
        assert Some(1).unwrap() == 1
        with pytest.raises(UnwrapError, match="Called unwrap on Nothing"):
            Nothing.unwrap()

    def test_expect(self):
        assert Some(1).expect("unused") == 1
        with pytest.raises(UnwrapError, match="custom message") as excinfo:
            Nothing.expect("custom message")
        assert excinfo.value.container is Nothing


class TestCombine:
    def test_zip(self):
        assert option.zip(Some(1), Some("a")) == Some(Pair(1, "a"))
        assert option.zip(Some(1), Some("a")) == Some((1, "a"))
        assert option.zip(Nothing, Some("a")) is Nothing
        assert option.zip(Some(1), Nothing) is Nothing
        assert option.zip(Nothing, Nothing) is Nothing

    def test_apply(self):
        assert option.apply(Some(lambda x: x + 1), Some(1)) == Some(2)
        assert option.apply(Nothing, Some(1)) is Nothing
        assert option.apply(Some(lambda x: x + 1), Nothing) is Nothing

    def test_or_else(self):
        assert option.or_else(Some(1), Some(2)) == Some(1)
        assert option.or_else(Nothing, Some(2)) == Some(2)
        assert option.or_else(Nothing, Nothing) is Nothing

    def test_collect(self):
        assert option.collect([Some(1), Some(2)]) == Some([1, 2])
        assert option.collect([Some(1), Nothing, Some(3)]) is Nothing
        assert option.collect([]) == Some([])

    def test_collect_stops_at_first_nothing(self):
        seen = []

        def gen():
            for item in (Some(1), Nothing, Some(3)):
                seen.append(item)
                yield item

        option.collect(gen())
        assert seen == [Some(1), Nothing]


class TestToResult:
    def test_some_to_done(self):
        assert option.to_result(Some(1), "missing") == Done(1)

    def test_nothing_to_fail(self):
        assert option.to_result(Nothing, "missing") == Fail("missing")
