"""Property-based tests for the Option/Result algebra."""

from hypothesis import given
from hypothesis import strategies as st
from strategies import exceptions, int_functions, integers, options, present_values, results, texts

from adtkit import Done, Fail, Nothing, Some, option, result


class TestNullableLaws:
    @given(present_values, integers)
    def test_present_values_round_trip(self, value, default):
        opt = option.from_nullable(value)
        assert option.is_some(opt)
        assert option.get_or_else(opt, default) == value

    @given(integers)
    def test_absent_value_yields_default(self, default):
        opt = option.from_nullable(None)
        assert option.is_none(opt)
        assert option.get_or_else(opt, default) == default


class TestFunctorLaws:
    @given(integers, int_functions)
    def test_map_some(self, value, f):
        assert option.map(Some(value), f) == Some(f(value))

    @given(int_functions)
    def test_map_nothing(self, f):
        assert option.map(Nothing, f) is Nothing

    @given(options)
    def test_option_identity(self, opt):
        assert option.map(opt, lambda x: x) == opt

    @given(results)
    def test_result_identity(self, r):
        assert result.map(r, lambda x: x) == r

    @given(results, int_functions)
    def test_result_composition(self, r, f):
        def inc(x: int) -> int:
            return x + 1

        assert result.map(r, lambda x: f(inc(x))) == result.map(result.map(r, inc), f)


class TestMonadLaws:
    @given(integers)
    def test_option_left_identity(self, value):
        f = lambda x: Some(x + 1) if x % 2 else Nothing  # noqa: E731
        assert option.flat_map(Some(value), f) == f(value)

    @given(options)
    def test_option_right_identity(self, opt):
        assert option.flat_map(opt, Some) == opt

    @given(integers)
    def test_result_left_identity(self, value):
        f = lambda x: Done(x * 2) if x >= 0 else Fail("negative")  # noqa: E731
        assert result.flat_map(Done(value), f) == f(value)

    @given(results)
    def test_result_right_identity(self, r):
        assert result.flat_map(r, Done) == r


class TestShortCircuitLaws:
    @given(texts, integers)
    def test_zip(self, error, value):
        assert result.zip(Fail(error), Done(value)) == Fail(error)
        assert result.zip(Done(value), Fail(error)) == Fail(error)

    @given(integers, integers)
    def test_zip_both_done(self, a, b):
        assert result.zip(Done(a), Done(b)) == Done((a, b))

    @given(options, options)
    def test_option_zip_present_iff_both_present(self, a, b):
        zipped = option.zip(a, b)
        assert option.is_some(zipped) == (option.is_some(a) and option.is_some(b))


class TestBridgeLaws:
    @given(integers, texts)
    def test_round_trip_some(self, value, error):
        assert result.to_option(option.to_result(Some(value), error)) == Some(value)

    @given(texts)
    def test_round_trip_nothing(self, error):
        assert result.to_option(option.to_result(Nothing, error)) is Nothing


class TestErrorPreservation:
    @given(exceptions)
    def test_result_keeps_mapped_exception(self, exc):
        def raise_it():
            raise exc

        assert result.from_throwable(raise_it, repr) == Fail(repr(exc))

    @given(exceptions)
    def test_option_discards_exception(self, exc):
        def raise_it():
            raise exc

        assert option.from_throwable(raise_it) is Nothing


class TestRecoverIdempotence:
    @given(integers, st.sampled_from([len, str.upper, lambda e: 0]))
    def test_recover_leaves_done_untouched(self, value, fn):
        done = Done(value)
        assert result.recover(done, fn) is done
