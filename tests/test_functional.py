from __future__ import annotations

import asyncio
import time

import pytest

from utilkit import compose, curry, delay, memoize, once, pipe, retry


class TestMemoize:
    """记忆化：相同参数只计算一次"""

    def test_caches_by_arguments(self):
        calls = []

        def add(a, b):
            calls.append((a, b))
            return a + b

        cached = memoize(add)
        assert cached(1, 2) == 3
        assert cached(1, 2) == 3
        assert cached(2, 1) == 3
        assert calls == [(1, 2), (2, 1)]
        assert len(cached.cache) == 2

    def test_structurally_equal_arguments_share_entry(self):
        calls = []

        def total(values):
            calls.append(values)
            return sum(values)

        cached = memoize(total)
        assert cached([1, 2, 3]) == 6
        assert cached([1, 2, 3]) == 6
        assert len(calls) == 1

    def test_kwargs_are_part_of_key(self):
        cached = memoize(lambda a, scale=1: a * scale)
        assert cached(2) == 2
        assert cached(2, scale=3) == 6
        assert len(cached.cache) == 2

    def test_positional_dict_differs_from_kwargs(self):
        calls = []

        def echo(*args, **kwargs):
            calls.append((args, kwargs))
            return args, kwargs

        cached = memoize(echo)
        assert cached([1], {"x": 2}) == (([1], {"x": 2}), {})
        assert cached(1, x=2) == ((1,), {"x": 2})
        assert len(calls) == 2

    def test_custom_key_generator(self):
        calls = []

        def parity(n):
            calls.append(n)
            return n % 2

        cached = memoize(parity, key_generator=lambda n: n % 2)
        assert cached(1) == 1
        assert cached(3) == 1
        assert calls == [1]

    def test_unserializable_arguments_need_key_generator(self):
        cached = memoize(lambda obj: obj)
        with pytest.raises(TypeError, match="key_generator"):
            cached(object())

    def test_clear(self):
        calls = []
        cached = memoize(lambda x: calls.append(x) or x)
        cached(1)
        cached.clear()
        cached(1)
        assert calls == [1, 1]

    def test_usable_as_decorator(self):
        @memoize
        def square(x):
            """平方"""
            return x * x

        assert square(4) == 16
        assert square.__name__ == "square"
        assert square.cache == {"[[4],{}]": 16}

    def test_caches_none_results(self):
        calls = []

        def nothing(x):
            calls.append(x)
            return None

        cached = memoize(nothing)
        cached(1)
        cached(1)
        assert calls == [1]


class TestOnce:
    def test_runs_only_first_time(self):
        calls = []

        @once
        def init(value):
            calls.append(value)
            return value * 10

        assert init(1) == 10
        assert init(2) == 10
        assert calls == [1]

    def test_preserves_name(self):
        def setup():
            return 1

        assert once(setup).__name__ == "setup"


class TestCurry:
    """柯里化：凑够参数后调用"""

    def test_any_grouping_of_arguments(self):
        add3 = curry(lambda a, b, c: a + b + c)
        assert add3(1)(2)(3) == 6
        assert add3(1, 2)(3) == 6
        assert add3(1)(2, 3) == 6
        assert add3(1, 2, 3) == 6

    def test_partial_applications_are_independent(self):
        add3 = curry(lambda a, b, c: a + b + c)
        add1 = add3(1)
        assert add1(2)(3) == 6
        assert add1(10)(20) == 31
        assert add1(2)(3) == 6

    def test_explicit_arity(self):
        total = curry(lambda *args: sum(args), 3)
        assert total(1)(2)(3) == 6

    def test_defaults_not_counted(self):
        add = curry(lambda a, b=10: a + b)
        assert add(1) == 11

    def test_extra_arguments_pass_through(self):
        collect = curry(lambda a, b, *rest: (a, b, rest))
        assert collect(1)(2, 3, 4) == (1, 2, (3, 4))

    def test_zero_arity_calls_immediately(self):
        assert curry(lambda: "done")() == "done"


class TestComposition:
    """compose 从右到左，pipe 从左到右"""

    def test_compose_applies_right_to_left(self):
        inc = lambda x: x + 1  # noqa: E731
        double = lambda x: x * 2  # noqa: E731
        assert compose(inc, double)(3) == 7

    def test_pipe_applies_left_to_right(self):
        inc = lambda x: x + 1  # noqa: E731
        double = lambda x: x * 2  # noqa: E731
        assert pipe(inc, double)(3) == 8

    def test_single_function(self):
        assert compose(str)(1) == "1"
        assert pipe(str)(1) == "1"

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            compose()
        with pytest.raises(ValueError):
            pipe()


class TestDelay:
    def test_waits_at_least_duration(self):
        start = time.monotonic()
        asyncio.run(delay(30))
        assert time.monotonic() - start >= 0.025

    def test_non_positive_returns_immediately(self):
        asyncio.run(delay(0))
        asyncio.run(delay(-10))


class TestRetry:
    """失败重试"""

    def test_succeeds_after_failures(self):
        attempts = []

        def flaky():
            attempts.append(1)
            if len(attempts) < 3:
                raise ConnectionError("temporary")
            return "ok"

        assert asyncio.run(retry(flaky, times=3, delay_ms=0)) == "ok"
        assert len(attempts) == 3

    def test_raises_last_error_after_all_attempts(self):
        attempts = []

        def always_fails():
            attempts.append(1)
            raise ValueError(f"attempt {len(attempts)}")

        with pytest.raises(ValueError, match="attempt 4"):
            asyncio.run(retry(always_fails, times=4, delay_ms=0))
        assert len(attempts) == 4

    def test_awaits_coroutine_results(self):
        attempts = []

        async def fetch():
            attempts.append(1)
            if len(attempts) == 1:
                raise TimeoutError("slow")
            return 42

        assert asyncio.run(retry(fetch, times=2, delay_ms=0)) == 42
        assert len(attempts) == 2

    def test_waits_between_attempts(self):
        attempts = []

        def flaky():
            attempts.append(time.monotonic())
            if len(attempts) == 1:
                raise RuntimeError("once")
            return True

        asyncio.run(retry(flaky, times=2, delay_ms=30))
        assert attempts[1] - attempts[0] >= 0.025

    def test_single_attempt_does_not_retry(self):
        attempts = []

        def fails():
            attempts.append(1)
            raise KeyError("x")

        with pytest.raises(KeyError):
            asyncio.run(retry(fails, times=1, delay_ms=0))
        assert attempts == [1]

    @pytest.mark.parametrize("times", [0, -1])
    def test_non_positive_times_rejected(self, times):
        attempts = []

        with pytest.raises(ValueError, match="times must be positive"):
            asyncio.run(retry(lambda: attempts.append(1), times=times))
        assert attempts == []
