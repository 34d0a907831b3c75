import logging
import threading
import time

import suite
from underbar import once, memoize, delay, OnceGuard, MemoCache

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


# once() tests

@test("once runs the function a single time")
def test_once_single_call():
    calls = []

    def compute():
        calls.append(1)
        return {'answer': 42}

    wrapped = once(compute)
    results = [wrapped(), wrapped(), wrapped()]
    assert_equal(len(calls), 1, "underlying function runs once")
    assert_that(results[0] is results[1] is results[2], "every call returns the same object")


@test("once ignores arguments passed to the wrapper")
def test_once_ignores_args():
    wrapped = once(lambda: 'first')
    assert_equal(wrapped(1, 2, key='v'), 'first', "arguments are not forwarded")
    assert_equal(wrapped('other'), 'first', "later arguments change nothing")


@test("once caches a None result without re-running")
def test_once_none_result():
    calls = []
    wrapped = once(lambda: calls.append(1))
    wrapped()
    wrapped()
    assert_equal(len(calls), 1, "a None result still counts as used")


@test("once exposes its guard")
def test_once_guard():
    wrapped = once(lambda: 7)
    assert_that(isinstance(wrapped.guard, OnceGuard), "guard should be a OnceGuard")
    assert_that(not wrapped.guard.used, "unused before the first call")
    wrapped()
    assert_that(wrapped.guard.used, "used after the first call")
    assert_equal(wrapped.guard.result, 7, "guard holds the result")


@test("once guards are never shared")
def test_once_independent():
    a = once(lambda: 'a')
    b = once(lambda: 'b')
    assert_equal((a(), b()), ('a', 'b'), "each wrapper has its own state")
    assert_that(a.guard is not b.guard, "distinct guards")


# memoize() tests

@test("memoize computes once per argument")
def test_memoize_basic():
    calls = []

    def square(x):
        calls.append(x)
        return x * x

    fast = memoize(square)
    assert_equal(fast(4), 16, "first call computes")
    assert_equal(fast(4), 16, "second call is cached")
    assert_equal(calls, [4], "underlying function ran once")
    fast(5)
    assert_equal(calls, [4, 5], "new argument computes")


@test("memoize keys on the string form of the argument")
def test_memoize_string_keys():
    fast = memoize(lambda x: type(x).__name__)
    assert_equal(fast(1), 'int', "computed for the int")
    assert_equal(fast('1'), 'int', "'1' shares the entry for 1")
    assert_equal(len(fast.cache), 1, "a single cache entry")


@test("memoize caches falsy results")
def test_memoize_falsy():
    calls = []
    fast = memoize(lambda x: calls.append(x))
    fast('k')
    fast('k')
    assert_equal(calls, ['k'], "None result is cached too")


@test("memoize caches are private to each wrapper")
def test_memoize_independent():
    a = memoize(lambda x: x + 1)
    b = memoize(lambda x: x + 2)
    assert_equal((a(1), b(1)), (2, 3), "separate caches")
    assert_that(isinstance(a.cache, MemoCache) and a.cache is not b.cache, "distinct caches")


@test("memoize keeps the wrapped function's name")
def test_memoize_wraps():
    def fibonacci(n):
        return n if n < 2 else fibonacci(n - 1) + fibonacci(n - 2)
    fast = memoize(fibonacci)
    assert_equal(fast.__name__, 'fibonacci', "functools.wraps keeps the name")
    assert_equal(fast(20), 6765, "still computes correctly")


# delay() tests

@test("delay calls the function later with its arguments")
def test_delay_args():
    fired = threading.Event()
    received = []

    def target(a, b):
        received.append((a, b))
        fired.set()

    started = time.perf_counter()
    result = delay(target, 50, 'a', 'b')
    assert_that(result is None, "no handle is returned")
    assert_equal(received, [], "nothing runs synchronously")
    assert_that(fired.wait(timeout=5), "the call should fire")
    assert_that(time.perf_counter() - started >= 0.04, "not before the wait elapses")
    assert_equal(received, [('a', 'b')], "arguments are forwarded")


@test("delay clamps negative waits")
def test_delay_negative():
    fired = threading.Event()
    delay(fired.set, -100)
    assert_that(fired.wait(timeout=5), "should fire right away")


@test("delay logs failures of the deferred call once")
def test_delay_logs_failure():
    done = threading.Event()
    records = []
    hook_calls = []

    class _Capture(logging.Handler):
        def emit(self, record):
            records.append(record)
            done.set()

    logger = logging.getLogger('underbar.extensions.functions')
    handler = _Capture(level=logging.ERROR)
    logger.addHandler(handler)
    previous_hook = threading.excepthook
    threading.excepthook = hook_calls.append
    try:
        def explode():
            raise RuntimeError("boom")
        delay(explode, 0)
        assert_that(done.wait(timeout=5), "failure should be logged")
        for thread in threading.enumerate():
            if isinstance(thread, threading.Timer):
                thread.join(timeout=5)
        assert_equal(len(records), 1, "logged exactly once")
        assert_that('explode' in records[0].getMessage(), "message names the function")
        assert_equal(hook_calls, [], "the error does not escape the timer thread")
    finally:
        threading.excepthook = previous_hook
        logger.removeHandler(handler)


@test("combinators reject non-callables")
def test_combinators_type_errors():
    assert_raises(TypeError, once, 5)
    assert_raises(TypeError, memoize, 'nope')
    assert_raises(TypeError, delay, None, 10)


if __name__ == "__main__":
    suite.main(title="underbar function combinators test suite")
