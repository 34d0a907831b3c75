from __future__ import annotations
import logging
import threading
from functools import wraps
from ..types import *

logger = logging.getLogger(__name__)


def _require_callable(fn: Any, operation: str) -> None:
    if not callable(fn):
        raise TypeError(f"{operation} expects a callable, got {type(fn).__name__}")


def once(fn: Callable[[], T]) -> Callable[..., T]:
    """
    wrap fn so it runs at most one time.
    the first call invokes fn() with no arguments; every later call returns that
    first result, whatever arguments it is given.
    """
    _require_callable(fn, "once")
    guard: OnceGuard[T] = OnceGuard()

    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not guard.used:
            guard.result = fn()
            guard.used = True
        return guard.result

    wrapper.guard = guard
    return wrapper


def memoize(fn: Callable[[Any], T]) -> Callable[[Any], T]:
    """
    cache the results of a one-argument function.
    entries are keyed by str(argument), so it is meant for primitive arguments.
    """
    _require_callable(fn, "memoize")
    cache: MemoCache[T] = MemoCache()

    @wraps(fn)
    def wrapper(argument):
        if argument in cache:
            return cache.get(argument)
        return cache.store(argument, fn(argument))

    wrapper.cache = cache
    return wrapper


def delay(fn: Callable[..., Any], wait: float, *args: Any) -> None:
    """
    call fn(*args) once, after wait milliseconds, on a timer thread.
    returns immediately; a scheduled call cannot be withdrawn.
    """
    _require_callable(fn, "delay")
    seconds = max(wait, 0) / 1000

    def fire():
        logger.debug(f"delayed call to {getattr(fn, '__name__', fn)!r} firing")
        try:
            fn(*args)
        except Exception:
            logger.exception(f"delayed call to {getattr(fn, '__name__', fn)!r} failed")

    timer = threading.Timer(seconds, fire)
    timer.start()
    logger.debug(f"scheduled {getattr(fn, '__name__', fn)!r} in {seconds * 1000:.0f}ms")
