"""Node-style callback support on top of awaitables."""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

T = TypeVar("T")

Callback = Callable[[BaseException | None, Any], Any]


async def deliver(result: Awaitable[T], callback: Callback | None = None) -> T | None:
    """Await ``result`` and optionally hand the outcome to ``callback``.

    Without a callback the awaited value is returned and errors propagate.
    With a callback it is invoked as ``callback(None, value)`` on success or
    ``callback(exc, None)`` on failure; the error is then considered handled.
    Coroutine callbacks are awaited.
    """
    if callback is None:
        return await result

    try:
        value = await result
    except Exception as e:
        outcome = callback(e, None)
        if inspect.isawaitable(outcome):
            await outcome
        return None

    outcome = callback(None, value)
    if inspect.isawaitable(outcome):
        await outcome
    return value


async def maybe_await(value: Any) -> Any:
    """Await ``value`` when it is awaitable, otherwise return it."""
    if inspect.isawaitable(value):
        return await value
    return value
