"""Drive non-suspending coroutines from blocking code."""

from __future__ import annotations

import typing

_T = typing.TypeVar("_T")


def iter_coroutine(coro: typing.Coroutine[None, None, _T]) -> _T:
    """Run ``coro`` to completion without an event loop.

    The blocking clients share their request logic with the async clients as
    ``async def`` methods. With a blocking transport those coroutines never
    await anything that suspends, so a single ``send(None)`` finishes them.

    Raises:
        RuntimeError: If ``coro`` suspends, i.e. it needs a real event loop.
    """
    try:
        coro.send(None)
    except StopIteration as done:
        return done.value  # type: ignore [no-any-return]
    finally:
        coro.close()
    raise RuntimeError(f"{coro!r} suspended; it cannot run without an event loop")


__all__ = ["iter_coroutine"]
