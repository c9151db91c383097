"""Bridging resolver coroutines into synchronous logging code."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

T = TypeVar("T")


def run_async_safely(coro: Coroutine[Any, Any, T], timeout: float | None = None) -> T:
    """
    Run ``coro`` to completion from a sync context and return its result.

    Without a running event loop this is ``asyncio.run()``.  Inside one
    (a request handler, Jupyter) the coroutine gets a fresh loop on a worker
    thread instead, since the current loop cannot be re-entered.

    Args:
        coro: Coroutine to run.
        timeout: Seconds before ``asyncio.TimeoutError`` is raised. None waits forever.
    """
    if timeout is not None:
        coro = asyncio.wait_for(coro, timeout)

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(asyncio.run, coro).result()
