"""Shared utilities."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Coroutine, TypeVar

logger = logging.getLogger(__name__)

_R = TypeVar("_R")


class DeadlineExceeded(Exception):
    """The deadline passed, or the caller went away, before the work finished."""


async def _watch(
    timeout: float,
    is_disconnected: Callable[[], Awaitable[bool]],
    poll_interval: float,
) -> None:
    """Return once ``timeout`` seconds elapse or ``is_disconnected()`` reports True."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while True:
        remaining = deadline - loop.time()
        if remaining <= 0:
            return
        if await is_disconnected():
            logger.debug("Client disconnected before work completed")
            return
        await asyncio.sleep(min(poll_interval, remaining))


async def run_with_deadline(
    work: Coroutine[object, object, _R],
    timeout: float,
    is_disconnected: Callable[[], Awaitable[bool]],
    poll_interval: float = 0.25,
) -> _R:
    """Race ``work`` against a deadline/disconnect watcher.

    The loser is cancelled and awaited before returning, so a slow upstream
    call is aborted rather than left running. If ``work`` wins, its result is
    returned (or its exception re-raised); otherwise DeadlineExceeded is raised.
    """
    work_task = asyncio.ensure_future(work)
    watch_task = asyncio.ensure_future(_watch(timeout, is_disconnected, poll_interval))
    try:
        await asyncio.wait({work_task, watch_task}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in (work_task, watch_task):
            if not task.done():
                task.cancel()
        await asyncio.gather(work_task, watch_task, return_exceptions=True)

    if work_task.cancelled():
        logger.info("Abandoned in-flight work after deadline")
        raise DeadlineExceeded(f"no result within {timeout}s")
    return work_task.result()
