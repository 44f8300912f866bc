"""
Infrastructure helper: durable local persistence of parameter values.

Every blocking call runs through asyncio.to_thread so the event loop can
interleave the per-parameter writes of one batch. Data is flushed and
fsync'ed before the handle is closed, so a process watching the file (or
started right after) never sees a partial write. A failure to close an
already-synced handle is reported, not raised.
"""

import asyncio
import logging
import os
from typing import Any, Awaitable, BinaryIO, Callable

from src.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def _open_for_replace(target: str) -> BinaryIO:
    parent = os.path.dirname(os.path.abspath(target))
    os.makedirs(parent, exist_ok=True)
    return open(target, "wb")


def _write_and_sync(handle: BinaryIO, data: bytes) -> None:
    handle.write(data)
    handle.flush()
    os.fsync(handle.fileno())


async def write_durably(
    target: str,
    text: str,
    on_close_error: Callable[[Exception], Awaitable[Any]],
) -> None:
    """Replace *target* with *text* (UTF-8) and force it to stable storage.

    Missing parent directories are created. Text that cannot be encoded is
    rejected before the target is opened, so an existing file stays intact.
    Any failure up to and including the fsync raises PersistenceError; a
    failing close() is handed to *on_close_error* instead.
    """
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PersistenceError(target, exc) from exc

    try:
        handle = await asyncio.to_thread(_open_for_replace, target)
    except OSError as exc:
        raise PersistenceError(target, exc) from exc

    try:
        await asyncio.to_thread(_write_and_sync, handle, data)
    except OSError as exc:
        raise PersistenceError(target, exc) from exc
    finally:
        try:
            await asyncio.to_thread(handle.close)
        except OSError as exc:
            await on_close_error(exc)
    logger.debug("Persisted %d bytes to %s", len(data), target)


async def remove_file(target: str) -> None:
    """Delete *target*; a missing or locked file raises PersistenceError."""
    try:
        await asyncio.to_thread(os.remove, target)
    except OSError as exc:
        raise PersistenceError(target, exc) from exc
    logger.debug("Removed %s", target)
