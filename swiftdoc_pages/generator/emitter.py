"""Write planned pages concurrently and report the first failure."""

from __future__ import annotations

import logging
import os
import typing as typ
from concurrent.futures import ThreadPoolExecutor, as_completed

from swiftdoc_pages.errors import PageWriteError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from swiftdoc_pages.pages import Page

    from .planner import PlannedPage

logger = logging.getLogger(__name__)

PageWriter = typ.Callable[["Page", "Path"], object]


class ParallelEmitter:
    """Fan page writes out to a thread pool.

    Every job runs to completion; nothing is cancelled or rolled back once
    emission starts. When any job fails, the failure observed first is raised
    as :class:`PageWriteError` after all other jobs have settled, so files
    written by sibling jobs stay on disk.
    """

    def __init__(self, writer: PageWriter, *, max_workers: int | None = None) -> None:
        self.writer = writer
        self.max_workers = max_workers

    def emit(self, planned: cabc.Sequence[PlannedPage]) -> list[Path]:
        """Write every planned page and return the paths in planning order.

        Raises
        ------
        PageWriteError
            Wrapping the first write failure observed.
        """
        if not planned:
            return []
        workers = self.max_workers or min(len(planned), os.cpu_count() or 1)
        first_failure: tuple[PlannedPage, Exception] | None = None
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="swiftdoc-emit"
        ) as executor:
            futures = {
                executor.submit(self.writer, item.page, item.path): item
                for item in planned
            }
            for future in as_completed(futures):
                item = futures[future]
                try:
                    future.result()
                except Exception as exc:  # noqa: BLE001 - reported after all jobs settle
                    logger.error("Failed to write %s: %s", item.path, exc)
                    if first_failure is None:
                        first_failure = (item, exc)

        if first_failure is not None:
            item, exc = first_failure
            raise PageWriteError(item.path, str(exc)) from exc
        return [item.path for item in planned]


__all__ = ["PageWriter", "ParallelEmitter"]
