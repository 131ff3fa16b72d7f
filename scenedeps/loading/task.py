# scenedeps/loading/task.py
from __future__ import annotations

import asyncio
from typing import Awaitable, Generic, List, Optional, Sequence, TypeVar

from scenedeps.loading.download import Download, DownloadTaskError

D = TypeVar("D", bound=Download)


class DownloadTask(Generic[D]):
    """
    One-shot wrapper around a pending download.

    `load()` awaits the wrapped operation and keeps its result, so a batch of
    tasks of different kinds can be awaited together and read back through
    `download` afterwards.
    """

    def __init__(self, pending: Awaitable[D]) -> None:
        self._pending = pending
        self._started = False
        self._loaded = False
        self._download: Optional[D] = None

    @property
    def download(self) -> Optional[D]:
        """The finished download, None until `load()` completes."""
        return self._download

    @property
    def loaded(self) -> bool:
        return self._loaded

    async def load(self) -> None:
        if self._started:
            raise DownloadTaskError("DownloadTask.load() can only run once")
        self._started = True
        self._download = await self._pending
        self._loaded = True


async def load_all(tasks: Sequence[DownloadTask[D]]) -> List[Optional[D]]:
    """Load every task concurrently. Results keep the order of `tasks`."""
    await asyncio.gather(*(task.load() for task in tasks))
    return [task.download for task in tasks]
