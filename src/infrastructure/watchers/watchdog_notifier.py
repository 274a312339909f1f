"""
Filesystem change notifications backed by watchdog.

watchdog delivers events on its observer thread; each event for the
watched file is handed to the subscriber's event loop, so callbacks
never run concurrently with request handlers.
"""

import asyncio
import os
from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from src.config import get_logger
from src.core.exceptions import WatchError
from src.core.interfaces.notifier import IChangeNotifier, Unsubscribe

logger = get_logger(__name__)

JOIN_TIMEOUT = 5.0


class _FileChangeHandler(FileSystemEventHandler):
    """Forwards events for one file to an asyncio loop."""

    def __init__(
        self,
        target: Path,
        loop: asyncio.AbstractEventLoop,
        on_change: Callable[[], None],
    ):
        self._target = target
        self._loop = loop
        self._on_change = on_change

    def on_modified(self, event: FileSystemEvent) -> None:
        self._forward(event, event.src_path)

    def on_created(self, event: FileSystemEvent) -> None:
        self._forward(event, event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._forward(event, event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        # Editors and atomic writers replace the file via rename
        self._forward(event, event.src_path, event.dest_path)

    def _forward(self, event: FileSystemEvent, *raw_paths: str | bytes) -> None:
        if event.is_directory:
            return
        if not any(raw and Path(os.fsdecode(raw)) == self._target for raw in raw_paths):
            return

        try:
            self._loop.call_soon_threadsafe(self._on_change)
        except RuntimeError:
            # Loop already closed during shutdown
            logger.warning("change_event_dropped", path=str(self._target))


class WatchdogChangeNotifier(IChangeNotifier):
    """One watchdog observer per subscription, on the file's directory."""

    def subscribe(self, path: Path, on_change: Callable[[], None]) -> Unsubscribe:
        loop = asyncio.get_running_loop()

        target = path.resolve()
        if not target.is_file():
            raise WatchError(path, "file does not exist")

        observer = Observer()
        observer.daemon = True
        try:
            observer.schedule(
                _FileChangeHandler(target, loop, on_change),
                str(target.parent),
                recursive=False,
            )
            observer.start()
        except OSError as e:
            raise WatchError(path, str(e)) from e

        stopped = False

        def unsubscribe() -> None:
            nonlocal stopped
            if stopped:
                return
            stopped = True
            observer.stop()
            # Runs on the event loop at shutdown. The observer wakes at least
            # once a second, so this returns long before the timeout.
            observer.join(timeout=JOIN_TIMEOUT)

        return unsubscribe
