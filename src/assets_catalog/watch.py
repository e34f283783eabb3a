"""Directory watching for continuous regeneration.

The watcher polls the asset directory for (mtime, size) changes and
calls back once the directory has been quiet for the debounce period.
Callbacks run on the polling thread, so only one runs at a time.
"""

import time
from collections.abc import Collection
from pathlib import Path
from typing import Callable, Optional

from .platforms.filesystem import walk_files

DEBOUNCE_SECONDS = 0.3
POLL_INTERVAL_SECONDS = 0.5

Snapshot = dict[str, tuple[float, int]]


def is_ignored(relative_path: str) -> bool:
    """Hidden files and editor temp files don't trigger regeneration."""
    parts = relative_path.split("/")
    return any(part.startswith(".") for part in parts) or "~" in parts[-1]


def take_snapshot(root: Path, exclude: Collection[Path] = ()) -> Snapshot:
    """Record (mtime, size) for every watched file under ``root``."""
    state: Snapshot = {}

    for file_path in walk_files(root):
        relative = file_path.relative_to(root).as_posix()
        if is_ignored(relative) or file_path in exclude:
            continue
        try:
            stat_info = file_path.stat()
        except FileNotFoundError:
            # Removed between listing and stat
            continue
        state[relative] = (stat_info.st_mtime, stat_info.st_size)

    return state


class DirectoryWatcher:
    """Poll a directory and fire ``on_change`` after changes settle.

    Example:
        >>> watcher = DirectoryWatcher(Path('src/assets'), regenerate)
        >>> watcher.run()  # blocks until interrupted
    """

    def __init__(
        self,
        root: Path,
        on_change: Callable[[], None],
        exclude: Collection[Path] = (),
        interval: float = POLL_INTERVAL_SECONDS,
        debounce: float = DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.root = root.resolve()
        self.on_change = on_change
        self.exclude = frozenset(p.resolve() for p in exclude)
        self.interval = interval
        self.debounce = debounce
        self.clock = clock
        self.sleep = sleep
        self._snapshot = take_snapshot(self.root, self.exclude)
        self._changed_at: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self._changed_at is not None

    def poll(self) -> bool:
        """Check for changes once.

        Returns:
            True if ``on_change`` was called during this poll
        """
        now = self.clock()
        current = take_snapshot(self.root, self.exclude)
        if current != self._snapshot:
            self._snapshot = current
            self._changed_at = now

        if self._changed_at is None or now - self._changed_at < self.debounce:
            return False

        self._changed_at = None
        self.on_change()
        return True

    def run(self, should_stop: Callable[[], bool] = lambda: False) -> None:
        """Poll until ``should_stop`` returns True."""
        while not should_stop():
            self.poll()
            self.sleep(self.interval)
