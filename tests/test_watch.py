"""Tests for directory watching."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from assets_catalog.watch import DirectoryWatcher, is_ignored, take_snapshot


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
    root = tmp_path / "assets"
    root.mkdir()
    (root / "logo.png").write_bytes(b"png")
    return root


class TestIsIgnored:
    """Test change filtering."""

    def test_hidden_files(self) -> None:
        assert is_ignored(".DS_Store")
        assert is_ignored("icons/.logo.png.swp")
        assert is_ignored(".git/index")

    def test_editor_backups(self) -> None:
        assert is_ignored("logo.png~")

    def test_regular_files(self) -> None:
        assert not is_ignored("icons/logo.png")


class TestTakeSnapshot:
    """Test snapshots."""

    def test_records_files(self, asset_dir: Path) -> None:
        assert list(take_snapshot(asset_dir)) == ["logo.png"]

    def test_excludes_paths(self, asset_dir: Path) -> None:
        out = asset_dir / "catalog.ts"
        out.write_text("x")

        assert "catalog.ts" not in take_snapshot(asset_dir, exclude={out})


class TestDirectoryWatcher:
    """Test debounced change detection."""

    def test_no_change_no_callback(self, asset_dir: Path) -> None:
        callback = Mock()
        watcher = DirectoryWatcher(asset_dir, callback, clock=FakeClock())

        assert watcher.poll() is False
        callback.assert_not_called()

    def test_fires_after_quiet_period(self, asset_dir: Path) -> None:
        callback = Mock()
        clock = FakeClock()
        watcher = DirectoryWatcher(asset_dir, callback, debounce=0.3, clock=clock)

        (asset_dir / "new.png").write_bytes(b"new")
        assert watcher.poll() is False
        assert watcher.pending

        clock.now = 0.1
        assert watcher.poll() is False

        clock.now = 0.5
        assert watcher.poll() is True
        callback.assert_called_once_with()
        assert not watcher.pending

    def test_burst_restarts_debounce(self, asset_dir: Path) -> None:
        """Test that a change during the quiet period delays the callback."""
        callback = Mock()
        clock = FakeClock()
        watcher = DirectoryWatcher(asset_dir, callback, debounce=0.3, clock=clock)

        (asset_dir / "a.png").write_bytes(b"a")
        watcher.poll()

        clock.now = 0.2
        (asset_dir / "b.png").write_bytes(b"b")
        watcher.poll()

        clock.now = 0.4
        assert watcher.poll() is False

        clock.now = 0.6
        assert watcher.poll() is True
        assert callback.call_count == 1

    def test_hidden_changes_ignored(self, asset_dir: Path) -> None:
        callback = Mock()
        clock = FakeClock()
        watcher = DirectoryWatcher(asset_dir, callback, clock=clock)

        (asset_dir / ".tmp").write_bytes(b"x")
        clock.now = 10.0

        assert watcher.poll() is False
        callback.assert_not_called()

    def test_excluded_output_ignored(self, asset_dir: Path) -> None:
        """Test that writing the generated module doesn't retrigger."""
        callback = Mock()
        clock = FakeClock()
        out = asset_dir / "catalog.ts"
        watcher = DirectoryWatcher(asset_dir, callback, exclude=(out,), clock=clock)

        out.write_text("generated")
        clock.now = 10.0

        assert watcher.poll() is False

    def test_run_until_stopped(self, asset_dir: Path) -> None:
        sleep = Mock()
        stops = iter([False, False, True])
        watcher = DirectoryWatcher(asset_dir, Mock(), clock=FakeClock(), sleep=sleep)

        watcher.run(should_stop=lambda: next(stops))

        assert sleep.call_count == 2
