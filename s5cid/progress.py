"""
Hashing progress — rich live bars for `s5cid hash`.

One overall bar counts hashed bytes across every file and shows the CID of
the file finished last; a second bar follows the file being hashed.

    tracker = ProgressTracker(total_files=2, total_bytes=sum_of_sizes)
    tracker.start()

    with tracker.file("video.mp4", size=104857600) as fp:
        cid = cid_for_file(path, on_progress=fp.advance)
        fp.done(encode_with_prefix("z", cid))

    tracker.stop()

Output goes to stderr so the CID listing on stdout stays pipeable.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)

_CID_PREVIEW: int = 20      # chars of the last CID shown on the overall bar


class FileProgress:
    """Per-file handle: feed it hasher byte counts, then the finished CID."""

    def __init__(self, tracker: ProgressTracker, task_id: TaskID, expected: int) -> None:
        self._tracker = tracker
        self._task_id = task_id
        self.expected = expected
        self.hashed = 0
        self.cid_text: str | None = None

    def advance(self, n: int) -> None:
        """Account for *n* more bytes pushed through BLAKE3."""
        self.hashed += n
        self._tracker._advance(self._task_id, n)

    def done(self, cid_text: str) -> None:
        self.cid_text = cid_text

    def finish(self) -> None:
        # the file may have grown or shrunk since it was stat()ed
        self._tracker._settle(self._task_id, self.expected, self.hashed, self.cid_text)


class ProgressTracker:
    """Overall BLAKE3 throughput plus the file currently being hashed."""

    def __init__(self, total_files: int, total_bytes: int) -> None:
        self.total_files = total_files
        self.files_done = 0
        self._total_bytes = total_bytes
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold cyan]{task.description}[/]"),
            BarColumn(bar_width=None),
            DownloadColumn(),
            TransferSpeedColumn(),
            TimeRemainingColumn(),
            TextColumn("[dim]{task.fields[detail]}"),
            console=Console(stderr=True),
            expand=True,
        )
        self._overall_id = self._progress.add_task(
            self._overall_label(),
            total=max(total_bytes, 1),
            detail="",
        )

    def _overall_label(self) -> str:
        return f"BLAKE3 {self.files_done}/{self.total_files}"

    def start(self) -> None:
        self._progress.start()

    def stop(self) -> None:
        self._progress.stop()

    def _advance(self, task_id: TaskID, n: int) -> None:
        self._progress.advance(task_id, n)
        self._progress.advance(self._overall_id, n)

    def _settle(self, task_id: TaskID, expected: int, hashed: int,
                cid_text: str | None) -> None:
        self.files_done += 1
        self._total_bytes += hashed - expected
        detail = f"{cid_text[:_CID_PREVIEW]}…" if cid_text else ""
        self._progress.update(
            self._overall_id,
            description=self._overall_label(),
            total=max(self._total_bytes, 1),
            detail=detail,
        )
        self._progress.remove_task(task_id)

    @contextmanager
    def file(self, filename: str, size: int) -> Generator[FileProgress, None, None]:
        """Context manager around hashing one file."""
        task_id = self._progress.add_task(filename, total=max(size, 1), detail="")
        fp = FileProgress(self, task_id, size)
        try:
            yield fp
        finally:
            fp.finish()


class NullProgress:
    """Drop-in no-op replacement when --quiet is set."""

    def start(self) -> None: ...
    def stop(self) -> None: ...

    @contextmanager
    def file(self, filename: str, size: int) -> Generator[FileProgress, None, None]:
        class _NopFP:
            def advance(self, n: int) -> None: ...
            def done(self, cid_text: str) -> None: ...
            def finish(self) -> None: ...
        yield _NopFP()  # type: ignore[misc]
