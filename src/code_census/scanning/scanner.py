"""Concurrent per-file analysis.

Each discovered file goes through text detection and metric extraction
independently on a worker thread. Workers push finished records onto a
queue; the collector drains it only after every worker has finished, and
orders the records by path so downstream aggregation never depends on
completion order.

Usage:
    scanner = FileScanner(root, workers=4)
    records = scanner.scan()
"""

from __future__ import annotations

import queue
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from threading import Lock

from ..exceptions import FileAccessError
from ..logging_config import get_logger
from .extractor import extract_record
from .models import FileRecord
from .walker import discover_files

logger = get_logger(__name__)

# Below this many files the pool costs more than it saves
_PARALLEL_THRESHOLD = 10


class FileScanner:
    """Discovers and analyzes every included file under a root directory.

    Attributes:
        analyzed_count: Files that produced a record
        skipped_count: Files dropped by text detection or content rules
        errored_count: Files dropped because they could not be read
    """

    def __init__(self, root_dir: Path, workers: int = 1, follow_symlinks: bool = False) -> None:
        self.root_dir = Path(root_dir)
        self.workers = max(workers, 1)
        self.follow_symlinks = follow_symlinks
        self._lock = Lock()  # counters only
        self.analyzed_count = 0
        self.skipped_count = 0
        self.errored_count = 0

    def scan(self) -> list[FileRecord]:
        """Analyze all included files and return their records, ordered by path."""
        files = discover_files(self.root_dir, follow_symlinks=self.follow_symlinks)
        results: queue.SimpleQueue[FileRecord] = queue.SimpleQueue()

        if self.workers == 1 or len(files) < _PARALLEL_THRESHOLD:
            for filepath in files:
                self._process(filepath, results)
        else:
            # Leaving the with-block joins every worker
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                for filepath in files:
                    executor.submit(self._process, filepath, results)

        records: list[FileRecord] = []
        while not results.empty():
            records.append(results.get_nowait())
        records.sort(key=lambda r: str(r.path))

        logger.info(
            f"Scan complete: {self.analyzed_count} analyzed, "
            f"{self.skipped_count} skipped, {self.errored_count} errors"
        )
        return records

    def _process(self, filepath: Path, results: queue.SimpleQueue) -> None:
        try:
            record = extract_record(filepath, self.root_dir)
        except FileAccessError as e:
            self._count("errored")
            logger.debug(f"Access error for {filepath}: {e.reason}")
            return
        except Exception as e:
            self._count("errored")
            logger.debug(f"Unexpected error analyzing {filepath}: {e}")
            return

        if record is None:
            self._count("skipped")
            return

        results.put(record)
        self._count("analyzed")

    def _count(self, outcome: str) -> None:
        with self._lock:
            attr = f"{outcome}_count"
            setattr(self, attr, getattr(self, attr) + 1)
