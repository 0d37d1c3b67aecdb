"""Dead Letter Queue for input files that failed a CLI run.

The DLQ is a JSON file (default ``logs/failed_files.json``) that accumulates
one record per input that could not be read, segmented or projected, so a
later run can pick the failures up again.

Usage:
    from tablesplit.utils.dead_letter_queue import DeadLetterQueue

    dlq = DeadLetterQueue()

    # After a failing file
    dlq.add_failure("exports/2024-01.csv", reason="FieldTypeError", error=str(exc))

    # Inspect
    failures = dlq.load()
    print(f"{len(failures)} files pending retry")

    # After a successful rerun
    dlq.remove_successes(["exports/2024-01.csv"])
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from tablesplit.config import settings

logger = logging.getLogger(__name__)


class DeadLetterQueue:
    """
    Persistent JSON-backed store for inputs that failed processing.

    Reads and writes the JSON file via a read-modify-write cycle; intended for
    a single process.

    Args:
        log_path: Path to the DLQ JSON file. Created on first write if it
            does not exist. Default: ``settings.paths.dead_letter_path``.

    Record schema:
        {
            "file": "exports/2024-01.csv",
            "timestamp": "2026-02-17T12:34:56.789012",
            "reason": "FieldMissing",
            "error": "missing field 'symbol': ...",
            "attempt_count": 1
        }
    """

    def __init__(self, log_path: Optional[Union[str, Path]] = None):
        # pylint: disable=no-member
        self.log_path = Path(log_path) if log_path is not None else settings.paths.dead_letter_path

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def add_failure(self, file_path: Union[str, Path], reason: str, error: str = "") -> None:
        """Append a single failure record."""
        self.add_failures([file_path], reason=reason, error=error)

    def add_failures(
        self,
        failed_files: List[Union[str, Path]],
        reason: str = "exception",
        error: str = "",
    ) -> None:
        """
        Append *failed_files* to the DLQ.

        A file already queued has its ``attempt_count`` bumped instead of
        being added twice.

        Args:
            failed_files: Input paths that failed.
            reason: Short failure reason, usually the exception class name.
            error: Error message.
        """
        if not failed_files:
            return

        records = self.load()
        by_file = {r["file"]: r for r in records}
        timestamp = datetime.now().isoformat()

        for item in failed_files:
            file_path = str(item)
            existing = by_file.get(file_path)
            if existing is not None:
                existing["attempt_count"] = existing.get("attempt_count", 1) + 1
                existing.update(timestamp=timestamp, reason=reason, error=error)
                continue
            record = {
                "file": file_path,
                "timestamp": timestamp,
                "reason": reason,
                "error": error,
                "attempt_count": 1,
            }
            records.append(record)
            by_file[file_path] = record

        self._save(records)
        logger.info(
            "DeadLetterQueue: wrote %d failure(s) to %s",
            len(failed_files), self.log_path,
        )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def load(self) -> List[Dict[str, Any]]:
        """
        Load all failure records from the DLQ file.

        Returns:
            List of failure record dicts. Empty list if file does not exist
            or is corrupt.
        """
        if not self.log_path.exists():
            return []
        try:
            with open(self.log_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError):
            logger.warning("Could not read DLQ %s, treating as empty", self.log_path)
            return []

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    def remove_successes(self, successful_files: List[Union[str, Path]]) -> int:
        """
        Remove entries for files that have since been processed.

        Returns:
            Number of records removed.
        """
        failures = self.load()
        success_set = {str(f) for f in successful_files}

        remaining = [f for f in failures if f["file"] not in success_set]
        removed = len(failures) - len(remaining)

        if removed:
            self._save(remaining)
            logger.info(
                "DeadLetterQueue: removed %d success(es), %d still pending",
                removed, len(remaining),
            )
        return removed

    def clear(self) -> None:
        """Delete all records from the DLQ."""
        self._save([])
        logger.info("DeadLetterQueue: cleared %s", self.log_path)

    def __len__(self) -> int:
        return len(self.load())

    def _save(self, records: List[Dict[str, Any]]) -> None:
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.log_path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2)
