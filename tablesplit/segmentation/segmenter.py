"""
Segmenter module for multi-table delimited files
Splits one row stream into the tables embedded in it
"""

import csv
import logging
from typing import Iterable, List, Optional, Sequence

from tablesplit.config import settings

from .constants import BLANK_ROW
from .errors import StreamError
from .models import CsvTable, TableSet

logger = logging.getLogger(__name__)


def is_blank_row(row: Sequence[str]) -> bool:
    """
    A row is blank iff it holds exactly one field and that field is empty.

    Rows with zero fields, or with several empty fields, are data.
    """
    return tuple(row) == BLANK_ROW


class TableSegmenter:
    """Segments a row stream into tables separated by runs of blank rows"""

    def __init__(self, blank_run_length: int | None = None):
        """
        Initialize the segmenter

        Args:
            blank_run_length: Consecutive blank rows that terminate a table
                (default from settings)
        """
        # pylint: disable=no-member
        self.blank_run_length = (
            blank_run_length if blank_run_length is not None
            else settings.segmentation.blank_run_length
        )
        # pylint: enable=no-member
        if self.blank_run_length < 1:
            raise ValueError(f"blank_run_length must be >= 1, got {self.blank_run_length}")

    def segment(self, rows: Iterable[Sequence[str]], source: Optional[str] = None) -> TableSet:
        """
        Partition rows into tables in a single forward pass

        The first row of every table is its header, whatever it holds. Once a
        table has a header, blank rows are counted: a run shorter than
        blank_run_length is dropped, and the row completing the run seals the
        table and is itself discarded. The next row starts a new table.

        Args:
            rows: Row source, each row a sequence of string fields
            source: Optional label recorded on the TableSet

        Returns:
            TableSet: Tables in order of appearance

        Raises:
            StreamError: If the row source fails while producing a row
        """
        tables: List[CsvTable] = []
        header: Sequence[str] = ()
        body: List[Sequence[str]] = []
        blank_run = 0
        table_cursor = 0
        row_number = 0

        iterator = iter(rows)
        while True:
            try:
                row = next(iterator)
            except StopIteration:
                break
            except (csv.Error, UnicodeDecodeError, OSError) as e:
                raise StreamError(f"Failed to read row: {e}", row_number=row_number + 1) from e
            row_number += 1

            if table_cursor == 0:
                header = row
                table_cursor = 1
                continue

            blank = is_blank_row(row)
            blank_run = blank_run + 1 if blank else 0

            if blank_run == self.blank_run_length:
                tables.append(self._seal(header, body, len(tables)))
                header, body = (), []
                table_cursor = 0
                blank_run = 0
                continue

            table_cursor += 1
            if not blank:
                body.append(row)

        if table_cursor > 0:
            tables.append(self._seal(header, body, len(tables)))

        logger.info(f"Segmented {row_number} rows into {len(tables)} table(s)")
        return TableSet(tables=tables, source=source)

    @staticmethod
    def _seal(header: Sequence[str], body: List[Sequence[str]], index: int) -> CsvTable:
        table = CsvTable(header=header, rows=body)
        logger.debug(f"Sealed table {index}: {table.width} columns, {len(table)} rows")
        return table


def segment_tables(rows: Iterable[Sequence[str]], source: Optional[str] = None) -> TableSet:
    """
    Convenience function to segment a row stream with default settings

    Args:
        rows: Row source, each row a sequence of string fields
        source: Optional label recorded on the TableSet

    Returns:
        TableSet: Tables in order of appearance
    """
    segmenter = TableSegmenter()
    return segmenter.segment(rows, source=source)
