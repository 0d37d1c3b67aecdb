"""
Table Splitting Pipeline

Orchestrates the complete flow for one file:
1. Read    - Split the file into raw rows
2. Segment - Partition rows into tables
3. Project - Map tables, by position, onto record shapes
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from tablesplit.config import settings

from .models import ProjectedTable, RecordShape, TableSet
from .projector import project_to_table
from .reader import read_rows
from .segmenter import TableSegmenter

logger = logging.getLogger(__name__)


class PipelineConfig(BaseModel):
    """
    Configuration for the table splitting pipeline (Pydantic V2)

    Attributes:
        delimiter: Field separator (None = use default from settings)
        quotechar: Quote character (None = use default from settings)
        encoding: Text encoding of input files (None = use default from settings)
        blank_run_length: Blank rows that terminate a table (None = use default from settings)
        fail_fast: Abort a table on its first bad row (None = use default from settings)
    """
    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',  # Raise error on unknown fields
    )

    delimiter: Optional[str] = Field(default=None, min_length=1, max_length=1)
    quotechar: Optional[str] = Field(default=None, min_length=1, max_length=1)
    encoding: Optional[str] = Field(default=None, description="Text encoding of input files")
    blank_run_length: Optional[int] = Field(
        default=None,
        ge=1,
        description="Consecutive blank rows that terminate a table"
    )
    fail_fast: Optional[bool] = Field(
        default=None,
        description="Abort a table on the first row that fails coercion"
    )


class TableSplitPipeline:
    """
    Complete pipeline for multi-table delimited files

    Flow: Read → Segment → Project

    Example:
        >>> from tablesplit.segmentation.models import ACCOUNT_SHAPE, TRANSACTION_SHAPE
        >>> pipeline = TableSplitPipeline()
        >>> results = pipeline.process_file(
        ...     "data/raw/export.csv",
        ...     [ACCOUNT_SHAPE, TRANSACTION_SHAPE],
        ... )
        >>> print(f"Accounts: {len(results[0])}")
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        """
        Initialize the pipeline

        Args:
            config: Pipeline configuration. Uses defaults if not provided.
        """
        self.config = config or PipelineConfig()
        self.segmenter = TableSegmenter(blank_run_length=self.config.blank_run_length)

    @property
    def encoding(self) -> str:
        # pylint: disable=no-member
        return self.config.encoding or settings.segmentation.encoding

    def read_tables(self, file_path: Union[str, Path]) -> TableSet:
        """
        Read and segment one file

        Args:
            file_path: Path to the delimited file

        Returns:
            TableSet labelled with the file path

        Raises:
            FileNotFoundError: If file_path does not exist
            StreamError: If the file cannot be decoded or split into rows
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        logger.info(f"Reading tables from {file_path}")
        with open(file_path, 'r', encoding=self.encoding, newline='') as f:
            rows = read_rows(f, delimiter=self.config.delimiter, quotechar=self.config.quotechar)
            return self.segmenter.segment(rows, source=str(file_path))

    def project_tables(
        self,
        table_set: TableSet,
        shapes: Sequence[Optional[RecordShape]],
    ) -> List[ProjectedTable]:
        """
        Project tables by position onto shapes

        shapes[i] applies to table i. None entries, and shapes past the last
        table, are skipped.

        Raises:
            FieldMissing: If a table lacks a column its shape needs
            FieldTypeError: If a value fails coercion (fail-fast mode only)
        """
        results = []
        for index, shape in enumerate(shapes):
            if shape is None:
                continue
            table = table_set.get(index)
            if table is None:
                logger.warning(
                    f"No table at position {index} for shape '{shape.name}' "
                    f"({len(table_set)} table(s) found)"
                )
                continue
            results.append(
                project_to_table(table, shape, table_index=index, fail_fast=self.config.fail_fast)
            )
        return results

    def process_file(
        self,
        file_path: Union[str, Path],
        shapes: Sequence[Optional[RecordShape]],
    ) -> List[ProjectedTable]:
        """Read, segment and project one file."""
        return self.project_tables(self.read_tables(file_path), shapes)


def process_file(
    file_path: Union[str, Path],
    shapes: Sequence[Optional[RecordShape]],
) -> List[ProjectedTable]:
    """
    Convenience function to process one file with default settings

    Args:
        file_path: Path to the delimited file
        shapes: Record shapes aligned with table positions

    Returns:
        One ProjectedTable per shape that found its table
    """
    return TableSplitPipeline().process_file(file_path, shapes)
