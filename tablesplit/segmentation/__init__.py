"""Table splitting modules for multi-table delimited files

Pipeline Flow:
    1. Read    → read_rows → rows
    2. Segment → TableSegmenter → TableSet
    3. Project → TableProjector → records

Quick Start:
    >>> from tablesplit.segmentation import process_file, ACCOUNT_SHAPE, TRANSACTION_SHAPE
    >>> accounts, transactions = process_file(
    ...     "exports/statement.csv", [ACCOUNT_SHAPE, TRANSACTION_SHAPE]
    ... )
    >>> print(f"Accounts: {len(accounts)}")
"""

from .errors import (
    TableSplitError,
    StreamError,
    MalformedStream,
    ProjectionError,
    FieldMissing,
    FieldTypeError,
    CellMissing,
)
from .models import (
    CsvTable,
    TableSet,
    FieldSpec,
    RecordShape,
    Account,
    Transaction,
    ACCOUNT_SHAPE,
    TRANSACTION_SHAPE,
    SHAPES,
    get_shape,
    RowResult,
    ProjectedTable,
)
from .reader import read_rows
from .segmenter import TableSegmenter, segment_tables, is_blank_row
from .projector import TableProjector, project_table, project_to_table, parse_number
from .pipeline import TableSplitPipeline, PipelineConfig, process_file
from .constants import FieldKind, DEFAULT_BLANK_RUN_LENGTH

__all__ = [
    # Errors
    'TableSplitError',
    'StreamError',
    'MalformedStream',
    'ProjectionError',
    'FieldMissing',
    'FieldTypeError',
    'CellMissing',
    # Models
    'CsvTable',
    'TableSet',
    'FieldSpec',
    'RecordShape',
    'Account',
    'Transaction',
    'ACCOUNT_SHAPE',
    'TRANSACTION_SHAPE',
    'SHAPES',
    'get_shape',
    'RowResult',
    'ProjectedTable',
    # Reader
    'read_rows',
    # Segmenter
    'TableSegmenter',
    'segment_tables',
    'is_blank_row',
    # Projector
    'TableProjector',
    'project_table',
    'project_to_table',
    'parse_number',
    # Pipeline
    'TableSplitPipeline',
    'PipelineConfig',
    'process_file',
    # Constants
    'FieldKind',
    'DEFAULT_BLANK_RUN_LENGTH',
]
