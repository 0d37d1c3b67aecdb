"""
Pydantic data models for the table splitting pipeline.

Organized by stage:
- table: CsvTable, TableSet
- shape: FieldSpec, RecordShape
- records: Account, Transaction and their shapes
- projection: RowResult, ProjectedTable
"""
from .table import CsvTable, TableSet
from .shape import FieldSpec, RecordShape
from .records import (
    Account,
    Transaction,
    ACCOUNT_SHAPE,
    TRANSACTION_SHAPE,
    SHAPES,
    get_shape,
)
from .projection import RowResult, ProjectedTable

__all__ = [
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
]
