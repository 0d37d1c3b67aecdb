"""
Projector module for segmented tables
Maps a table's body rows onto a caller-supplied record shape by header name
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from tablesplit.config import settings

from .constants import FieldKind
from .errors import CellMissing, FieldMissing, FieldTypeError
from .models import CsvTable, FieldSpec, ProjectedTable, RecordShape, RowResult

logger = logging.getLogger(__name__)


def parse_number(field_name: str, raw: str, row_index: Optional[int] = None) -> float:
    """
    Parse raw cell text as a decimal floating-point value

    Empty text, surrounding whitespace and digit-group underscores are
    rejected along with anything float() cannot read.

    Raises:
        FieldTypeError: If raw cannot be parsed
    """
    if not raw or raw != raw.strip() or '_' in raw:
        raise FieldTypeError(field_name, raw, row_index)
    try:
        return float(raw)
    except ValueError:
        raise FieldTypeError(field_name, raw, row_index) from None


class TableProjector:
    """Projects the body rows of a CsvTable onto a RecordShape"""

    def __init__(self, shape: RecordShape):
        self.shape = shape

    def resolve_columns(self, table: CsvTable) -> List[Tuple[FieldSpec, int]]:
        """
        Match every shape field to a header column

        A field matches the leftmost column whose name equals the field name
        or one of its aliases, compared exactly.

        Raises:
            FieldMissing: If a field matches no header column
        """
        resolved = []
        for spec in self.shape.fields:
            spellings = set(spec.spellings)
            index = next(
                (i for i, column in enumerate(table.header) if column in spellings),
                None,
            )
            if index is None:
                raise FieldMissing(spec.name, spec.aliases)
            resolved.append((spec, index))
        return resolved

    def project(self, table: CsvTable) -> List[Any]:
        """
        Convert every body row into a record, stopping at the first failure

        Raises:
            FieldMissing: If a shape field has no matching header
            FieldTypeError: If a matched value cannot be coerced
            CellMissing: If a body row is too short to reach a matched column
        """
        columns = self.resolve_columns(table)
        records = [self._build(row, i, columns) for i, row in enumerate(table.rows)]
        logger.debug(f"Projected {len(records)} row(s) onto shape '{self.shape.name}'")
        return records

    def project_rows(self, table: CsvTable) -> List[RowResult]:
        """
        Convert body rows independently, collecting one result per row

        Raises:
            FieldMissing: If a shape field has no matching header
        """
        columns = self.resolve_columns(table)
        results = []
        for i, row in enumerate(table.rows):
            try:
                results.append(RowResult(row_index=i, record=self._build(row, i, columns)))
            except (FieldTypeError, CellMissing) as e:
                logger.warning(f"Shape '{self.shape.name}': {e}")
                results.append(RowResult(row_index=i, error=e))
        return results

    def _build(
        self,
        row: Sequence[str],
        row_index: int,
        columns: List[Tuple[FieldSpec, int]],
    ) -> Any:
        values: Dict[str, Any] = {}
        for spec, index in columns:
            if index >= len(row):
                raise CellMissing(spec.name, index, row_index)
            raw = row[index]
            if spec.kind == FieldKind.NUMBER:
                values[spec.name] = parse_number(spec.name, raw, row_index)
            else:
                values[spec.name] = raw
        return self.shape.build(values)


def project_table(table: CsvTable, shape: RecordShape) -> List[Any]:
    """
    Convenience function to project a table fail-fast

    Args:
        table: Segmented table
        shape: Target record shape

    Returns:
        List of records, one per body row
    """
    return TableProjector(shape).project(table)


def project_to_table(
    table: CsvTable,
    shape: RecordShape,
    table_index: int = 0,
    fail_fast: bool | None = None,
) -> ProjectedTable:
    """
    Project a table and wrap the outcome with its position and shape name

    Args:
        table: Segmented table
        shape: Target record shape
        table_index: Position of the table in its TableSet
        fail_fast: Abort on the first bad row (default from settings); when
            False, bad rows are reported in ProjectedTable.failures

    Returns:
        ProjectedTable
    """
    # pylint: disable=no-member
    if fail_fast is None:
        fail_fast = settings.projection.fail_fast
    # pylint: enable=no-member

    projector = TableProjector(shape)
    if fail_fast:
        return ProjectedTable(
            table_index=table_index,
            shape_name=shape.name,
            records=projector.project(table),
        )

    results = projector.project_rows(table)
    return ProjectedTable(
        table_index=table_index,
        shape_name=shape.name,
        records=[r.record for r in results if r.ok],
        failures=[r for r in results if not r.ok],
    )
