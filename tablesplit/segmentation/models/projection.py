"""
Pydantic models for projection results.

Contains the per-row outcome used by collect mode and the per-table result
returned by the pipeline.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

from ..errors import ProjectionError


class RowResult(BaseModel):
    """Outcome of projecting one body row"""
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    row_index: int
    record: Any = None
    error: Optional[ProjectionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ProjectedTable(BaseModel):
    """
    Records projected from one table of a TableSet

    Attributes:
        table_index: Position of the table in its TableSet
        shape_name: Name of the shape the rows were projected onto
        records: Successfully projected records, in body row order
        failures: Rows that failed coercion (collect mode only)
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    table_index: int
    shape_name: str
    records: List[Any] = []
    failures: List[RowResult] = []

    def __len__(self) -> int:
        return len(self.records)

    def to_dict(self) -> dict:
        """JSON-friendly view; pydantic records are dumped to dicts"""
        return {
            'table_index': self.table_index,
            'shape': self.shape_name,
            'records': [
                r.model_dump() if isinstance(r, BaseModel) else r
                for r in self.records
            ],
            'failures': [
                {'row_index': f.row_index, 'error': str(f.error)}
                for f in self.failures
            ],
        }
