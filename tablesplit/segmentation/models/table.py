"""
Pydantic models for segmented tables.

Contains data structures for a single embedded table and the ordered set of
tables recovered from one source stream.
"""

import json
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict


class CsvTable(BaseModel):
    """
    One table recovered from a multi-table stream

    Attributes:
        header: Column names, in column order (uniqueness is not enforced)
        rows: Body rows, each an ordered tuple of raw field values
    """
    model_config = ConfigDict(frozen=True)

    header: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...] = ()

    def __len__(self) -> int:
        """Return number of body rows"""
        return len(self.rows)

    @property
    def width(self) -> int:
        """Number of header columns"""
        return len(self.header)

    def column_index(self, name: str) -> Optional[int]:
        """Position of the first header column named exactly *name*"""
        for i, column in enumerate(self.header):
            if column == name:
                return i
        return None

    def project(self, shape: Any) -> list:
        """
        Project the body rows onto a record shape (fail-fast).

        Args:
            shape: RecordShape describing the target records

        Returns:
            One record per body row
        """
        from tablesplit.segmentation.projector import project_table  # pylint: disable=import-outside-toplevel
        return project_table(self, shape)


class TableSet(BaseModel):
    """
    Ordered tables in their order of appearance in the source stream.

    Attributes:
        tables: Segmented tables
        source: Optional label of the input (e.g. the file path)
    """
    model_config = ConfigDict(frozen=True)

    tables: Tuple[CsvTable, ...] = ()
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.tables)

    def __getitem__(self, index: int) -> CsvTable:
        return self.tables[index]

    def get(self, index: int) -> Optional[CsvTable]:
        """Table at *index*, or None when the stream held fewer tables"""
        if 0 <= index < len(self.tables):
            return self.tables[index]
        return None

    def headers(self) -> list:
        """Header of every table, in order"""
        return [list(table.header) for table in self.tables]

    def save_to_json(
        self,
        output_path: Union[str, Path],
        overwrite: bool = False
    ) -> Path:
        """
        Save the TableSet to a JSON file

        Args:
            output_path: Path where the file should be saved (will use .json extension)
            overwrite: Whether to overwrite existing file (default: False)

        Returns:
            Path to the saved file

        Raises:
            FileExistsError: If file exists and overwrite=False
        """
        output_path = Path(output_path)

        if output_path.suffix != '.json':
            output_path = output_path.with_suffix('.json')

        if output_path.exists() and not overwrite:
            raise FileExistsError(f"File exists: {output_path}. Set overwrite=True.")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            'version': '1.0',
            'source': self.source,
            'total_tables': len(self.tables),
            'tables': [
                {
                    'index': i,
                    'header': list(table.header),
                    'num_rows': len(table.rows),
                    'rows': [list(row) for row in table.rows],
                }
                for i, table in enumerate(self.tables)
            ],
        }

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        return output_path

    @staticmethod
    def load_from_json(file_path: Union[str, Path]) -> 'TableSet':
        """Load a TableSet previously written by save_to_json."""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        tables = [
            CsvTable(header=t.get('header', []), rows=t.get('rows', []))
            for t in data.get('tables', [])
        ]
        return TableSet(tables=tables, source=data.get('source'))
