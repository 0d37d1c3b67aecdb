"""
Exception hierarchy for table segmentation and projection.

Callers match on the failure kind rather than on message text:

    TableSplitError
    ├── StreamError          (alias: MalformedStream)
    └── ProjectionError
        ├── FieldMissing
        ├── FieldTypeError
        └── CellMissing

Segmentation itself never raises for structurally odd input; only a failing
row source does.
"""

from typing import Optional, Sequence


class TableSplitError(Exception):
    """Base class for all tablesplit errors."""


class StreamError(TableSplitError):
    """
    The underlying row source failed while pulling the next row.

    Attributes:
        row_number: 1-based number of the row that could not be read
    """

    def __init__(self, message: str, row_number: Optional[int] = None):
        self.row_number = row_number
        if row_number is not None:
            message = f"{message} (at row {row_number})"
        super().__init__(message)


MalformedStream = StreamError


class ProjectionError(TableSplitError):
    """Base class for errors raised while projecting a table onto a shape."""

    def __init__(self, message: str, field_name: str):
        self.field_name = field_name
        super().__init__(message)


class FieldMissing(ProjectionError):
    """A shape field has no matching header name (nor alias) in the table."""

    def __init__(self, field_name: str, aliases: Sequence[str] = ()):
        self.aliases = tuple(aliases)
        spellings = ", ".join(repr(s) for s in (field_name, *self.aliases))
        super().__init__(f"missing field {field_name!r}: no header matches {spellings}", field_name)


class FieldTypeError(ProjectionError):
    """
    A matched raw value could not be coerced to the field's declared type.

    Attributes:
        field_name: Shape field being populated
        raw_value: Cell text as read from the table
        row_index: 0-based body row index, when known
    """

    def __init__(self, field_name: str, raw_value: str, row_index: Optional[int] = None):
        self.raw_value = raw_value
        self.row_index = row_index
        message = f"field {field_name!r}: cannot parse {raw_value!r} as a number"
        if row_index is not None:
            message = f"row {row_index}: {message}"
        super().__init__(message, field_name)


class CellMissing(ProjectionError):
    """
    A body row is too short to hold the column matched for a field.

    Attributes:
        field_name: Shape field being populated
        column_index: Header position matched for the field
        row_index: 0-based body row index, when known
    """

    def __init__(self, field_name: str, column_index: int, row_index: Optional[int] = None):
        self.column_index = column_index
        self.row_index = row_index
        message = f"field {field_name!r}: row has no value in column {column_index}"
        if row_index is not None:
            message = f"row {row_index}: {message}"
        super().__init__(message, field_name)
