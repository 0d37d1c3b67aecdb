"""
Lightweight fixtures for unit tests - NO real data dependencies.
All fixtures use synthetic rows that run in <1 second.
"""

import pytest

from tablesplit.segmentation.constants import FieldKind
from tablesplit.segmentation.models import CsvTable, FieldSpec, RecordShape


BLANK = [""]


# =============================================================================
# Row Fixtures
# =============================================================================

@pytest.fixture
def two_table_rows() -> list:
    """Header, two absorbed blanks, data, terminator, second table."""
    return [
        ["Name", "Qty"],
        BLANK,
        BLANK,
        ["apple", "3"],
        BLANK,
        BLANK,
        BLANK,
        ["Code", "Price"],
        ["X1", "9.5"],
    ]


@pytest.fixture
def sample_csv_text() -> str:
    """Two comma-separated tables with trailing delimiters."""
    return (
        "Name,Qty,\n"
        "apple,3,\n"
        "pear,5,\n"
        "\n"
        "\n"
        "\n"
        "Code,Price,\n"
        "X1,9.5,\n"
    )


# =============================================================================
# Shape Fixtures
# =============================================================================

@pytest.fixture
def item_shape() -> RecordShape:
    """Dict-producing shape with one text and one numeric field."""
    return RecordShape(
        name="item",
        fields=(
            FieldSpec(name="name", aliases=("Name",)),
            FieldSpec(name="qty", kind=FieldKind.NUMBER, aliases=("Qty", "Quantity")),
        ),
    )


@pytest.fixture
def item_table() -> CsvTable:
    return CsvTable(
        header=["Name", "Qty", ""],
        rows=[["apple", "3", ""], ["pear", "5.25", ""]],
    )
