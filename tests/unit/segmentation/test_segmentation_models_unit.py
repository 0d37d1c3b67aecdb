"""Unit tests for table splitting Pydantic models.

Covers:
- tablesplit/segmentation/models/table.py    (CsvTable, TableSet)
- tablesplit/segmentation/models/shape.py    (FieldSpec, RecordShape)
- tablesplit/segmentation/models/records.py  (Account, Transaction, shape registry)
"""

import json

import pytest
from pydantic import ValidationError

from tablesplit.segmentation.constants import FieldKind
from tablesplit.segmentation.models import (
    ACCOUNT_SHAPE,
    SHAPES,
    TRANSACTION_SHAPE,
    CsvTable,
    FieldSpec,
    RecordShape,
    TableSet,
    Transaction,
    get_shape,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def table_set():
    return TableSet(
        tables=[
            CsvTable(header=["Name", "Qty", ""], rows=[["apple", "3", ""]]),
            CsvTable(header=["Code"], rows=[]),
        ],
        source="exports/a.csv",
    )


# ---------------------------------------------------------------------------
# CsvTable
# ---------------------------------------------------------------------------

class TestCsvTable:
    def test_len_counts_body_rows(self):
        table = CsvTable(header=["a"], rows=[["1"], ["2"]])
        assert len(table) == 2

    def test_width_counts_header_columns(self):
        assert CsvTable(header=["a", "b", ""]).width == 3

    def test_body_defaults_empty(self):
        assert CsvTable(header=["a"]).rows == ()

    def test_column_index_exact_match(self):
        table = CsvTable(header=["Trade Date", "Symbol", "Symbol"])
        assert table.column_index("Symbol") == 1
        assert table.column_index("trade date") is None

    def test_is_immutable(self):
        table = CsvTable(header=["a"])
        with pytest.raises(ValidationError):
            table.header = ("b",)

    def test_requires_header(self):
        with pytest.raises(ValidationError):
            CsvTable(rows=[])


# ---------------------------------------------------------------------------
# TableSet
# ---------------------------------------------------------------------------

class TestTableSet:
    def test_len_and_indexing(self, table_set):
        assert len(table_set) == 2
        assert table_set[1].header == ("Code",)

    def test_get_out_of_range_returns_none(self, table_set):
        assert table_set.get(2) is None
        assert table_set.get(-1) is None

    def test_get_in_range(self, table_set):
        assert table_set.get(0) is table_set[0]

    def test_headers(self, table_set):
        assert table_set.headers() == [["Name", "Qty", ""], ["Code"]]

    def test_empty_by_default(self):
        assert len(TableSet()) == 0


class TestTableSetSaveLoad:
    def test_save_creates_json_file(self, table_set, tmp_path):
        saved = table_set.save_to_json(tmp_path / "tables.json")
        assert saved.exists()
        assert saved.suffix == ".json"

    def test_save_enforces_json_extension(self, table_set, tmp_path):
        saved = table_set.save_to_json(tmp_path / "tables.txt")
        assert saved.suffix == ".json"

    def test_save_raises_if_exists_no_overwrite(self, table_set, tmp_path):
        out = tmp_path / "tables.json"
        table_set.save_to_json(out)
        with pytest.raises(FileExistsError):
            table_set.save_to_json(out)

    def test_save_overwrites_when_requested(self, table_set, tmp_path):
        out = tmp_path / "tables.json"
        table_set.save_to_json(out)
        table_set.save_to_json(out, overwrite=True)
        assert out.exists()

    def test_saved_schema(self, table_set, tmp_path):
        out = table_set.save_to_json(tmp_path / "tables.json")
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["total_tables"] == 2
        assert data["source"] == "exports/a.csv"
        assert data["tables"][0]["num_rows"] == 1
        assert data["tables"][0]["header"] == ["Name", "Qty", ""]

    def test_load_restores_equal_table_set(self, table_set, tmp_path):
        out = table_set.save_to_json(tmp_path / "tables.json")
        assert TableSet.load_from_json(out) == table_set

    def test_load_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TableSet.load_from_json(tmp_path / "nope.json")


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------

class TestRecordShape:
    def test_spellings_put_own_name_first(self):
        spec = FieldSpec(name="trade_date", aliases=("Trade Date",))
        assert spec.spellings == ("trade_date", "Trade Date")

    def test_kind_defaults_to_text(self):
        assert FieldSpec(name="x").kind == FieldKind.TEXT

    def test_rejects_duplicate_field_names(self):
        with pytest.raises(ValidationError):
            RecordShape(name="dup", fields=(FieldSpec(name="a"), FieldSpec(name="a")))

    def test_build_without_model_returns_dict(self):
        shape = RecordShape(name="s", fields=(FieldSpec(name="a"),))
        assert shape.build({"a": "1"}) == {"a": "1"}

    def test_field_names_in_declared_order(self):
        assert ACCOUNT_SHAPE.field_names[:3] == ("account_number", "investment_name", "symbol")


class TestRegisteredShapes:
    def test_registry_contains_both_shapes(self):
        assert set(SHAPES) == {"account", "transaction"}

    def test_get_shape_unknown_name(self):
        with pytest.raises(KeyError, match="Known shapes"):
            get_shape("ledger")

    def test_shape_fields_match_record_model(self):
        for shape in SHAPES.values():
            assert set(shape.field_names) == set(shape.record_model.model_fields)

    def test_numeric_fields_are_float_on_model(self):
        for shape in SHAPES.values():
            for spec in shape.fields:
                annotation = shape.record_model.model_fields[spec.name].annotation
                expected = float if spec.kind == FieldKind.NUMBER else str
                assert annotation is expected

    def test_transaction_multi_word_aliases(self):
        spellings = {a for spec in TRANSACTION_SHAPE.fields for a in spec.aliases}
        assert {"Trade Date", "Commissions and Fees", "Accrued Interest"} <= spellings

    def test_transaction_record_is_frozen(self):
        values = {name: "x" for name in TRANSACTION_SHAPE.field_names}
        values.update(shares=1.0, share_price=1.0, principal_amount=1.0,
                      commissions_and_fees=0.0, net_amount=1.0, accrued_interest=0.0)
        record = Transaction(**values)
        with pytest.raises(ValidationError):
            record.symbol = "y"
