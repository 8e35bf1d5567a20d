import pytest

from models.dataset_models import Cell, CellKind, ColumnType, RawTable, parse_number
from services.csv_parser_service import parse
from services.schema_service import classify, numeric_columns, textual_columns


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("400", 400.0),
        (" -3.25 ", -3.25),
        ("+7", 7.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("abc", None),
        ("1,000", None),
        ("$5", None),
        ("1_000", None),
        ("inf", None),
        ("nan", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_cell_from_raw_treats_whitespace_as_missing():
    assert Cell.from_raw("   ").kind == CellKind.MISSING
    assert Cell.from_raw(None).is_missing


def test_classify_numeric_and_textual_columns():
    table = parse("name,qty,price\napple, 3 ,1.50\npear,-2,abc\n")
    classification = classify(table)
    assert classification == {
        "name": ColumnType.TEXTUAL,
        "qty": ColumnType.NUMERIC,
        "price": ColumnType.TEXTUAL,
    }


def test_classify_ignores_missing_values():
    table = parse("a,b\n1,x\n,y\n3,\n")
    classification = classify(table)
    assert classification["a"] == ColumnType.NUMERIC
    assert classification["b"] == ColumnType.TEXTUAL


def test_classify_all_missing_column_is_textual():
    table = parse("a,empty\n1,\n2,\n")
    assert classify(table)["empty"] == ColumnType.TEXTUAL


def test_classify_header_only_table_is_textual():
    table = parse("a,b\n")
    assert classify(table) == {"a": ColumnType.TEXTUAL, "b": ColumnType.TEXTUAL}


def test_classify_empty_table():
    assert classify(RawTable()) == {}


def test_column_helpers_follow_header_order():
    table = parse("t1,n1,t2,n2\na,1,b,2\n")
    classification = classify(table)
    assert numeric_columns(classification) == ["n1", "n2"]
    assert textual_columns(classification) == ["t1", "t2"]
