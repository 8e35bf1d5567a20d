from models.dataset_models import AxisSelection, RawTable
from services.axis_service import select_axes
from services.csv_parser_service import parse
from services.ingest_service import SAMPLE_CSV
from services.schema_service import classify


def _axes(text: str) -> AxisSelection:
    table = parse(text)
    return select_axes(table, classify(table))


def test_sample_axes():
    axes = _axes(SAMPLE_CSV)
    assert axes.category_column == "category"
    assert axes.value_column == "value"
    assert axes.is_complete


def test_first_textual_and_first_numeric_win():
    axes = _axes("n1,t1,n2,t2\n1,a,2,b\n")
    assert axes == AxisSelection(category_column="t1", value_column="n1")


def test_all_numeric_uses_first_column_for_category():
    axes = _axes("year,sales\n2020,5\n2021,7\n")
    assert axes.category_column == "year"
    assert axes.value_column == "year"


def test_value_falls_back_to_first_row_probe():
    # "amount" is textual overall but numeric in row 0
    axes = _axes("label,amount\nx,10\ny,n/a\n")
    assert axes.category_column == "label"
    assert axes.value_column == "amount"


def test_no_numeric_value_leaves_value_absent():
    axes = _axes("label,other\nx,y\n")
    assert axes.category_column == "label"
    assert axes.value_column is None
    assert not axes.is_complete


def test_single_numeric_column_doubles_as_both_axes():
    axes = _axes("value\n1\n2\n")
    assert axes.category_column == "value"
    assert axes.value_column == "value"


def test_header_only_table_has_no_value_axis():
    axes = _axes("a,b\n")
    assert axes.category_column == "a"
    assert axes.value_column is None


def test_zero_column_table():
    assert select_axes(RawTable(), {}) == AxisSelection()
