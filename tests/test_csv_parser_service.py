import pytest

from models.dataset_models import CellKind
from services.csv_parser_service import ParseError, parse


def _csv_with_rows(n: int) -> str:
    lines = ["name,score"] + [f"item{i},{i}" for i in range(n)]
    return "\n".join(lines)


@pytest.mark.parametrize("n", [0, 1, 7, 20])
def test_parse_keeps_all_rows_up_to_limit(n):
    table = parse(_csv_with_rows(n))
    assert table.columns == ["name", "score"]
    assert table.n_rows == n


def test_parse_truncates_to_first_max_rows():
    table = parse(_csv_with_rows(35))
    assert table.n_rows == 20
    assert table.rows[0]["name"].raw == "item0"
    assert table.rows[-1]["name"].raw == "item19"


def test_parse_honours_custom_max_rows():
    table = parse(_csv_with_rows(10), max_rows=3)
    assert [row["score"].number for row in table.rows] == [0.0, 1.0, 2.0]


def test_parse_rejects_non_positive_max_rows():
    with pytest.raises(ValueError):
        parse(_csv_with_rows(2), max_rows=0)


def test_parse_skips_blank_lines():
    text = "a,b\n\n1,2\n   \n3,4\n"
    table = parse(text)
    assert table.n_rows == 2
    assert table.rows[1]["a"].raw == "3"


def test_parse_handles_crlf_line_endings():
    table = parse("a,b\r\n1,x\r\n2,y\r\n")
    assert table.columns == ["a", "b"]
    assert [row["b"].raw for row in table.rows] == ["x", "y"]


def test_parse_pads_short_rows_and_drops_extra_fields():
    table = parse("a,b,c\n1\n1,2,3,4,5\n")
    short, long = table.rows
    assert short["a"].raw == "1"
    assert short["b"].is_missing
    assert short["c"].is_missing
    assert set(long) == {"a", "b", "c"}
    assert long["c"].raw == "3"


def test_parse_tags_cells():
    table = parse("label,amount,note\nx, 12.5 ,\n")
    row = table.rows[0]
    assert row["label"].kind == CellKind.TEXT
    assert row["amount"].kind == CellKind.NUMBER
    assert row["amount"].number == 12.5
    assert row["note"].kind == CellKind.MISSING


def test_parse_keeps_quoted_delimiters_inside_a_field():
    table = parse('city,population\n"Springfield, IL",116250\n')
    assert table.rows[0]["city"].raw == "Springfield, IL"
    assert table.rows[0]["population"].number == 116250.0


def test_parse_renames_duplicate_headers():
    table = parse("x,x,y,x\n1,2,3,4\n")
    assert table.columns == ["x", "x_1", "y", "x_2"]
    assert table.rows[0]["x_2"].raw == "4"


def test_parse_accepts_utf8_bytes_with_bom():
    table = parse("\ufeffname,value\n\u00c4pfel,3\n".encode("utf-8"))
    assert table.columns == ["name", "value"]
    assert table.rows[0]["name"].raw == "\u00c4pfel"


@pytest.mark.parametrize("text", ["", "   ", "\n\n", " , ,\n1,2,3"])
def test_parse_without_header_raises(text):
    with pytest.raises(ParseError):
        parse(text)


def test_parse_undecodable_bytes_raises():
    with pytest.raises(ParseError):
        parse(b"a,b\n\xff\xfe\xfa,1\n")


def test_parse_error_is_a_value_error():
    assert issubclass(ParseError, ValueError)


def test_parse_accepts_cells_larger_than_default_csv_field_limit():
    big = "x" * 200_000
    table = parse(f"name,value\n{big},1\n")
    assert table.rows[0]["name"].raw == big
    assert table.rows[0]["value"].number == 1.0
