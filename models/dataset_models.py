import math
import re
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

# Plain decimal or scientific notation; no thousands separators or currency.
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


def parse_number(raw: Optional[str]) -> Optional[float]:
    """
    Return the finite float value of raw text, or None when it is not a number.
    Surrounding whitespace is tolerated.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not _NUMBER_RE.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


class CellKind(str, Enum):
    MISSING = "missing"
    TEXT = "text"
    NUMBER = "number"


class Cell(BaseModel):
    """One parsed CSV cell, tagged as missing, plain text or number-like text."""

    model_config = ConfigDict(frozen=True)

    kind: CellKind
    raw: Optional[str] = None
    number: Optional[float] = None

    @classmethod
    def missing(cls) -> "Cell":
        return cls(kind=CellKind.MISSING)

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> "Cell":
        if raw is None or not raw.strip():
            return cls.missing()
        number = parse_number(raw)
        if number is None:
            return cls(kind=CellKind.TEXT, raw=raw)
        return cls(kind=CellKind.NUMBER, raw=raw, number=number)

    @property
    def is_missing(self) -> bool:
        return self.kind == CellKind.MISSING

    @property
    def is_number(self) -> bool:
        return self.kind == CellKind.NUMBER


class RawTable(BaseModel):
    columns: List[str] = []
    rows: List[Dict[str, Cell]] = []

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    def column_cells(self, column: str) -> List[Cell]:
        return [row[column] for row in self.rows]

    def raw_rows(self) -> List[Dict[str, Optional[str]]]:
        """Rows as plain dicts of raw text, with missing cells as None."""
        return [
            {col: (None if row[col].is_missing else row[col].raw) for col in self.columns}
            for row in self.rows
        ]


class ColumnType(str, Enum):
    NUMERIC = "numeric"
    TEXTUAL = "textual"


ColumnClassification = Dict[str, ColumnType]


class AxisSelection(BaseModel):
    category_column: Optional[str] = None
    value_column: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return self.category_column is not None and self.value_column is not None


class ChartRecord(BaseModel):
    category: str
    value: float
    fields: Dict[str, Any] = {}


class ChartKind(str, Enum):
    BAR = "bar"
    LINE = "line"
    PIE = "pie"


class DatasetState(BaseModel):
    """
    The complete current dataset. Never mutated in place: every ingest or
    chart kind change builds a new instance and hands it to the store.
    """

    model_config = ConfigDict(frozen=True)

    display_name: str = ""
    table: RawTable = RawTable()
    classification: ColumnClassification = {}
    axes: AxisSelection = AxisSelection()
    chart_kind: ChartKind = ChartKind.BAR

    @classmethod
    def empty(cls) -> "DatasetState":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.table.columns

    def with_chart_kind(self, chart_kind: ChartKind) -> "DatasetState":
        return self.model_copy(update={"chart_kind": chart_kind})
