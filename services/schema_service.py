from typing import List

from models.dataset_models import ColumnClassification, ColumnType, RawTable


def classify_column(table: RawTable, column: str) -> ColumnType:
    values = [cell for cell in table.column_cells(column) if not cell.is_missing]
    # A column with no values at all stays textual.
    if values and all(cell.is_number for cell in values):
        return ColumnType.NUMERIC
    return ColumnType.TEXTUAL


def classify(table: RawTable) -> ColumnClassification:
    return {col: classify_column(table, col) for col in table.columns}


def numeric_columns(classification: ColumnClassification) -> List[str]:
    return [col for col, kind in classification.items() if kind == ColumnType.NUMERIC]


def textual_columns(classification: ColumnClassification) -> List[str]:
    return [col for col, kind in classification.items() if kind == ColumnType.TEXTUAL]
