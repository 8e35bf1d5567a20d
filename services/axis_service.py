from typing import Optional

from models.dataset_models import AxisSelection, ColumnClassification, ColumnType, RawTable


def _first_of_type(
    table: RawTable, classification: ColumnClassification, kind: ColumnType
) -> Optional[str]:
    return next((col for col in table.columns if classification.get(col) == kind), None)


def _first_numeric_in_first_row(table: RawTable) -> Optional[str]:
    if not table.rows:
        return None
    first_row = table.rows[0]
    return next((col for col in table.columns if first_row[col].is_number), None)


def select_axes(table: RawTable, classification: ColumnClassification) -> AxisSelection:
    """
    Pick the category axis (first textual column, else first column) and the
    value axis (first numeric column, else the first column whose first-row
    value is a number). Either may be None; the same column may fill both.
    """
    category = _first_of_type(table, classification, ColumnType.TEXTUAL)
    if category is None and table.columns:
        category = table.columns[0]

    value = _first_of_type(table, classification, ColumnType.NUMERIC)
    if value is None:
        value = _first_numeric_in_first_row(table)

    return AxisSelection(category_column=category, value_column=value)
