from typing import List

from models.dataset_models import AxisSelection, ChartRecord, RawTable


def bind(table: RawTable, axes: AxisSelection) -> List[ChartRecord]:
    """
    Turn table rows into chart records with a guaranteed category label and a
    finite value. Empty categories become "Row N" (1-based), non-numeric
    values become 0. Row order is preserved.
    """
    if not axes.is_complete:
        raise ValueError("Both a category and a value column are required to bind chart data.")

    category_col = axes.category_column
    value_col = axes.value_column
    records: List[ChartRecord] = []

    for i, (row, fields) in enumerate(zip(table.rows, table.raw_rows())):
        category_cell = row[category_col]
        value_cell = row[value_col]

        category = f"Row {i + 1}" if category_cell.is_missing else category_cell.raw
        value = value_cell.number if value_cell.is_number else 0.0

        # value is written last, so it wins when one column fills both axes
        fields[category_col] = category
        fields[value_col] = value

        records.append(ChartRecord(category=category, value=value, fields=fields))

    return records
