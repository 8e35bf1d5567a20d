from typing import Dict, Any

import pandas as pd

from config import PREVIEW_ROWS
from models.common_models import DatasetSummary
from models.dataset_models import DatasetState
from services.schema_service import numeric_columns, textual_columns


def get_preview_rows(state: DatasetState, n_rows: int = PREVIEW_ROWS) -> Dict[str, Any]:
    table = state.table
    # object dtype keeps missing cells as None
    preview_df = pd.DataFrame(table.raw_rows(), columns=table.columns, dtype=object).head(n_rows)
    return {
        "columns": list(preview_df.columns),
        "rows": preview_df.to_dict(orient="records"),
    }


def get_dataset_summary(state: DatasetState) -> DatasetSummary:
    return DatasetSummary(
        display_name=state.display_name,
        n_rows=state.table.n_rows,
        columns=state.table.columns,
        numeric_columns=numeric_columns(state.classification),
        textual_columns=textual_columns(state.classification),
        axes=state.axes,
        chart_kind=state.chart_kind,
    )
