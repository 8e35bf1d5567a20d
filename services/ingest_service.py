import logging
from typing import Union

from config import MAX_ROWS
from models.dataset_models import ChartKind, DatasetState
from services.axis_service import select_axes
from services.csv_parser_service import parse
from services.dataset_state import DatasetStore
from services.schema_service import classify

logger = logging.getLogger(__name__)

SAMPLE_FILE_NAME = "sample-data.csv"

# Served as-is by the download endpoint; keep byte-identical to what ingest_sample parses.
SAMPLE_CSV = """category,value,description
A,400,First item
B,300,Second item
C,200,Third item
D,278,Fourth item
E,189,Fifth item
F,239,Sixth item
G,349,Seventh item"""


def build_state(
    raw: Union[str, bytes],
    display_name: str,
    chart_kind: ChartKind = ChartKind.BAR,
    max_rows: int = MAX_ROWS,
) -> DatasetState:
    """
    Run the parse -> classify -> select axes pipeline and return a complete
    new state. Raises ParseError; never touches the store.
    """
    table = parse(raw, max_rows=max_rows)
    classification = classify(table)
    axes = select_axes(table, classification)
    return DatasetState(
        display_name=display_name,
        table=table,
        classification=classification,
        axes=axes,
        chart_kind=chart_kind,
    )


def ingest_from_text(
    store: DatasetStore,
    text: Union[str, bytes],
    display_name: str,
    max_rows: int = MAX_ROWS,
) -> DatasetState:
    """
    Replace the current dataset with one parsed from uploaded text.
    On ParseError the store is left as it was.
    """
    current = store.read()
    try:
        state = build_state(text, display_name, chart_kind=current.chart_kind, max_rows=max_rows)
    except ValueError as e:
        logger.warning("Ingest of '%s' failed: %s", display_name, e)
        raise

    logger.info(
        "Ingested '%s' - cols=%s rows=%s axes=(%s, %s)",
        display_name, len(state.table.columns), state.table.n_rows,
        state.axes.category_column, state.axes.value_column,
    )
    return store.replace(state)


def ingest_sample(store: DatasetStore) -> DatasetState:
    return ingest_from_text(store, SAMPLE_CSV, SAMPLE_FILE_NAME)


def select_chart_kind(store: DatasetStore, chart_kind: ChartKind) -> DatasetState:
    state = store.read().with_chart_kind(chart_kind)
    logger.info("Chart kind set to %s", chart_kind.value)
    return store.replace(state)
