import logging
from typing import Optional

from fastapi import Request

from models.dataset_models import DatasetState

logger = logging.getLogger(__name__)


class DatasetStore:
    """
    Holder of the one current DatasetState.

    Readers always see a complete (table, classification, axes) combination:
    the only way to change anything is to replace the whole state.
    """

    def __init__(self, state: Optional[DatasetState] = None):
        self._state = state if state is not None else DatasetState.empty()

    def read(self) -> DatasetState:
        return self._state

    def replace(self, new_state: DatasetState) -> DatasetState:
        if not isinstance(new_state, DatasetState):
            raise TypeError("DatasetStore only holds DatasetState instances.")
        self._state = new_state
        logger.info(
            "Dataset replaced - name=%s rows=%s chart=%s",
            new_state.display_name, new_state.table.n_rows, new_state.chart_kind.value,
        )
        return new_state


def get_dataset_store(request: Request) -> DatasetStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.dataset_store
