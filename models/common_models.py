from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from models.dataset_models import AxisSelection, ChartKind

ChartStatus = Literal["empty", "no_suitable_columns", "ready"]


class TextIngestRequest(BaseModel):
    text: str
    display_name: str = Field("pasted-data.csv", min_length=1)


class ChartKindRequest(BaseModel):
    chart_kind: ChartKind


class DatasetSummary(BaseModel):
    display_name: str
    n_rows: int
    columns: List[str]
    numeric_columns: List[str]
    textual_columns: List[str]
    axes: AxisSelection
    chart_kind: ChartKind


class PreviewResponse(BaseModel):
    columns: List[str]
    rows: List[Dict[str, Optional[str]]]


class ChartPayload(BaseModel):
    status: ChartStatus
    chart_kind: ChartKind
    category_field: Optional[str] = None
    value_field: Optional[str] = None
    records: List[Dict[str, Any]] = []
    image_base64: Optional[str] = None
