from fastapi import APIRouter, Depends
from models.common_models import ChartKindRequest, PreviewResponse
from services.dataset_state import DatasetStore, get_dataset_store
from services.ingest_service import select_chart_kind
from services.preview_service import get_dataset_summary, get_preview_rows
from services.viz_service import build_chart, render_chart

router = APIRouter(prefix="/data", tags=["data"])


@router.get("/dataset")
async def dataset_summary(store: DatasetStore = Depends(get_dataset_store)):
    return get_dataset_summary(store.read())


@router.get("/preview", response_model=PreviewResponse)
async def preview_data(store: DatasetStore = Depends(get_dataset_store)):
    return get_preview_rows(store.read())


@router.post("/chart-kind")
async def chart_kind(req: ChartKindRequest, store: DatasetStore = Depends(get_dataset_store)):
    state = select_chart_kind(store, req.chart_kind)
    return get_dataset_summary(state)


@router.get("/chart")
async def chart(render: bool = False, store: DatasetStore = Depends(get_dataset_store)):
    payload = build_chart(store.read())
    if render:
        payload.image_base64 = render_chart(payload)
    return payload
