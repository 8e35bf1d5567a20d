import os
from fastapi import APIRouter, Depends, UploadFile, File, HTTPException
from fastapi.responses import PlainTextResponse

from config import MAX_UPLOAD_BYTES
from models.common_models import TextIngestRequest
from services.csv_parser_service import ParseError
from services.dataset_state import DatasetStore, get_dataset_store
from services.ingest_service import SAMPLE_CSV, SAMPLE_FILE_NAME, ingest_from_text, ingest_sample
from services.preview_service import get_dataset_summary

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("/csv")
async def upload_csv(
    file: UploadFile = File(...),
    store: DatasetStore = Depends(get_dataset_store),
):
    ext = os.path.splitext(file.filename or "")[1]
    if ext.lower() != ".csv":
        raise HTTPException(status_code=400, detail="Only CSV files (.csv) are supported.")

    # read at most one byte past the limit
    content = await file.read(MAX_UPLOAD_BYTES + 1)
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="Uploaded file is too large.")

    try:
        state = ingest_from_text(store, content, file.filename)
    except ParseError as e:
        raise HTTPException(status_code=400, detail=f"Error parsing CSV file: {e}")

    return get_dataset_summary(state)


@router.post("/text")
async def upload_text(req: TextIngestRequest, store: DatasetStore = Depends(get_dataset_store)):
    if len(req.text.encode("utf-8")) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="Uploaded text is too large.")

    try:
        state = ingest_from_text(store, req.text, req.display_name)
    except ParseError as e:
        raise HTTPException(status_code=400, detail=f"Error parsing CSV text: {e}")

    return get_dataset_summary(state)


@router.post("/sample")
async def load_sample(store: DatasetStore = Depends(get_dataset_store)):
    state = ingest_sample(store)
    return get_dataset_summary(state)


@router.get("/sample.csv")
async def download_sample():
    return PlainTextResponse(
        SAMPLE_CSV,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{SAMPLE_FILE_NAME}"'},
    )
