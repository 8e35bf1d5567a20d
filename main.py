import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import LOG_LEVEL
from routers import upload_router, data_router
from services.dataset_state import DatasetStore

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="CSV Chart Data Backend",
        description="Backend API that turns small CSV uploads into chart-ready records.",
        version="0.1.0",
    )

    # One dataset per app; every ingest replaces it wholesale
    app.state.dataset_store = DatasetStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(upload_router.router)
    app.include_router(data_router.router)

    @app.get("/")
    async def root():
        return {"message": "CSV Chart Data API is running"}

    return app


app = create_app()
