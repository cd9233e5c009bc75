from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import api_router
from .api.errors import document_pipeline_error_handler
from .core.config import get_settings
from .core.logging import configure_logging
from .features.shared.errors import DocumentPipelineError

settings = get_settings()


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    yield


app = FastAPI(title="AI Utilities API", docs_url="/api/docs", lifespan=lifespan)
app.include_router(api_router)
app.add_exception_handler(DocumentPipelineError, document_pipeline_error_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.frontend_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def read_root() -> dict:
    return {"status": "ok", "service": "aiutilities"}


@app.get("/health")
async def health_check() -> dict:
    return {"healthy": True}
