import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studio_dash.core.config import settings
from studio_dash.core.exceptions import SnapshotError, StoreError
from studio_dash.core.logging import configure_logging
from studio_dash.api.v1.api import api_router

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json"
)

# Set up CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify actual origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    """
    Persistence failures surface as 503 so clients can retry once the stored
    data has been repaired.
    """
    extra = {"collection": exc.collection} if isinstance(exc, SnapshotError) else {}
    logger.error("State store failure on %s: %s", request.url.path, exc, extra=extra)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


# Include API routes
app.include_router(api_router, prefix=settings.API_V1_STR)
