"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.v1 import router as v1_router
from app.api.v1 import webhook
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.services.storage import ensure_upload_dir

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PD Screen API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 with one entry per offending field."""
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]) or "unknown",
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"detail": "Validation failed", "errors": details}),
    )


app.include_router(v1_router, prefix=settings.API_V1_PREFIX)
app.include_router(webhook.router, prefix="/webhook", tags=["webhook"])

ensure_upload_dir(settings)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "PD Screen API"}


# Built SPA last so API routes take precedence.
if settings.FRONTEND_DIST_DIR and Path(settings.FRONTEND_DIST_DIR).is_dir():
    app.mount(
        "/app",
        StaticFiles(directory=settings.FRONTEND_DIST_DIR, html=True),
        name="frontend",
    )
    logger.info("Serving frontend from %s at /app", settings.FRONTEND_DIST_DIR)
