"""FastAPI entry point. Registers middleware, exception handlers and the RPC routers."""

import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from siteops.config import settings
from siteops.database import Base, engine
import siteops.models  # noqa: F401 - registers models on the metadata
from siteops.routers import (
    health, projects, directory, activities, documents, payments, meetings, dashboard,
)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SiteOps construction project management",
    description=(
        "Daily site logs, document approvals, termin payments and meetings. "
        "Timestamps are ISO-8601 UTC with a Z suffix; money and percentage fields "
        "are exact decimals sent as JSON strings."
    ),
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(projects.router)
app.include_router(directory.router)
app.include_router(activities.router)
app.include_router(documents.router)
app.include_router(payments.router)
app.include_router(meetings.router)
app.include_router(dashboard.router)


@app.exception_handler(IntegrityError)
def integrity_error_handler(request: Request, exc: IntegrityError):
    # The request session is closed (and rolled back) by get_db.
    logger.warning("store rejected write on %s: %s", request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"detail": str(exc.orig)})


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)
