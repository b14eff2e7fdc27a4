"""FastAPI app: /health, /readiness, /score, /fixes, /report, /formats."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_cors_origins
from .routes import fixes_router, formats_router, health_router, readiness_router, report_router
from .startup import configure_logging, validate_config

configure_logging()

app = FastAPI(
    title="Catalog Triage API",
    description="Export readiness, fix classification and auto-fix logs for catalog CSV exports.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(readiness_router)
app.include_router(fixes_router)
app.include_router(report_router)
app.include_router(formats_router)


@app.on_event("startup")
def _validate_config() -> None:
    """Log effective configuration at startup."""
    validate_config()
