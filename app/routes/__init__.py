"""Route handlers."""

from .fixes import router as fixes_router
from .formats import router as formats_router
from .health import router as health_router
from .readiness import router as readiness_router
from .report import router as report_router

__all__ = ["health_router", "readiness_router", "fixes_router", "report_router", "formats_router"]
