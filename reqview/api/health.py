"""Health check endpoint."""

from pydantic import BaseModel

from reqview.core.logger import LogIcon, logger
from reqview.core.request import RequestView
from reqview.core.router import Router
from reqview.core.settings import settings as st

router = Router(__file__, prefix="/")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    version: str


@router.get("/health")
async def health_check(request: RequestView) -> HealthResponse:
    logger.info("Health check requested", icon=LogIcon.HEALTHCHECK, ip=request.ip)
    return HealthResponse(status="healthy", service=st.API_NAME, version=st.API_VERSION)
