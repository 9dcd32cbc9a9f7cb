# homework_diary/adapters/api/routers/health.py
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
import structlog

from homework_diary.adapters.api.dependencies import get_font_catalog
from homework_diary.core.ports.font_catalog import IFontCatalog

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    K8s Liveness Probe.
    Returns 200 OK if the service is operational.
    """
    return {"status": "ok", "service": "homework-diary-api"}


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(
    fonts: IFontCatalog = Depends(get_font_catalog),
) -> Dict[str, Any]:
    """
    K8s Readiness Probe.
    Reports which scripts can be drawn. Without the fonts directory the
    service still answers (English only), so the status is "degraded"
    rather than a 503.
    """
    health_status: Dict[str, Any] = {"status": "degraded", "fonts": "down", "scripts": ["latin"]}

    try:
        if fonts.health_check():
            health_status["fonts"] = "up"
            health_status["status"] = "ok"
        health_status["scripts"] = sorted(s.value for s in fonts.available_scripts())
    except Exception as e:
        logger.error("health_check_failed", component="fonts", error=str(e))

    if health_status["status"] != "ok":
        logger.warning("readiness_degraded", status=health_status)

    return health_status
