import logging

from fastapi import APIRouter

from atscore.core.config import settings
from atscore.core.config.scoring import get_scoring_config

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Health Check", description="Liveness plus the scoring setup in effect.")
async def health_check():
    try:
        get_scoring_config()
        scoring_config = "loaded"
    except RuntimeError as exc:
        logger.warning("health_scoring_config_unavailable error=%s", exc)
        scoring_config = "defaults"
    return {
        "status": "healthy",
        "scoringConfig": scoring_config,
        "entityExtractor": settings.entity_extractor,
    }
