from fastapi import APIRouter

from resume_insight.ai.config import load_ai_config
from resume_insight.vocabulary import get_default_vocabulary

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the service and analysis provider status.")
async def health_check():
    cfg = load_ai_config()
    return {
        "status": "healthy",
        "ai": {"enabled": cfg.enabled, "configured": cfg.configured, "model": cfg.model},
        "skills": len(get_default_vocabulary().skills),
    }
