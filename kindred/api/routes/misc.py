from fastapi import APIRouter
from ...core.config import settings

router = APIRouter(tags=["misc"])

@router.get("/health")
def health():
    return {"ok": True}

@router.get("/version")
def version():
    return {"version": settings.API_VERSION}

@router.get("/config/app")
def app_config():
    return {
        "chatEnabled": True,
        "moodTrackingEnabled": True,
        "phq9Enabled": True,
        "baseLanguage": settings.BASE_LANGUAGE,
        "translationEnabled": settings.TRANSLATE_ENABLED,
        "emergencyNumber": settings.EMERGENCY_NUMBER,
    }
