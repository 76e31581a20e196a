from fastapi import APIRouter, Depends

from cms_api.api.deps import get_app_settings
from cms_api.core.config import Settings

router = APIRouter(tags=["system"])


@router.get("/health")
def health(settings: Settings = Depends(get_app_settings)):
    return {"status": "ok", "version": settings.app_version}
