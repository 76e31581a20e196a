from fastapi import APIRouter

from cms_api.api import admins, auth, system

api_router = APIRouter()
api_router.include_router(system.router)
api_router.include_router(auth.router)
api_router.include_router(admins.router)
