from typing import Any

from fastapi import APIRouter, Body, Depends, status

from cms_api.api.deps import get_admin_service
from cms_api.schemas.admins import TokenData, TokenResponse, parse_credentials
from cms_api.services.admins import AdminService

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(payload: Any = Body(default=None), service: AdminService = Depends(get_admin_service)):
    credentials = parse_credentials(payload)
    token = service.bootstrap_super_admin(credentials)
    return TokenResponse(data=TokenData(token=token))


@router.post("/signin", response_model=TokenResponse)
def signin(payload: Any = Body(default=None), service: AdminService = Depends(get_admin_service)):
    credentials = parse_credentials(payload)
    token = service.sign_in(credentials)
    return TokenResponse(data=TokenData(token=token))
