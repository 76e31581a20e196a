from typing import Any

from fastapi import APIRouter, Body, Depends, status

from cms_api.api.deps import get_admin_by_id, get_admin_service, get_current_admin
from cms_api.models.admin import Admin
from cms_api.schemas.admins import (
    AdminData,
    AdminListData,
    AdminListResponse,
    AdminOut,
    AdminResponse,
    EmptyResponse,
    PasswordRotationData,
    PasswordRotationResponse,
    parse_credentials,
)
from cms_api.services.admins import AdminService

router = APIRouter(prefix="/admins", tags=["admins"])


@router.post("", response_model=EmptyResponse, status_code=status.HTTP_201_CREATED)
def create_admin(
    payload: Any = Body(default=None),
    admin: Admin = Depends(get_current_admin),
    service: AdminService = Depends(get_admin_service),
):
    credentials = parse_credentials(payload)
    service.create_admin(credentials, admin)
    return EmptyResponse()


@router.get("", response_model=AdminListResponse | AdminResponse)
def list_admins(
    admin: Admin = Depends(get_current_admin),
    service: AdminService = Depends(get_admin_service),
):
    result = service.list_or_self(admin)
    if isinstance(result, list):
        return AdminListResponse(data=AdminListData(admins=[AdminOut.model_validate(item) for item in result]))
    return AdminResponse(data=AdminData(admin=AdminOut.model_validate(result)))


@router.get("/{admin_id}", response_model=AdminResponse)
def get_admin(
    admin: Admin = Depends(get_current_admin),
    target: Admin = Depends(get_admin_by_id),
    service: AdminService = Depends(get_admin_service),
):
    found = service.get_admin(admin, target)
    return AdminResponse(data=AdminData(admin=AdminOut.model_validate(found)))


@router.put(
    "/{admin_id}",
    response_model=PasswordRotationResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def update_admin_password(
    payload: Any = Body(default=None),
    admin: Admin = Depends(get_current_admin),
    target: Admin = Depends(get_admin_by_id),
    service: AdminService = Depends(get_admin_service),
):
    rotation = service.rotate_password(admin, target, payload)
    return PasswordRotationResponse(
        data=PasswordRotationData(
            admin=AdminOut.model_validate(rotation.admin),
            new_password=rotation.new_password,
            temporary_password=rotation.temporary_password,
        )
    )


@router.delete("/{admin_id}", response_model=AdminResponse)
def delete_admin(
    admin: Admin = Depends(get_current_admin),
    target: Admin = Depends(get_admin_by_id),
    service: AdminService = Depends(get_admin_service),
):
    deleted = service.delete_admin(admin, target)
    return AdminResponse(data=AdminData(admin=AdminOut.model_validate(deleted)))
