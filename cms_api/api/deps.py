from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from cms_api.core.config import Settings
from cms_api.core.errors import AuthenticationError, ResourceNotFound
from cms_api.core.security import TokenIssuer
from cms_api.db.session import get_db
from cms_api.models.admin import Admin
from cms_api.models.common import is_valid_id
from cms_api.repositories.admins import AdminStore
from cms_api.services.admins import AdminService

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.tokens


def get_admin_store(db: Session = Depends(get_db)) -> AdminStore:
    return AdminStore(db)


def get_admin_service(
    store: AdminStore = Depends(get_admin_store),
    tokens: TokenIssuer = Depends(get_token_issuer),
    settings: Settings = Depends(get_app_settings),
) -> AdminService:
    return AdminService(store, tokens, temporary_password_length=settings.temporary_password_length)


def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    store: AdminStore = Depends(get_admin_store),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> Admin:
    if credentials is None:
        raise AuthenticationError("No authorization token was found")

    admin_id = tokens.verify(credentials.credentials)
    admin = store.get(admin_id)
    if not admin:
        raise AuthenticationError("admin not found")
    return admin


def get_admin_by_id(admin_id: str, store: AdminStore = Depends(get_admin_store)) -> Admin:
    if not is_valid_id(admin_id):
        raise ResourceNotFound("Not a MongoId")

    admin = store.get(admin_id)
    if not admin:
        raise ResourceNotFound("No resource found with this Id")
    return admin
