import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cms_api.core.errors import ApiError
from cms_api.schemas.admins import CREDENTIALS_REQUIRED, PASSWORD_UPDATE_REQUIRED

logger = logging.getLogger(__name__)


def error_response(status_code: int, name: str, message: str) -> JSONResponse:
    status = "error" if status_code >= 500 else "fail"
    return JSONResponse(
        status_code=status_code,
        content={"status": status, "data": {"name": name, "message": message}},
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"status": exc.status, "data": exc.to_dict()})


BODY_ERROR_MESSAGES = {
    ("POST", "/register"): CREDENTIALS_REQUIRED,
    ("POST", "/signin"): CREDENTIALS_REQUIRED,
    ("POST", "/admins"): CREDENTIALS_REQUIRED,
    ("PUT", "/admins/{admin_id}"): PASSWORD_UPDATE_REQUIRED,
}


def _body_error_message(request: Request) -> str:
    route = request.scope.get("route")
    if route is None:
        return "malformed request body"
    prefix = request.app.state.settings.api_v1_prefix
    path = route.path_format.removeprefix(prefix)
    return BODY_ERROR_MESSAGES.get((request.method, path), "malformed request body")


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Malformed request to %s: %s", request.url.path, exc.errors())
    return error_response(400, "BadRequest", _body_error_message(request))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return error_response(404, "ResourceNotFound", "resource not found")
    return error_response(exc.status_code, "HTTPError", str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "InternalServerError", "internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
