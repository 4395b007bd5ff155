# -*- coding: utf-8 -*-
"""
Domain exceptions và exception handler toàn cục cho REST API.

Service layer raise EntityNotFound / DuplicateEntity; view không bắt lỗi.
`api_exception_handler` (REST_FRAMEWORK["EXCEPTION_HANDLER"]) chuyển mọi lỗi
thành response JSON thống nhất:

    EntityNotFound / Http404          -> 404, body là chuỗi message
    DuplicateEntity / IntegrityError  -> 409, body là chuỗi message
    ValidationError (DRF hoặc Django) -> 400, body là {field: message}
    APIException khác                 -> status của nó, body là chuỗi message
    mọi lỗi khác                      -> 500, không lộ chi tiết nội bộ
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from django.core.exceptions import PermissionDenied, ValidationError as DjangoValidationError
from django.db import IntegrityError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.views import set_rollback

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
INTEGRITY_ERROR_MESSAGE = "Entity already exists or violates constraints"


# ============== Domain exceptions ==============
class EntityNotFound(Exception):
    """Referenced entity does not exist. Maps to HTTP 404."""

    def __init__(self, entity: str, identity: Any = None, message: Optional[str] = None):
        self.entity = entity
        self.identity = identity
        if message is None:
            if identity is None:
                message = f"{entity} not found"
            else:
                message = f"{entity} not found with id: {identity}"
        super().__init__(message)


class DuplicateEntity(Exception):
    """Identity collision on create. Maps to HTTP 409."""

    def __init__(self, entity: str, identity: Any = None):
        self.entity = entity
        self.identity = identity
        if identity is None:
            message = f"{entity} already exists"
        else:
            message = f"{entity} ID already exists: {identity}"
        super().__init__(message)


# ============== Helpers ==============
def _first_message(value: Any) -> str:
    while isinstance(value, (list, tuple)) and value:
        value = value[0]
    if isinstance(value, dict):
        return next(iter(_field_errors(value).values()), "")
    return str(value)


def _field_errors(detail: Any, prefix: str = "") -> Dict[str, str]:
    """Flatten serializer errors to {field: first message}; nested keys are dotted."""
    if not isinstance(detail, dict):
        return {prefix or api_settings.NON_FIELD_ERRORS_KEY: _first_message(detail)}
    out: Dict[str, str] = {}
    for key, value in detail.items():
        name = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            out.update(_field_errors(value, name))
        else:
            out[name] = _first_message(value)
    return out


def _describe(context: Dict[str, Any]) -> str:
    request = context.get("request") if context else None
    if request is None:
        return "-"
    return f"{request.method} {request.path}"


def _respond(exc: Exception, context: Dict[str, Any], data: Any, code: int,
             headers: Optional[Dict[str, str]] = None) -> Response:
    logger.warning("%s -> %s %s: %s", _describe(context), code, type(exc).__name__, data)
    set_rollback()
    return Response(data, status=code, headers=headers)


# ============== Handler ==============
def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    if isinstance(exc, EntityNotFound):
        return _respond(exc, context, str(exc), status.HTTP_404_NOT_FOUND)

    if isinstance(exc, DuplicateEntity):
        return _respond(exc, context, str(exc), status.HTTP_409_CONFLICT)

    if isinstance(exc, IntegrityError):
        return _respond(exc, context, INTEGRITY_ERROR_MESSAGE, status.HTTP_409_CONFLICT)

    if isinstance(exc, DjangoValidationError):
        if hasattr(exc, "error_dict"):
            data = _field_errors(exc.message_dict)
        else:
            data = {api_settings.NON_FIELD_ERRORS_KEY: _first_message(exc.messages)}
        return _respond(exc, context, data, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, exceptions.ValidationError):
        return _respond(exc, context, _field_errors(exc.detail), status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, Http404):
        exc = exceptions.NotFound(*(exc.args or ()))
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied(*(exc.args or ()))

    # MethodNotAllowed, ParseError, UnsupportedMediaType...
    if isinstance(exc, exceptions.APIException):
        headers = {}
        if getattr(exc, "auth_header", None):
            headers["WWW-Authenticate"] = exc.auth_header
        if getattr(exc, "wait", None):
            headers["Retry-After"] = "%d" % exc.wait
        return _respond(exc, context, _first_message(exc.detail), exc.status_code, headers=headers or None)

    logger.exception("Unhandled error on %s", _describe(context))
    set_rollback()
    return Response(INTERNAL_ERROR_MESSAGE, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
