# views/utils.py
"""
Shared tooling for drf-spectacular docs on APIView classes.
Usage in your views:
    from .utils import (
        extend_schema, extend_schema_view, OpenApiResponse,
        path_int, path_str, q_float, message_response, std_errors,
    )
"""
from drf_spectacular.utils import (
    extend_schema, extend_schema_view,
    OpenApiParameter, OpenApiResponse, inline_serializer,
)
from drf_spectacular.types import OpenApiTypes
from rest_framework import serializers

# ---- Reusable error schemas (xem hr.exceptions.api_exception_handler)
FieldErrorsSerializer = inline_serializer(
    name="FieldErrors",
    fields={"field": serializers.CharField(help_text="Field name -> first error message")},
)

# ---- Param helpers

def path_int(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.PATH, description=description)

def path_str(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.PATH, description=description)

def q_float(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.FLOAT, OpenApiParameter.QUERY, required=required, description=description)

# ---- Convenience for common responses

def message_response(description: str = "OK"):
    """Response whose body is a plain JSON string message."""
    return OpenApiResponse(response=OpenApiTypes.STR, description=description)


def std_errors(extra: dict | None = None):
    """Standard error response mapping you can merge into responses=..."""
    errs = {
        400: OpenApiResponse(FieldErrorsSerializer, description="Bad Request"),
        404: message_response("Not Found"),
    }
    if extra:
        errs.update(extra)
    return errs
