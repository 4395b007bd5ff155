# views/department_view.py
from rest_framework import serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from hr.serializers.department_serializer import (
    DepartmentWriteSerializer,
    DepartmentUpdateSerializer,
    DepartmentReadSerializer,
)
from .utils import extend_schema, extend_schema_view, OpenApiResponse, path_int, path_str, message_response, std_errors


# -----------------------------
# /dept  (list + create)
# -----------------------------
@extend_schema_view(
    get=extend_schema(
        tags=["Department"],
        summary="List all departments",
        responses=OpenApiResponse(DepartmentReadSerializer(many=True)),
    ),
    post=extend_schema(
        tags=["Department"],
        summary="Create a new department",
        request=DepartmentWriteSerializer,
        responses={201: message_response("Created"), **std_errors({409: message_response("Duplicate id")})},
    ),
)
class DepartmentListCreateView(APIView):
    service = None  # DepartmentService, gắn qua as_view(service=...)

    def get(self, request):
        departments = self.service.list_all()
        return Response(DepartmentReadSerializer(departments, many=True).data)

    def post(self, request):
        """
        Tạo mới một Department.
        Trùng id -> 409 (service raise DuplicateEntity).
        """
        ser = DepartmentWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        message = self.service.create(ser.validated_data)
        return Response(message, status=status.HTTP_201_CREATED)


# -----------------------------
# /dept/<pk>  (get + update + delete)
# -----------------------------
@extend_schema_view(
    get=extend_schema(
        tags=["Department"],
        summary="Get department details",
        parameters=[path_int("pk", "Department ID")],
        responses={200: OpenApiResponse(DepartmentReadSerializer), **std_errors()},
    ),
    put=extend_schema(
        tags=["Department"],
        summary="Update department name (other fields are ignored)",
        parameters=[path_int("pk", "Department ID")],
        request=DepartmentUpdateSerializer,
        responses={200: OpenApiResponse(DepartmentReadSerializer), **std_errors()},
    ),
    delete=extend_schema(
        tags=["Department"],
        summary="Delete department (its employees are detached)",
        parameters=[path_int("pk", "Department ID")],
        responses={200: message_response("Deleted"), **std_errors()},
    ),
)
class DepartmentDetailView(APIView):
    service = None

    def get(self, request, pk: int):
        dept = self.service.get_by_id(pk)
        return Response(DepartmentReadSerializer(dept).data)

    def put(self, request, pk: int):
        ser = DepartmentUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        updated = self.service.update(pk, ser.validated_data)
        return Response(DepartmentReadSerializer(updated).data)

    def delete(self, request, pk: int):
        return Response(self.service.delete(pk))


# -----------------------------
# /dept/names  +  /dept/names/<fragment>
# -----------------------------
@extend_schema_view(
    get=extend_schema(
        tags=["Department"],
        summary="List department names",
        responses=OpenApiResponse(serializers.ListField(child=serializers.CharField())),
    ),
)
class DepartmentNameListView(APIView):
    service = None

    def get(self, request):
        return Response(self.service.list_names())


@extend_schema_view(
    get=extend_schema(
        tags=["Department"],
        summary="Search departments by name (case-insensitive substring, 404 when nothing matches)",
        parameters=[path_str("fragment", "Part of the department name")],
        responses={200: OpenApiResponse(DepartmentReadSerializer(many=True)), 404: message_response("No match")},
    ),
)
class DepartmentNameSearchView(APIView):
    service = None

    def get(self, request, fragment: str):
        matches = self.service.search_by_name(fragment)
        return Response(DepartmentReadSerializer(matches, many=True).data)
