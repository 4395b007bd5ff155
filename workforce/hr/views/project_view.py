# views/project_view.py
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response

from hr.serializers.project_serializer import (
    ProjectWriteSerializer,
    ProjectUpdateSerializer,
    ProjectReadSerializer,
)
from .utils import extend_schema, extend_schema_view, OpenApiResponse, path_int, path_str, message_response, std_errors


@extend_schema_view(
    get=extend_schema(
        tags=["Project"],
        summary="List all projects",
        responses=OpenApiResponse(ProjectReadSerializer(many=True)),
    ),
    post=extend_schema(
        tags=["Project"],
        summary="Create project (optionally with initial employees)",
        request=ProjectWriteSerializer,
        responses={201: message_response("Created"), **std_errors({409: message_response("Duplicate id")})},
    ),
)
class ProjectListCreateView(APIView):
    service = None  # ProjectService

    def get(self, request):
        return Response(ProjectReadSerializer(self.service.list_all(), many=True).data)

    def post(self, request):
        ser = ProjectWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        message = self.service.create(ser.validated_data)
        return Response(message, status=status.HTTP_201_CREATED)


@extend_schema_view(
    get=extend_schema(
        tags=["Project"],
        summary="Get project details",
        parameters=[path_int("pk", "Project ID")],
        responses={200: OpenApiResponse(ProjectReadSerializer), **std_errors()},
    ),
    put=extend_schema(
        tags=["Project"],
        summary="Rename project",
        parameters=[path_int("pk", "Project ID")],
        request=ProjectUpdateSerializer,
        responses={200: OpenApiResponse(ProjectReadSerializer), **std_errors()},
    ),
    delete=extend_schema(
        tags=["Project"],
        summary="Delete project",
        parameters=[path_int("pk", "Project ID")],
        responses={200: message_response("Deleted"), **std_errors()},
    ),
)
class ProjectDetailView(APIView):
    service = None

    def get(self, request, pk: int):
        return Response(ProjectReadSerializer(self.service.get_by_id(pk)).data)

    def put(self, request, pk: int):
        ser = ProjectUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        updated = self.service.update(pk, ser.validated_data)
        return Response(ProjectReadSerializer(updated).data)

    def delete(self, request, pk: int):
        return Response(self.service.delete(pk))


# /project/<pk>/employees/<emp_no>  -> POST gán, DELETE gỡ
@extend_schema_view(
    post=extend_schema(
        tags=["Project"],
        summary="Assign employee to project",
        request=None,
        parameters=[path_int("pk", "Project ID"), path_str("emp_no", "Employee number")],
        responses={200: OpenApiResponse(ProjectReadSerializer), **std_errors()},
    ),
    delete=extend_schema(
        tags=["Project"],
        summary="Remove employee from project",
        parameters=[path_int("pk", "Project ID"), path_str("emp_no", "Employee number")],
        responses={200: OpenApiResponse(ProjectReadSerializer), **std_errors()},
    ),
)
class ProjectEmployeeView(APIView):
    service = None

    def post(self, request, pk: int, emp_no: str):
        project = self.service.assign_employee(pk, emp_no)
        return Response(ProjectReadSerializer(project).data)

    def delete(self, request, pk: int, emp_no: str):
        project = self.service.unassign_employee(pk, emp_no)
        return Response(ProjectReadSerializer(project).data)
