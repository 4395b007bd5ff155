# views/employee_view.py
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response

from hr.serializers.employee_serializer import (
    EmployeeReadSerializer,
    EmployeeWriteSerializer,
    SalaryRangeQuerySerializer,
)
from .utils import extend_schema, extend_schema_view, OpenApiResponse, path_int, path_str, q_float, message_response, std_errors


# ==============================================================
# /emp  -> GET list all + POST create
# ==============================================================
@extend_schema_view(
    get=extend_schema(
        tags=["Employee"],
        summary="List all employees",
        responses=OpenApiResponse(EmployeeReadSerializer(many=True)),
    ),
    post=extend_schema(
        tags=["Employee"],
        summary="Create employee",
        request=EmployeeWriteSerializer,
        responses={201: message_response("Created"), **std_errors({409: message_response("Duplicate empNo")})},
    ),
)
class EmployeeListCreateView(APIView):
    """
    GET: danh sách tất cả nhân viên
    POST: tạo nhân viên mới; trùng empNo -> 409, department không tồn tại -> 404
    """
    service = None  # EmployeeService

    def get(self, request):
        employees = self.service.list_all()
        return Response(EmployeeReadSerializer(employees, many=True).data)

    def post(self, request):
        # 1. Validate dữ liệu đầu vào
        serializer = EmployeeWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        # 2. Tạo nhân viên bằng service
        message = self.service.create(serializer.validated_data)
        return Response(message, status=status.HTTP_201_CREATED)


# ==============================================================
# /emp/<pk>  -> GET detail + PUT update + DELETE
# ==============================================================
@extend_schema_view(
    get=extend_schema(
        tags=["Employee"],
        summary="Get employee details",
        parameters=[path_str("pk", "Employee number")],
        responses={200: OpenApiResponse(EmployeeReadSerializer), **std_errors()},
    ),
    put=extend_schema(
        tags=["Employee"],
        summary="Update employee (name, age, salary, gender, department; empNo is immutable)",
        parameters=[path_str("pk", "Employee number")],
        request=EmployeeWriteSerializer,
        responses={200: OpenApiResponse(EmployeeReadSerializer), **std_errors()},
    ),
    delete=extend_schema(
        tags=["Employee"],
        summary="Delete employee",
        parameters=[path_str("pk", "Employee number")],
        responses={200: message_response("Deleted"), **std_errors()},
    ),
)
class EmployeeDetailView(APIView):
    service = None

    def get(self, request, pk: str):
        employee = self.service.get_by_id(pk)
        return Response(EmployeeReadSerializer(employee).data)

    def put(self, request, pk: str):
        # chỉ các field gửi lên mới được cập nhật
        serializer = EmployeeWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        updated_employee = self.service.update(pk, serializer.validated_data)
        return Response(EmployeeReadSerializer(updated_employee).data)

    def delete(self, request, pk: str):
        return Response(self.service.delete(pk))


# ==============================================================
# /emp/salary-range?min=&max=  -> GET
# ==============================================================
@extend_schema_view(
    get=extend_schema(
        tags=["Employee"],
        summary="Employees with min <= salary <= max",
        parameters=[
            q_float("min", "Lower bound (inclusive)", required=True),
            q_float("max", "Upper bound (inclusive)", required=True),
        ],
        responses={200: OpenApiResponse(EmployeeReadSerializer(many=True)), **std_errors()},
    )
)
class EmployeeSalaryRangeView(APIView):
    service = None

    def get(self, request):
        params = SalaryRangeQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        employees = self.service.find_by_salary_range(
            params.validated_data["min"], params.validated_data["max"]
        )
        return Response(EmployeeReadSerializer(employees, many=True).data)


# ==============================================================
# /emp/department/<dept_id>  -> GET
# ==============================================================
@extend_schema_view(
    get=extend_schema(
        tags=["Employee"],
        summary="Employees of a department",
        parameters=[path_int("dept_id", "Department ID")],
        responses={200: OpenApiResponse(EmployeeReadSerializer(many=True)), **std_errors()},
    )
)
class EmployeeByDepartmentView(APIView):
    service = None

    def get(self, request, dept_id: int):
        employees = self.service.find_by_department_id(dept_id)
        return Response(EmployeeReadSerializer(employees, many=True).data)
