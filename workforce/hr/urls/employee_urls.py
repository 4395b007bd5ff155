from django.urls import path
from hr.views.employee_view import (
    EmployeeListCreateView,
    EmployeeDetailView,
    EmployeeSalaryRangeView,
    EmployeeByDepartmentView,
)


def build_urlpatterns(service):
    return [
        # /emp
        path("emp", EmployeeListCreateView.as_view(service=service), name="employee-list-create"),
        # /emp/salary-range?min=&max=  (phải đứng trước <str:pk>)
        path("emp/salary-range", EmployeeSalaryRangeView.as_view(service=service), name="employee-salary-range"),
        # /emp/department/<dept_id>
        path("emp/department/<int:dept_id>", EmployeeByDepartmentView.as_view(service=service), name="employee-by-department"),
        # /emp/<pk>
        path("emp/<str:pk>", EmployeeDetailView.as_view(service=service), name="employee-detail"),
    ]
