# hr/urls/__init__.py
"""
Root URLconf của app hr.

Repository và service được tạo một lần khi URLconf load, rồi truyền vào
từng view qua as_view(service=...). View không tự import service toàn cục.
"""
from hr.repositories.department_repository import DepartmentRepository
from hr.repositories.employee_repository import EmployeeRepository
from hr.repositories.project_repository import ProjectRepository
from hr.services.department_service import DepartmentService
from hr.services.employee_service import EmployeeService
from hr.services.project_service import ProjectService
from . import department_urls, employee_urls, project_urls

department_repository = DepartmentRepository()
employee_repository = EmployeeRepository()
project_repository = ProjectRepository()

department_service = DepartmentService(department_repository)
employee_service = EmployeeService(employee_repository, department_repository)
project_service = ProjectService(project_repository, employee_repository)

urlpatterns = [
    # /dept, /dept/<pk>, /dept/names, /dept/names/<fragment>
    *department_urls.build_urlpatterns(department_service),
    # /emp, /emp/<pk>, /emp/salary-range, /emp/department/<dept_id>
    *employee_urls.build_urlpatterns(employee_service),
    # /project, /project/<pk>, /project/<pk>/employees/<emp_no>
    *project_urls.build_urlpatterns(project_service),
]
