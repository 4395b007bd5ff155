from django.contrib import admin
from .models import Department, Employee, Project


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "established")
    search_fields = ("name",)


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ("emp_no", "name", "age", "salary", "gender", "department")
    list_filter = ("department",)
    search_fields = ("emp_no", "name")


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("id", "name")
    filter_horizontal = ("employees",)
