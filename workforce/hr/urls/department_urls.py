from django.urls import path
from hr.views.department_view import (
    DepartmentListCreateView,
    DepartmentDetailView,
    DepartmentNameListView,
    DepartmentNameSearchView,
)


def build_urlpatterns(service):
    return [
        # /dept
        path("dept", DepartmentListCreateView.as_view(service=service), name="department-list-create"),
        # /dept/names
        path("dept/names", DepartmentNameListView.as_view(service=service), name="department-names"),
        # /dept/names/<fragment>
        path("dept/names/<str:fragment>", DepartmentNameSearchView.as_view(service=service), name="department-name-search"),
        # /dept/<pk>
        path("dept/<int:pk>", DepartmentDetailView.as_view(service=service), name="department-detail"),
    ]
