from django.urls import path
from hr.views.project_view import (
    ProjectListCreateView,
    ProjectDetailView,
    ProjectEmployeeView,
)


def build_urlpatterns(service):
    return [
        # /project
        path("project", ProjectListCreateView.as_view(service=service), name="project-list-create"),
        # /project/<pk>
        path("project/<int:pk>", ProjectDetailView.as_view(service=service), name="project-detail"),
        # /project/<pk>/employees/<emp_no>
        path("project/<int:pk>/employees/<str:emp_no>", ProjectEmployeeView.as_view(service=service), name="project-employee"),
    ]
