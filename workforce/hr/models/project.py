from django.db import models
from .employee import Employee


class Project(models.Model):
    id = models.IntegerField(primary_key=True)
    name = models.CharField(max_length=120)
    # Project là phía sở hữu quan hệ many-to-many (bảng nối hr_project_employees)
    employees = models.ManyToManyField(Employee, related_name="projects", blank=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name
