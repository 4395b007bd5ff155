from django.db import models
from .department import Department


class Employee(models.Model):
    emp_no = models.CharField(max_length=32, primary_key=True)
    name = models.CharField(max_length=120)
    age = models.PositiveIntegerField(default=0)
    salary = models.FloatField(default=0, db_index=True)
    gender = models.CharField(max_length=20, blank=True, default="")
    # Xóa department -> nhân viên được tách ra (department = NULL), không bị xóa
    department = models.ForeignKey(
        Department,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="employees",
    )

    class Meta:
        ordering = ["emp_no"]

    def __str__(self):
        return f"{self.emp_no} - {self.name}"
