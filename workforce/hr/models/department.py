from django.db import models


class Department(models.Model):
    # id do client cung cấp, không tự sinh
    id = models.IntegerField(primary_key=True)
    name = models.CharField(max_length=120)
    established = models.DateField(null=True, blank=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name
