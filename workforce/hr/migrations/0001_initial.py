import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Department",
            fields=[
                ("id", models.IntegerField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=120)),
                ("established", models.DateField(blank=True, null=True)),
            ],
            options={
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Employee",
            fields=[
                ("emp_no", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=120)),
                ("age", models.PositiveIntegerField(default=0)),
                ("salary", models.FloatField(db_index=True, default=0)),
                ("gender", models.CharField(blank=True, default="", max_length=20)),
                (
                    "department",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="employees",
                        to="hr.department",
                    ),
                ),
            ],
            options={
                "ordering": ["emp_no"],
            },
        ),
        migrations.CreateModel(
            name="Project",
            fields=[
                ("id", models.IntegerField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=120)),
                (
                    "employees",
                    models.ManyToManyField(blank=True, related_name="projects", to="hr.employee"),
                ),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
