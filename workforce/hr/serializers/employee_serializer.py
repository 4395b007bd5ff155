from rest_framework import serializers
from hr.models import Employee
from hr.serializers.department_serializer import DepartmentReadSerializer, MAX_INT

# "/" không khớp <str:pk>, "salary-range" trùng route /emp/salary-range
EMP_NO_PATTERN = r"^[^/]+$"
RESERVED_EMP_NOS = {"salary-range"}


class DepartmentRefSerializer(serializers.Serializer):
    """`{"id": n}` reference to an existing department."""
    id = serializers.IntegerField(min_value=0, max_value=MAX_INT)

    def validate(self, attrs):
        # partial update bỏ qua field rỗng, nhưng tham chiếu department luôn cần id
        if "id" not in attrs:
            raise serializers.ValidationError({"id": "This field is required."})
        return attrs


class EmployeeWriteSerializer(serializers.Serializer):
    empNo = serializers.RegexField(
        EMP_NO_PATTERN,
        source="emp_no",
        max_length=32,
        error_messages={"invalid": "Employee number must not contain '/'."},
    )
    name = serializers.CharField(max_length=120)
    age = serializers.IntegerField(min_value=0, max_value=MAX_INT, required=False)
    salary = serializers.FloatField(min_value=0, required=False)
    gender = serializers.CharField(max_length=20, required=False, allow_blank=True)
    department = DepartmentRefSerializer(required=False, allow_null=True)

    def validate_empNo(self, value):
        if value in RESERVED_EMP_NOS:
            raise serializers.ValidationError(f"'{value}' is a reserved employee number.")
        return value


class EmployeeReadSerializer(serializers.ModelSerializer):
    empNo = serializers.CharField(source="emp_no", read_only=True)
    department = DepartmentReadSerializer(read_only=True)
    projects = serializers.PrimaryKeyRelatedField(many=True, read_only=True)

    class Meta:
        model = Employee
        fields = ["empNo", "name", "age", "salary", "gender", "department", "projects"]


class SalaryRangeQuerySerializer(serializers.Serializer):
    min = serializers.FloatField()
    max = serializers.FloatField()
