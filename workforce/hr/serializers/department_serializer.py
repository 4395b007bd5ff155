from rest_framework import serializers
from hr.models import Department

# giới hạn cột INTEGER; id âm không khớp route <int:pk>
MAX_INT = 2**31 - 1


class DepartmentWriteSerializer(serializers.Serializer):
    # id do client chọn; trùng id -> 409 ở service, không validate unique ở đây
    id = serializers.IntegerField(min_value=0, max_value=MAX_INT)
    name = serializers.CharField(max_length=120)
    established = serializers.DateField(required=False, allow_null=True)


class DepartmentUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=120)


#dùng để đọc thôi
class DepartmentReadSerializer(serializers.ModelSerializer):
    class Meta:
        model = Department
        fields = ["id", "name", "established"]
        read_only_fields = ["id", "name", "established"]
