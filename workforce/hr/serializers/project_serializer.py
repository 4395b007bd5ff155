from rest_framework import serializers
from hr.models import Project
from hr.serializers.department_serializer import MAX_INT


class ProjectWriteSerializer(serializers.Serializer):
    id = serializers.IntegerField(min_value=0, max_value=MAX_INT)
    name = serializers.CharField(max_length=120)
    employees = serializers.ListField(
        child=serializers.CharField(max_length=32),
        required=False,
        default=list,
    )


class ProjectUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=120)


class ProjectReadSerializer(serializers.ModelSerializer):
    # danh sách empNo
    employees = serializers.PrimaryKeyRelatedField(many=True, read_only=True)

    class Meta:
        model = Project
        fields = ["id", "name", "employees"]
