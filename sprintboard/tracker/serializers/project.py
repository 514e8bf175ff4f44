# ============================================
# tracker/serializers/project.py
# ============================================
from rest_framework import serializers
from tracker.models import Project, Sprint


class ProjectCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    key = serializers.RegexField(r'^[A-Za-z][A-Za-z0-9]{1,9}$', max_length=10)
    description = serializers.CharField(required=False, allow_blank=True, default='')


class SprintCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    start_date = serializers.DateField()
    end_date = serializers.DateField()


class SprintStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Sprint.SprintStatus.choices)


class SprintOutputSerializer(serializers.ModelSerializer):
    project_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Sprint
        fields = [
            'id', 'project_id', 'name', 'status',
            'start_date', 'end_date', 'created_at'
        ]


class ProjectOutputSerializer(serializers.ModelSerializer):
    class Meta:
        model = Project
        fields = [
            'id', 'name', 'key', 'description', 'organization_id',
            'admin_ids', 'created_at', 'updated_at'
        ]


class ProjectDetailOutputSerializer(ProjectOutputSerializer):
    sprints = SprintOutputSerializer(many=True, read_only=True)

    class Meta(ProjectOutputSerializer.Meta):
        fields = ProjectOutputSerializer.Meta.fields + ['sprints']
