# ============================================
# tracker/serializers/issue.py
# ============================================
from rest_framework import serializers
from tracker.models import Issue
from tracker.serializers.user import UserOutputSerializer
from tracker.services.reorder import ReorderEntry


class IssueCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    status = serializers.ChoiceField(choices=Issue.Status.choices)
    priority = serializers.ChoiceField(
        choices=Issue.Priority.choices,
        default=Issue.Priority.MEDIUM
    )
    sprint_id = serializers.IntegerField(required=False, allow_null=True)
    assignee_id = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class IssueUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Issue.Status.choices, required=False)
    priority = serializers.ChoiceField(choices=Issue.Priority.choices, required=False)


class ReorderEntrySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    status = serializers.ChoiceField(choices=Issue.Status.choices)
    order = serializers.IntegerField()

    def to_entry(self, data) -> ReorderEntry:
        return ReorderEntry(issue_id=data['id'], status=data['status'], order=data['order'])


class ReorderBatchSerializer(serializers.Serializer):
    issues = ReorderEntrySerializer(many=True, allow_empty=False)

    def entries(self):
        child = ReorderEntrySerializer()
        return [child.to_entry(row) for row in self.validated_data['issues']]


class IssueMoveSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Issue.Status.choices)
    index = serializers.IntegerField(min_value=0)


class ReorderEntryOutputSerializer(serializers.Serializer):
    id = serializers.IntegerField(source='issue_id')
    status = serializers.CharField()
    order = serializers.IntegerField()


class IssueOutputSerializer(serializers.ModelSerializer):
    assignee = UserOutputSerializer(read_only=True, allow_null=True)
    reporter = UserOutputSerializer(read_only=True)
    project_id = serializers.IntegerField(read_only=True)
    sprint_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = Issue
        fields = [
            'id', 'title', 'description', 'status', 'priority', 'order',
            'project_id', 'sprint_id', 'assignee', 'reporter',
            'created_at', 'updated_at'
        ]


class IssueListOutputSerializer(serializers.ModelSerializer):
    """Lighter serializer for the "my issues" list"""
    project_key = serializers.CharField(source='project.key', read_only=True)
    assignee = serializers.SerializerMethodField()
    reporter = serializers.SerializerMethodField()

    class Meta:
        model = Issue
        fields = [
            'id', 'title', 'status', 'priority', 'project_key',
            'assignee', 'reporter', 'updated_at'
        ]

    def get_assignee(self, obj):
        if obj.assignee:
            return {'id': obj.assignee.id, 'name': obj.assignee.name}
        return None

    def get_reporter(self, obj):
        return {'id': obj.reporter.id, 'name': obj.reporter.name}
