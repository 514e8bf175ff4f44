# ============================================
# tracker/selectors/sprint.py
# ============================================
from typing import Optional
from django.db.models import QuerySet
from tracker.models import Sprint


class SprintSelector:

    @staticmethod
    def get_sprint_by_id(sprint_id: int) -> Optional[Sprint]:
        try:
            return Sprint.objects.select_related('project').get(id=sprint_id)
        except Sprint.DoesNotExist:
            return None

    @staticmethod
    def get_sprints_for_project(project_id: int) -> QuerySet:
        return Sprint.objects.filter(project_id=project_id).order_by('-created_at')
