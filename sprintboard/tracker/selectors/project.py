# ============================================
# tracker/selectors/project.py
# ============================================
from typing import Optional
from django.db.models import Prefetch, QuerySet
from tracker.models import Project, Sprint


class ProjectSelector:

    @staticmethod
    def get_project_by_id(project_id: int) -> Optional[Project]:
        """Get single project by ID"""
        try:
            return Project.objects.get(id=project_id)
        except Project.DoesNotExist:
            return None

    @staticmethod
    def get_project_with_sprints(project_id: int) -> Optional[Project]:
        try:
            return Project.objects.prefetch_related(
                Prefetch('sprints', queryset=Sprint.objects.order_by('-created_at'))
            ).get(id=project_id)
        except Project.DoesNotExist:
            return None

    @staticmethod
    def get_projects_for_organization(org_id: str) -> QuerySet:
        return Project.objects.filter(organization_id=org_id).order_by('-created_at')

    @staticmethod
    def key_taken(org_id: str, key: str) -> bool:
        return Project.objects.filter(organization_id=org_id, key=key).exists()
