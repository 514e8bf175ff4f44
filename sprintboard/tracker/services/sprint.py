# ============================================
# tracker/services/sprint.py
# ============================================
import logging
from datetime import date
from typing import List
from django.utils import timezone
from rest_framework.exceptions import ValidationError

from tracker.clients.auth_client import AuthContext
from tracker.exceptions import NotFound
from tracker.models import Sprint
from tracker.permissions import require_org_admin, require_organization
from tracker.selectors.project import ProjectSelector
from tracker.selectors.sprint import SprintSelector

logger = logging.getLogger(__name__)


class SprintService:

    @staticmethod
    def create_sprint(
        *,
        ctx: AuthContext,
        project_id: int,
        name: str,
        start_date: date,
        end_date: date
    ) -> Sprint:
        require_organization(ctx)

        project = ProjectSelector.get_project_by_id(project_id)
        if project is None or project.organization_id != ctx.org_id:
            raise NotFound("Project not found")

        if end_date < start_date:
            raise ValidationError({'end_date': "End date must not be before start date"})

        if Sprint.objects.filter(project=project, name=name).exists():
            raise ValidationError({'name': f"Sprint '{name}' already exists"})

        sprint = Sprint.objects.create(
            project=project,
            name=name,
            start_date=start_date,
            end_date=end_date,
            status=Sprint.SprintStatus.PLANNED,
        )
        logger.info("[sprint] created id=%s project=%s", sprint.id, project.id)
        return sprint

    @staticmethod
    def list_sprints(*, ctx: AuthContext, project_id: int) -> List[Sprint]:
        require_organization(ctx)
        project = ProjectSelector.get_project_by_id(project_id)
        if project is None or project.organization_id != ctx.org_id:
            raise NotFound("Project not found")
        return list(SprintSelector.get_sprints_for_project(project.id))

    @staticmethod
    def update_sprint_status(*, ctx: AuthContext, sprint_id: int, status: str) -> Sprint:
        """PLANNED -> ACTIVE (inside its dates) -> COMPLETED; admins only"""
        require_org_admin(ctx)

        sprint = SprintSelector.get_sprint_by_id(sprint_id)
        if sprint is None or sprint.project.organization_id != ctx.org_id:
            raise NotFound("Sprint not found")

        today = timezone.localdate()
        if status == Sprint.SprintStatus.ACTIVE and not (sprint.start_date <= today <= sprint.end_date):
            raise ValidationError({'status': "Cannot start sprint outside of its date range"})

        if status == Sprint.SprintStatus.COMPLETED and sprint.status != Sprint.SprintStatus.ACTIVE:
            raise ValidationError({'status': f"Cannot complete a sprint that is {sprint.status}"})

        old_status = sprint.status
        sprint.status = status
        sprint.save(update_fields=['status', 'updated_at'])
        logger.info("[sprint] id=%s status %s -> %s", sprint.id, old_status, status)
        return sprint
