# ============================================
# tracker/services/project.py
# ============================================
import logging
from typing import Dict, List
from django.db import DatabaseError
from rest_framework.exceptions import ValidationError

from tracker.clients.auth_client import AuthContext
from tracker.exceptions import NotFound, PersistenceFailure, Unauthorized
from tracker.models import Project
from tracker.permissions import (
    require_org_admin,
    require_org_member,
    require_organization,
)
from tracker.selectors.project import ProjectSelector
from tracker.services.user import UserService

logger = logging.getLogger(__name__)


class ProjectService:

    @staticmethod
    def create_project(
        *,
        ctx: AuthContext,
        name: str,
        key: str,
        description: str = ''
    ) -> Project:
        """Create a project in the active organization (org admins only)"""
        require_org_admin(ctx)
        creator = UserService.get_current_user(ctx)

        key = key.upper()
        if ProjectSelector.key_taken(ctx.org_id, key):
            raise ValidationError({'key': f"Project key '{key}' already exists"})

        try:
            project = Project.objects.create(
                name=name,
                key=key,
                description=description,
                organization_id=ctx.org_id,
                admin_ids=[creator.id],
            )
        except DatabaseError as e:
            raise PersistenceFailure(f"Error creating project: {e}") from e

        logger.info("[project] created id=%s key=%s org=%s", project.id, key, ctx.org_id)
        return project

    @staticmethod
    def list_projects(*, ctx: AuthContext, org_id: str) -> List[Project]:
        require_org_member(ctx, org_id)
        return list(ProjectSelector.get_projects_for_organization(org_id))

    @staticmethod
    def get_project(*, ctx: AuthContext, project_id: int) -> Project:
        require_organization(ctx)
        project = ProjectSelector.get_project_with_sprints(project_id)
        # Other organizations' projects are reported as missing
        if project is None or project.organization_id != ctx.org_id:
            raise NotFound("Project not found")
        return project

    @staticmethod
    def delete_project(*, ctx: AuthContext, project_id: int) -> Dict[str, bool]:
        require_org_admin(ctx)

        project = ProjectSelector.get_project_by_id(project_id)
        if project is None:
            raise NotFound("Project not found")
        if project.organization_id != ctx.org_id:
            raise Unauthorized("Project not found or you don't have permission to delete it")

        project.delete()
        logger.info("[project] deleted id=%s org=%s", project_id, ctx.org_id)
        return {'success': True}
