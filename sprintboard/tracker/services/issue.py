# ============================================
# tracker/services/issue.py
# ============================================
import logging
from typing import Dict, List, Optional
from django.db import DatabaseError, transaction
from rest_framework.exceptions import ValidationError

from tracker.clients.auth_client import AuthContext
from tracker.exceptions import NotFound, PersistenceFailure, Unauthorized
from tracker.models import Issue
from tracker.permissions import (
    can_delete_issue,
    require_organization,
    require_same_organization,
)
from tracker.selectors.issue import IssueSelector
from tracker.selectors.project import ProjectSelector
from tracker.selectors.sprint import SprintSelector
from tracker.selectors.user import UserSelector
from tracker.services.user import UserService

logger = logging.getLogger(__name__)


class IssueService:

    @staticmethod
    def _next_order(project_id: int, status: str) -> int:
        """Append to the bottom of the (project, status) column"""
        last_order = IssueSelector.get_last_order(project_id, status)
        return last_order + 1 if last_order is not None else 0

    @staticmethod
    def list_by_sprint(*, ctx: AuthContext, sprint_id: int) -> List[Issue]:
        require_organization(ctx)
        return list(IssueSelector.get_issues_for_sprint(sprint_id, ctx.org_id))

    @staticmethod
    def get_issue(*, ctx: AuthContext, issue_id: int) -> Issue:
        require_organization(ctx)
        issue = IssueSelector.get_issue_by_id(issue_id, org_id=ctx.org_id)
        if issue is None:
            raise NotFound("Issue not found")
        return issue

    @staticmethod
    @transaction.atomic
    def create_issue(
        *,
        ctx: AuthContext,
        project_id: int,
        title: str,
        status: str,
        description: str = '',
        priority: str = Issue.Priority.MEDIUM,
        sprint_id: Optional[int] = None,
        assignee_id: Optional[str] = None
    ) -> Issue:
        """Create a new issue at the end of its status column"""
        require_organization(ctx)
        reporter = UserService.get_current_user(ctx)

        project = ProjectSelector.get_project_by_id(project_id)
        if project is None:
            raise NotFound("Project not found")
        require_same_organization(ctx, project)

        if sprint_id:
            sprint = SprintSelector.get_sprint_by_id(sprint_id)
            if sprint is None or sprint.project_id != project.id:
                raise ValidationError({'sprint_id': "Sprint does not belong to this project"})

        # Candidates come from the organization's member list; not re-checked here
        assignee = None
        if assignee_id:
            assignee = UserSelector.get_user_by_external_id(assignee_id)
            if assignee is None:
                raise NotFound("Assignee not found")

        issue = Issue.objects.create(
            project=project,
            sprint_id=sprint_id or None,
            title=title,
            description=description,
            status=status,
            priority=priority,
            order=IssueService._next_order(project.id, status),
            reporter=reporter,
            assignee=assignee,
        )
        logger.info(
            "[issue] created id=%s project=%s status=%s order=%s by=%s",
            issue.id, project.id, status, issue.order, reporter.id
        )
        return IssueSelector.get_issue_by_id(issue.id)

    @staticmethod
    def update_issue(
        *,
        ctx: AuthContext,
        issue_id: int,
        **data
    ) -> Issue:
        """Partial update; only status and priority are writable here"""
        require_organization(ctx)

        issue = IssueSelector.get_issue_by_id(issue_id)
        if issue is None:
            raise NotFound("Issue not found")

        if issue.project.organization_id != ctx.org_id:
            raise Unauthorized()

        changes: Dict[str, str] = {
            field: data[field]
            for field in ('status', 'priority')
            if data.get(field) is not None
        }
        if changes:
            try:
                Issue.objects.filter(id=issue.id).update(**changes)
            except DatabaseError as e:
                raise PersistenceFailure(f"Error updating issue: {e}") from e
            logger.info("[issue] updated id=%s fields=%s", issue.id, sorted(changes))

        return IssueSelector.get_issue_by_id(issue.id)

    @staticmethod
    def delete_issue(*, ctx: AuthContext, issue_id: int) -> Dict[str, bool]:
        """Delete issue; reporter or project admin only"""
        require_organization(ctx)
        user = UserService.get_current_user(ctx)

        issue = IssueSelector.get_issue_by_id(issue_id)
        if issue is None:
            raise NotFound("Issue not found")

        require_same_organization(ctx, issue.project)
        if not can_delete_issue(user, issue):
            raise Unauthorized("You don't have permission to delete this issue")

        issue.delete()
        logger.info("[issue] deleted id=%s by=%s", issue_id, user.id)
        return {'success': True}

    @staticmethod
    def list_user_issues(*, ctx: AuthContext, user_external_id: str) -> List[Issue]:
        require_organization(ctx)
        user = UserSelector.get_user_by_external_id(user_external_id)
        if user is None:
            raise NotFound("User not found")
        return list(IssueSelector.get_issues_for_user(user, ctx.org_id))
