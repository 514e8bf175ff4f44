# ============================================
# tracker/permissions.py
# ============================================
from rest_framework.permissions import BasePermission

from tracker.clients.auth_client import ADMIN_ROLE, AuthContext, get_auth_provider
from tracker.exceptions import Unauthorized
from tracker.models import Issue, Project, User


def require_session(ctx: AuthContext) -> None:
    if ctx is None or not ctx.user_id:
        raise Unauthorized("Unauthorized: User not authenticated.")


def require_organization(ctx: AuthContext) -> None:
    require_session(ctx)
    if not ctx.org_id:
        raise Unauthorized("Unauthorized: No active organization.")


def require_same_organization(ctx: AuthContext, project: Project) -> None:
    require_organization(ctx)
    if project.organization_id != ctx.org_id:
        raise Unauthorized()


def require_org_admin(ctx: AuthContext) -> None:
    require_organization(ctx)
    role = get_auth_provider().get_role(ctx.org_id, ctx.user_id)
    if role != ADMIN_ROLE:
        raise Unauthorized("Permission denied: Only organization admins can do this.")


def require_org_member(ctx: AuthContext, org_id: str) -> None:
    require_session(ctx)
    if not org_id:
        raise Unauthorized("Organization not found: No organization ID provided.")
    if get_auth_provider().get_role(org_id, ctx.user_id) is None:
        raise Unauthorized("Permission denied: Not a member of this organization.")


def can_delete_issue(user: User, issue: Issue) -> bool:
    return issue.reporter_id == user.id or issue.project.is_admin(user.id)


class HasActiveOrganization(BasePermission):
    message = 'An active organization is required.'

    def has_permission(self, request, view):
        ctx = request.auth
        return bool(isinstance(ctx, AuthContext) and ctx.user_id and ctx.org_id)
