# ============================================
# tracker/services/organization.py
# ============================================
from typing import Dict, List, Optional

from tracker.clients.auth_client import AuthContext, get_auth_provider
from tracker.models import User
from tracker.permissions import require_org_member, require_session
from tracker.selectors.user import UserSelector
from tracker.services.user import UserService


class OrganizationService:

    @staticmethod
    def get_organization(*, ctx: AuthContext, slug: str) -> Optional[Dict]:
        """Organization by slug, or None when unknown or caller is not a member"""
        require_session(ctx)
        UserService.get_current_user(ctx)

        provider = get_auth_provider()
        organization = provider.get_organization(slug)
        if not organization:
            return None

        if provider.get_role(organization['id'], ctx.user_id) is None:
            return None
        return organization

    @staticmethod
    def list_organization_users(*, ctx: AuthContext, org_id: str) -> List[User]:
        require_org_member(ctx, org_id)
        external_ids = [m.user_id for m in get_auth_provider().list_members(org_id)]
        return list(UserSelector.get_users_by_external_ids(external_ids))
