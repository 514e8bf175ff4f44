# ============================================
# tracker/services/user.py
# ============================================
import logging
from typing import Optional

from tracker.clients.auth_client import AuthContext, get_auth_provider
from tracker.exceptions import NotFound
from tracker.models import User
from tracker.permissions import require_session
from tracker.selectors.user import UserSelector

logger = logging.getLogger(__name__)


class UserService:

    @staticmethod
    def get_current_user(ctx: AuthContext) -> User:
        """Local mirror of the session's identity"""
        require_session(ctx)
        user = UserSelector.get_user_by_external_id(ctx.user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    @staticmethod
    def sync_user(ctx: AuthContext) -> Optional[User]:
        """Create the local mirror on first sight of an external identity"""
        require_session(ctx)

        user = UserSelector.get_user_by_external_id(ctx.user_id)
        if user is not None:
            return user

        profile = get_auth_provider().get_user(ctx.user_id)
        if profile is None:
            logger.info("[user] no provider profile for %s", ctx.user_id)
            return None

        if not profile.emails:
            logger.warning("[user] provider profile %s has no email", ctx.user_id)
            return None

        user = User.objects.create(
            external_id=profile.id,
            name=profile.full_name,
            email=profile.emails[0],
            image_url=profile.image_url,
        )
        logger.info("[user] created local user id=%s for %s", user.id, ctx.user_id)
        return user
