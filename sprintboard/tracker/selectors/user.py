# ============================================
# tracker/selectors/user.py
# ============================================
from typing import List, Optional
from django.db.models import QuerySet
from tracker.models import User


class UserSelector:

    @staticmethod
    def get_user_by_external_id(external_id: str) -> Optional[User]:
        try:
            return User.objects.get(external_id=external_id)
        except User.DoesNotExist:
            return None

    @staticmethod
    def get_users_by_external_ids(external_ids: List[str]) -> QuerySet:
        return User.objects.filter(external_id__in=external_ids)
