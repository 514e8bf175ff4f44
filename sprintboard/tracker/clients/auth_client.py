# ============================================
# tracker/clients/auth_client.py
# ============================================
import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import requests
from django.conf import settings
from django.core.cache import cache
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)

ADMIN_ROLE = 'org:admin'


@dataclass(frozen=True)
class AuthContext:
    """Per-request identity handed out by the auth provider"""
    user_id: Optional[str] = None
    org_id: Optional[str] = None


@dataclass(frozen=True)
class Membership:
    user_id: str
    role: str


@dataclass(frozen=True)
class ExternalProfile:
    id: str
    first_name: str = ''
    last_name: str = ''
    image_url: str = ''
    emails: List[str] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class AuthProvider:
    """Contract the tracker needs from the identity service"""

    def get_active_session(self, token: str) -> Optional[AuthContext]:
        raise NotImplementedError

    def list_members(self, org_id: str) -> List[Membership]:
        raise NotImplementedError

    def get_role(self, org_id: str, user_id: str) -> Optional[str]:
        for membership in self.list_members(org_id):
            if membership.user_id == user_id:
                return membership.role
        return None

    def get_organization(self, slug: str) -> Optional[Dict]:
        raise NotImplementedError

    def get_user(self, user_id: str) -> Optional[ExternalProfile]:
        raise NotImplementedError

    def close(self) -> None:
        pass


class HttpAuthProvider(AuthProvider):
    """Client to communicate with the auth provider's backend API"""

    CACHE_TTL = 60  # membership changes must show up quickly

    def __init__(self, base_url: str = None, secret: str = None, timeout: float = None):
        self.base_url = (base_url or settings.AUTH_PROVIDER_URL).rstrip('/')
        self.timeout = timeout or settings.AUTH_PROVIDER_TIMEOUT
        self.session = requests.Session()
        secret = secret if secret is not None else settings.AUTH_PROVIDER_SECRET
        if secret:
            self.session.headers['Authorization'] = f"Bearer {secret}"

    def _get(self, path: str, **params) -> Optional[Dict]:
        response = self.session.get(
            f"{self.base_url}{path}",
            params=params or None,
            timeout=self.timeout
        )
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.json()

    def get_active_session(self, token: str) -> Optional[AuthContext]:
        try:
            response = self.session.post(
                f"{self.base_url}/sessions/verify",
                json={'token': token},
                timeout=self.timeout
            )
            if response.status_code in (401, 404):
                return None
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.warning("[auth] session verification failed: %s", e)
            return None

        if not data.get('user_id'):
            return None
        return AuthContext(user_id=data['user_id'], org_id=data.get('org_id'))

    def list_members(self, org_id: str) -> List[Membership]:
        cache_key = f"org-members:{org_id}"
        cached = cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            data = self._get(f"/organizations/{org_id}/memberships") or {}
        except requests.RequestException as e:
            logger.warning("[auth] list members failed for org=%s: %s", org_id, e)
            return []

        members = [
            Membership(user_id=str(row['user_id']), role=row.get('role', ''))
            for row in data.get('data', [])
            if row.get('user_id')
        ]
        cache.set(cache_key, members, self.CACHE_TTL)
        return members

    def get_organization(self, slug: str) -> Optional[Dict]:
        try:
            return self._get('/organizations', slug=slug)
        except requests.RequestException as e:
            logger.warning("[auth] get organization failed for slug=%s: %s", slug, e)
            return None

    def get_user(self, user_id: str) -> Optional[ExternalProfile]:
        try:
            data = self._get(f"/users/{user_id}")
        except requests.RequestException as e:
            logger.warning("[auth] get user failed for id=%s: %s", user_id, e)
            return None
        if not data:
            return None
        return ExternalProfile(
            id=str(data['id']),
            first_name=data.get('first_name') or '',
            last_name=data.get('last_name') or '',
            image_url=data.get('image_url') or '',
            emails=[e['email_address'] for e in data.get('email_addresses', []) if e.get('email_address')],
        )

    def close(self) -> None:
        self.session.close()


_provider: Optional[AuthProvider] = None
_provider_lock = threading.Lock()


def get_auth_provider() -> AuthProvider:
    """Process-wide provider, built on first use from TRACKER_AUTH_PROVIDER"""
    global _provider
    if _provider is None:
        with _provider_lock:
            if _provider is None:
                provider_cls = import_string(settings.TRACKER_AUTH_PROVIDER)
                _provider = provider_cls()
                logger.info("[auth] provider initialised: %s", settings.TRACKER_AUTH_PROVIDER)
    return _provider


def reset_auth_provider() -> None:
    global _provider
    with _provider_lock:
        if _provider is not None:
            _provider.close()
        _provider = None
