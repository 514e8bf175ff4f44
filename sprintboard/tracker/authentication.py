# ============================================
# tracker/authentication.py
# ============================================
from rest_framework import authentication

from tracker.clients.auth_client import get_auth_provider


class SessionUser:
    """request.user for a verified provider session"""
    is_authenticated = True
    is_anonymous = False

    def __init__(self, user_id: str):
        self.id = user_id
        self.pk = user_id

    def __str__(self):
        return self.id


class AuthProviderAuthentication(authentication.BaseAuthentication):
    """
    Authorization: Bearer <session token>

    The token is verified against the auth provider; request.auth is the
    resulting AuthContext (active user + active organization).
    """
    keyword = 'Bearer'

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].lower() != self.keyword.lower().encode():
            return None
        if len(header) != 2:
            return None

        token = header[1].decode('utf-8', errors='ignore')
        ctx = get_auth_provider().get_active_session(token)
        if ctx is None:
            return None
        return SessionUser(ctx.user_id), ctx

    def authenticate_header(self, request):
        return self.keyword
