from collections import defaultdict

from tracker.clients.auth_client import AuthContext, AuthProvider, ExternalProfile, Membership


class FakeAuthProvider(AuthProvider):
    """In-memory auth provider for tests"""

    def __init__(self):
        self.sessions = {}
        self.members = defaultdict(list)
        self.organizations = {}
        self.profiles = {}
        self.closed = False

    def add_session(self, token, user_id, org_id=None):
        self.sessions[token] = AuthContext(user_id=user_id, org_id=org_id)

    def add_member(self, org_id, user_id, role="org:member"):
        self.members[org_id].append(Membership(user_id=user_id, role=role))

    def add_organization(self, org_id, slug, name=None):
        self.organizations[slug] = {"id": org_id, "slug": slug, "name": name or slug.title()}

    def add_profile(self, user_id, first_name="", last_name="", emails=None, image_url=""):
        self.profiles[user_id] = ExternalProfile(
            id=user_id,
            first_name=first_name,
            last_name=last_name,
            emails=list(emails or []),
            image_url=image_url,
        )

    def get_active_session(self, token):
        return self.sessions.get(token)

    def list_members(self, org_id):
        return list(self.members.get(org_id, []))

    def get_organization(self, slug):
        return self.organizations.get(slug)

    def get_user(self, user_id):
        return self.profiles.get(user_id)

    def close(self):
        self.closed = True
