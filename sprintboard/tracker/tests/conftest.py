import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient

from tracker.authentication import SessionUser
from tracker.clients.auth_client import AuthContext, get_auth_provider, reset_auth_provider
from tracker.models import Issue, Project, Sprint, User

ORG = "org_acme"
OTHER_ORG = "org_globex"


@pytest.fixture(autouse=True)
def auth_provider(settings):
    settings.TRACKER_AUTH_PROVIDER = "tracker.tests.fakes.FakeAuthProvider"
    reset_auth_provider()
    provider = get_auth_provider()
    provider.add_organization(ORG, "acme")
    provider.add_organization(OTHER_ORG, "globex")
    provider.add_member(ORG, "user_alice", role="org:admin")
    provider.add_member(ORG, "user_bob")
    provider.add_member(OTHER_ORG, "user_mallory", role="org:admin")
    yield provider
    reset_auth_provider()


@pytest.fixture
def alice(db):
    return User.objects.create(external_id="user_alice", name="Alice Admin", email="alice@acme.test")


@pytest.fixture
def bob(db):
    return User.objects.create(external_id="user_bob", name="Bob Member", email="bob@acme.test")


@pytest.fixture
def mallory(db):
    return User.objects.create(external_id="user_mallory", name="Mallory", email="mallory@globex.test")


@pytest.fixture
def alice_ctx(alice):
    return AuthContext(user_id="user_alice", org_id=ORG)


@pytest.fixture
def bob_ctx(bob):
    return AuthContext(user_id="user_bob", org_id=ORG)


@pytest.fixture
def mallory_ctx(mallory):
    return AuthContext(user_id="user_mallory", org_id=OTHER_ORG)


@pytest.fixture
def project(db, alice):
    return Project.objects.create(
        name="Sprintboard", key="SB", description="Board", organization_id=ORG, admin_ids=[alice.id]
    )


@pytest.fixture
def other_project(db, mallory):
    return Project.objects.create(
        name="Globex", key="GX", organization_id=OTHER_ORG, admin_ids=[mallory.id]
    )


@pytest.fixture
def sprint(db, project):
    today = timezone.localdate()
    return Sprint.objects.create(
        project=project, name="SB Sprint 1",
        start_date=today - timedelta(days=1), end_date=today + timedelta(days=13),
    )


@pytest.fixture
def make_issue(db, project, alice):
    def _make(title="Issue", status=Issue.Status.TODO, order=0, **kwargs):
        kwargs.setdefault("project", project)
        kwargs.setdefault("reporter", alice)
        return Issue.objects.create(title=title, status=status, order=order, **kwargs)
    return _make


@pytest.fixture
def api_client():
    def _client(ctx):
        client = APIClient()
        if ctx is not None:
            client.force_authenticate(user=SessionUser(ctx.user_id), token=ctx)
        return client
    return _client
