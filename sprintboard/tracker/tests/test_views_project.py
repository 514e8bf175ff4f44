import pytest
from datetime import timedelta
from django.utils import timezone

from tracker.clients.auth_client import AuthContext


@pytest.mark.django_db
def test_project_create_and_list(api_client, alice_ctx, bob_ctx):
    resp = api_client(alice_ctx).post("/api/projects/", {"name": "Mobile", "key": "MOB"}, format="json")
    assert resp.status_code == 201, resp.content
    project_id = resp.json()["id"]

    resp = api_client(bob_ctx).get("/api/projects/")
    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()] == [project_id]

    resp = api_client(bob_ctx).post("/api/projects/", {"name": "Nope", "key": "NOPE"}, format="json")
    assert resp.status_code == 403


@pytest.mark.django_db
def test_project_key_format(api_client, alice_ctx):
    resp = api_client(alice_ctx).post("/api/projects/", {"name": "Bad", "key": "1-bad"}, format="json")
    assert resp.status_code == 400


@pytest.mark.django_db
def test_project_detail_with_sprints(api_client, alice_ctx, mallory_ctx, project, sprint):
    resp = api_client(alice_ctx).get(f"/api/projects/{project.id}/")
    assert resp.status_code == 200
    assert [s["id"] for s in resp.json()["sprints"]] == [sprint.id]

    assert api_client(mallory_ctx).get(f"/api/projects/{project.id}/").status_code == 404


@pytest.mark.django_db
def test_sprint_endpoints(api_client, alice_ctx, bob_ctx, project):
    today = timezone.localdate()
    resp = api_client(bob_ctx).post(f"/api/projects/{project.id}/sprints/", {
        "name": "SB Sprint 2",
        "start_date": today.isoformat(),
        "end_date": (today + timedelta(days=14)).isoformat(),
    }, format="json")
    assert resp.status_code == 201, resp.content
    sprint_id = resp.json()["id"]

    resp = api_client(bob_ctx).patch(f"/api/sprints/{sprint_id}/status/", {"status": "ACTIVE"}, format="json")
    assert resp.status_code == 403

    resp = api_client(alice_ctx).patch(f"/api/sprints/{sprint_id}/status/", {"status": "ACTIVE"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ACTIVE"


@pytest.mark.django_db
def test_organization_endpoints(api_client, alice_ctx, alice, bob):
    client = api_client(alice_ctx)

    resp = client.get("/api/organizations/acme/")
    assert resp.status_code == 200
    assert resp.json()["slug"] == "acme"

    assert client.get("/api/organizations/globex/").status_code == 404

    resp = client.get("/api/organizations/org_acme/users/")
    assert {u["external_id"] for u in resp.json()} == {"user_alice", "user_bob"}


@pytest.mark.django_db
def test_me_sync(api_client, auth_provider):
    auth_provider.add_profile("user_dave", first_name="Dave", last_name="Lister", emails=["dave@acme.test"])

    resp = api_client(AuthContext(user_id="user_dave")).post("/api/me/sync/")
    assert resp.status_code == 200
    assert resp.json()["email"] == "dave@acme.test"

    resp = api_client(AuthContext(user_id="user_nobody")).post("/api/me/sync/")
    assert resp.status_code == 204


@pytest.mark.django_db
def test_sprint_name_taken_in_other_tenant(api_client, alice_ctx, project, other_project):
    from tracker.models import Sprint

    today = timezone.localdate()
    Sprint.objects.create(project=other_project, name="Sprint 1", start_date=today, end_date=today)

    resp = api_client(alice_ctx).post(f"/api/projects/{project.id}/sprints/", {
        "name": "Sprint 1", "start_date": today.isoformat(), "end_date": today.isoformat(),
    }, format="json")
    assert resp.status_code == 201, resp.content
