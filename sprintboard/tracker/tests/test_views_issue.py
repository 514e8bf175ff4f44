import pytest

from tracker.clients.auth_client import AuthContext
from tracker.models import Issue


@pytest.mark.django_db
def test_create_issue_endpoint(api_client, alice_ctx, project, sprint):
    client = api_client(alice_ctx)
    payload = {"title": "Board view", "status": "TODO", "sprint_id": sprint.id, "priority": "HIGH"}

    resp = client.post(f"/api/projects/{project.id}/issues/", payload, format="json")
    assert resp.status_code == 201, resp.content
    body = resp.json()
    assert body["order"] == 0
    assert body["reporter"]["external_id"] == "user_alice"
    assert body["assignee"] is None

    resp = client.post(f"/api/projects/{project.id}/issues/", payload, format="json")
    assert resp.json()["order"] == 1


@pytest.mark.django_db
def test_create_issue_validation(api_client, alice_ctx, project):
    resp = api_client(alice_ctx).post(
        f"/api/projects/{project.id}/issues/", {"title": "x", "status": "BLOCKED"}, format="json"
    )
    assert resp.status_code == 400
    assert "status" in resp.json()


@pytest.mark.django_db
def test_sprint_issue_list(api_client, alice_ctx, sprint, make_issue):
    a = make_issue(title="A", status="TODO", order=2, sprint=sprint)
    b = make_issue(title="B", status="TODO", order=0, sprint=sprint)
    c = make_issue(title="C", status="DONE", order=1, sprint=sprint)

    resp = api_client(alice_ctx).get(f"/api/sprints/{sprint.id}/issues/")
    assert resp.status_code == 200
    assert [row["id"] for row in resp.json()] == [b.id, a.id, c.id]


@pytest.mark.django_db
def test_issue_requires_authentication(api_client, make_issue):
    issue = make_issue()
    assert api_client(None).get(f"/api/issues/{issue.id}/").status_code == 401


@pytest.mark.django_db
def test_issue_requires_active_organization(api_client, alice, make_issue):
    issue = make_issue()
    resp = api_client(AuthContext(user_id="user_alice")).get(f"/api/issues/{issue.id}/")
    assert resp.status_code == 403


@pytest.mark.django_db
def test_patch_issue(api_client, bob_ctx, mallory_ctx, make_issue):
    issue = make_issue()

    resp = api_client(bob_ctx).patch(f"/api/issues/{issue.id}/", {"priority": "URGENT"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["priority"] == "URGENT"

    resp = api_client(mallory_ctx).patch(f"/api/issues/{issue.id}/", {"status": "DONE"}, format="json")
    assert resp.status_code == 403

    resp = api_client(bob_ctx).patch("/api/issues/999999/", {"status": "DONE"}, format="json")
    assert resp.status_code == 404


@pytest.mark.django_db
def test_delete_issue_endpoint(api_client, alice_ctx, bob_ctx, make_issue):
    issue = make_issue()

    assert api_client(bob_ctx).delete(f"/api/issues/{issue.id}/").status_code == 403

    resp = api_client(alice_ctx).delete(f"/api/issues/{issue.id}/")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert not Issue.objects.filter(id=issue.id).exists()


@pytest.mark.django_db
def test_reorder_endpoint(api_client, alice_ctx, make_issue):
    a = make_issue(title="A", order=0)
    b = make_issue(title="B", order=1)
    client = api_client(alice_ctx)

    resp = client.post("/api/issues/reorder/", {"issues": [
        {"id": b.id, "status": "TODO", "order": 0},
        {"id": a.id, "status": "IN_REVIEW", "order": 0},
    ]}, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert Issue.objects.values_list("status", "order").get(id=a.id) == ("IN_REVIEW", 0)

    resp = client.post("/api/issues/reorder/", {"issues": [
        {"id": b.id, "status": "DONE", "order": 0},
        {"id": 999999, "status": "DONE", "order": 1},
    ]}, format="json")
    assert resp.status_code == 404
    assert Issue.objects.values_list("status", "order").get(id=b.id) == ("TODO", 0)


@pytest.mark.django_db
def test_move_endpoint(api_client, alice_ctx, sprint, make_issue):
    first = make_issue(title="first", order=0, sprint=sprint)
    second = make_issue(title="second", order=1, sprint=sprint)

    resp = api_client(alice_ctx).post(
        f"/api/issues/{second.id}/move/", {"status": "TODO", "index": 0}, format="json"
    )
    assert resp.status_code == 200
    assert resp.json() == [
        {"id": second.id, "status": "TODO", "order": 0},
        {"id": first.id, "status": "TODO", "order": 1},
    ]


@pytest.mark.django_db
def test_my_issues(api_client, alice_ctx, bob, make_issue):
    mine = make_issue(title="mine")
    make_issue(title="not mine", reporter=bob)

    resp = api_client(alice_ctx).get("/api/me/issues/")
    assert resp.status_code == 200
    assert [row["id"] for row in resp.json()["results"]] == [mine.id]


@pytest.mark.django_db
def test_my_issues_page_size(api_client, alice_ctx, make_issue):
    for n in range(3):
        make_issue(title=f"issue {n}", order=n)

    resp = api_client(alice_ctx).get("/api/me/issues/", {"page_size": 2})
    assert resp.status_code == 200
    body = resp.json()
    assert body["count"] == 3
    assert len(body["results"]) == 2
