# ============================================
# tracker/urls.py
# ============================================
from django.urls import path
from tracker.views.project import (
    ProjectListCreateAPIView,
    ProjectDetailAPIView,
    SprintListCreateAPIView,
    SprintStatusAPIView,
)
from tracker.views.issue import (
    SprintIssueListAPIView,
    ProjectIssueCreateAPIView,
    IssueDetailAPIView,
    IssueReorderAPIView,
    IssueMoveAPIView,
)
from tracker.views.organization import (
    OrganizationDetailAPIView,
    OrganizationUsersAPIView,
    CurrentUserSyncAPIView,
    CurrentUserIssuesAPIView,
)

app_name = 'tracker'

urlpatterns = [
    # Projects & sprints
    path('projects/', ProjectListCreateAPIView.as_view(), name='project-list-create'),
    path('projects/<int:project_id>/', ProjectDetailAPIView.as_view(), name='project-detail'),
    path('projects/<int:project_id>/sprints/', SprintListCreateAPIView.as_view(), name='sprint-list-create'),
    path('sprints/<int:sprint_id>/status/', SprintStatusAPIView.as_view(), name='sprint-status'),

    # Issues
    path('sprints/<int:sprint_id>/issues/', SprintIssueListAPIView.as_view(), name='sprint-issues'),
    path('projects/<int:project_id>/issues/', ProjectIssueCreateAPIView.as_view(), name='issue-create'),
    path('issues/reorder/', IssueReorderAPIView.as_view(), name='issue-reorder'),
    path('issues/<int:issue_id>/', IssueDetailAPIView.as_view(), name='issue-detail'),
    path('issues/<int:issue_id>/move/', IssueMoveAPIView.as_view(), name='issue-move'),

    # Organizations & current user
    path('organizations/<slug:slug>/', OrganizationDetailAPIView.as_view(), name='organization-detail'),
    path('organizations/<str:org_id>/users/', OrganizationUsersAPIView.as_view(), name='organization-users'),
    path('me/sync/', CurrentUserSyncAPIView.as_view(), name='me-sync'),
    path('me/issues/', CurrentUserIssuesAPIView.as_view(), name='me-issues'),
]
