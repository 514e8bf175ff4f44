# ============================================
# tracker/views/issue.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from tracker.permissions import HasActiveOrganization
from tracker.serializers.issue import (
    IssueCreateSerializer,
    IssueMoveSerializer,
    IssueOutputSerializer,
    IssueUpdateSerializer,
    ReorderBatchSerializer,
    ReorderEntryOutputSerializer,
)
from tracker.services.issue import IssueService
from tracker.services.reorder import ReorderService
from tracker.views.utils import SuccessSerializer, path_int, std_errors


class IssuePagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class SprintIssueListAPIView(APIView):
    """
    GET: Issues of a sprint, in board order (status column, then order)

    Path params:
    - sprint_id: int
    """
    permission_classes = [IsAuthenticated, HasActiveOrganization]

    @extend_schema(
        tags=["Issues"],
        parameters=[path_int("sprint_id", "Sprint ID")],
        responses={200: IssueOutputSerializer(many=True), **std_errors()},
    )
    def get(self, request, sprint_id):
        issues = IssueService.list_by_sprint(ctx=request.auth, sprint_id=sprint_id)
        return Response(IssueOutputSerializer(issues, many=True).data)


class ProjectIssueCreateAPIView(APIView):
    """
    POST: Create an issue at the bottom of its status column

    Request body:
    - title: string (required)
    - description: string (optional)
    - status: string (required: TODO/IN_PROGRESS/IN_REVIEW/DONE)
    - priority: string (optional, default MEDIUM)
    - sprint_id: int (optional)
    - assignee_id: string (optional, provider user id)
    """
    permission_classes = [IsAuthenticated, HasActiveOrganization]

    @extend_schema(
        tags=["Issues"],
        parameters=[path_int("project_id", "Project ID")],
        request=IssueCreateSerializer,
        responses={201: IssueOutputSerializer, **std_errors()},
    )
    def post(self, request, project_id):
        serializer = IssueCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        issue = IssueService.create_issue(
            ctx=request.auth,
            project_id=project_id,
            **serializer.validated_data
        )
        return Response(IssueOutputSerializer(issue).data, status=status.HTTP_201_CREATED)


class IssueDetailAPIView(APIView):
    """
    GET: Retrieve issue details
    PATCH: Update status and/or priority
    DELETE: Delete issue (reporter or project admin)

    Path params:
    - issue_id: int
    """
    permission_classes = [IsAuthenticated, HasActiveOrganization]

    @extend_schema(
        tags=["Issues"],
        parameters=[path_int("issue_id", "Issue ID")],
        responses={200: IssueOutputSerializer, **std_errors()},
    )
    def get(self, request, issue_id):
        issue = IssueService.get_issue(ctx=request.auth, issue_id=issue_id)
        return Response(IssueOutputSerializer(issue).data)

    @extend_schema(
        tags=["Issues"],
        parameters=[path_int("issue_id", "Issue ID")],
        request=IssueUpdateSerializer,
        responses={200: IssueOutputSerializer, **std_errors()},
    )
    def patch(self, request, issue_id):
        serializer = IssueUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        issue = IssueService.update_issue(
            ctx=request.auth,
            issue_id=issue_id,
            **serializer.validated_data
        )
        return Response(IssueOutputSerializer(issue).data)

    @extend_schema(
        tags=["Issues"],
        parameters=[path_int("issue_id", "Issue ID")],
        responses={200: SuccessSerializer, **std_errors()},
    )
    def delete(self, request, issue_id):
        result = IssueService.delete_issue(ctx=request.auth, issue_id=issue_id)
        return Response(result)


class IssueReorderAPIView(APIView):
    """
    POST: Apply a drag-and-drop batch atomically

    Request body:
    - issues: list of {id, status, order}
    """
    permission_classes = [IsAuthenticated, HasActiveOrganization]

    @extend_schema(
        tags=["Board"],
        request=ReorderBatchSerializer,
        responses={200: SuccessSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = ReorderBatchSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = ReorderService.apply_reorder(ctx=request.auth, batch=serializer.entries())
        return Response(result)


class IssueMoveAPIView(APIView):
    """
    POST: Drop an issue at a position of a status column

    Request body:
    - status: string (target column)
    - index: int (0-based position in the target column)
    """
    permission_classes = [IsAuthenticated, HasActiveOrganization]

    @extend_schema(
        tags=["Board"],
        parameters=[path_int("issue_id", "Issue ID")],
        request=IssueMoveSerializer,
        responses={200: ReorderEntryOutputSerializer(many=True), **std_errors()},
    )
    def post(self, request, issue_id):
        serializer = IssueMoveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        batch = ReorderService.move_issue(
            ctx=request.auth,
            issue_id=issue_id,
            **serializer.validated_data
        )
        return Response(ReorderEntryOutputSerializer(batch, many=True).data)
