# ============================================
# tracker/views/organization.py
# ============================================
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from tracker.exceptions import NotFound
from tracker.permissions import HasActiveOrganization
from tracker.serializers.issue import IssueListOutputSerializer
from tracker.serializers.user import OrganizationOutputSerializer, UserOutputSerializer
from tracker.services.issue import IssueService
from tracker.services.organization import OrganizationService
from tracker.services.user import UserService
from tracker.views.issue import IssuePagination
from tracker.views.utils import path_str, std_errors


class OrganizationDetailAPIView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Organizations"],
        parameters=[path_str("slug", "Organization slug")],
        responses={200: OrganizationOutputSerializer, **std_errors()},
    )
    def get(self, request, slug):
        organization = OrganizationService.get_organization(ctx=request.auth, slug=slug)
        if organization is None:
            raise NotFound("Organization not found")
        return Response(OrganizationOutputSerializer(organization).data)


class OrganizationUsersAPIView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Organizations"],
        parameters=[path_str("org_id", "Organization ID")],
        responses={200: UserOutputSerializer(many=True), **std_errors()},
    )
    def get(self, request, org_id):
        users = OrganizationService.list_organization_users(ctx=request.auth, org_id=org_id)
        return Response(UserOutputSerializer(users, many=True).data)


class CurrentUserSyncAPIView(APIView):
    """
    POST: Make sure the signed-in identity has a local user record
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Users"],
        request=None,
        responses={
            200: UserOutputSerializer,
            204: OpenApiResponse(description="Provider has no usable profile"),
        },
    )
    def post(self, request):
        user = UserService.sync_user(request.auth)
        if user is None:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(UserOutputSerializer(user).data)


class CurrentUserIssuesAPIView(APIView):
    """
    GET: Issues assigned to or reported by the signed-in user in the active organization
    """
    permission_classes = [IsAuthenticated, HasActiveOrganization]

    @extend_schema(
        tags=["Users"],
        responses={200: IssueListOutputSerializer(many=True), **std_errors()},
    )
    def get(self, request):
        issues = IssueService.list_user_issues(
            ctx=request.auth,
            user_external_id=request.auth.user_id
        )

        paginator = IssuePagination()
        page = paginator.paginate_queryset(issues, request)
        serializer = IssueListOutputSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)
