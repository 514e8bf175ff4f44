# ============================================
# tracker/views/project.py
# ============================================
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from tracker.permissions import HasActiveOrganization
from tracker.serializers.project import (
    ProjectCreateSerializer,
    ProjectDetailOutputSerializer,
    ProjectOutputSerializer,
    SprintCreateSerializer,
    SprintOutputSerializer,
    SprintStatusSerializer,
)
from tracker.services.project import ProjectService
from tracker.services.sprint import SprintService
from tracker.views.utils import SuccessSerializer, path_int, std_errors


class ProjectListCreateAPIView(APIView):
    """
    GET: List projects of an organization (defaults to the active one)
    POST: Create a project in the active organization (org admins only)

    Query params (GET):
    - org_id: string (optional)

    Request body (POST):
    - name: string (required)
    - key: string (required, 2-10 alphanumerics, unique per organization)
    - description: string (optional)
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Projects"],
        parameters=[OpenApiParameter("org_id", OpenApiTypes.STR, OpenApiParameter.QUERY, required=False)],
        responses={200: ProjectOutputSerializer(many=True), **std_errors()},
    )
    def get(self, request):
        org_id = request.query_params.get('org_id') or request.auth.org_id
        projects = ProjectService.list_projects(ctx=request.auth, org_id=org_id)
        return Response(ProjectOutputSerializer(projects, many=True).data)

    @extend_schema(
        tags=["Projects"],
        request=ProjectCreateSerializer,
        responses={201: ProjectOutputSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = ProjectCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = ProjectService.create_project(ctx=request.auth, **serializer.validated_data)
        return Response(ProjectOutputSerializer(project).data, status=status.HTTP_201_CREATED)


class ProjectDetailAPIView(APIView):
    """
    GET: Project with its sprints
    DELETE: Delete project (org admins only)
    """
    permission_classes = [IsAuthenticated, HasActiveOrganization]

    @extend_schema(
        tags=["Projects"],
        parameters=[path_int("project_id", "Project ID")],
        responses={200: ProjectDetailOutputSerializer, **std_errors()},
    )
    def get(self, request, project_id):
        project = ProjectService.get_project(ctx=request.auth, project_id=project_id)
        return Response(ProjectDetailOutputSerializer(project).data)

    @extend_schema(
        tags=["Projects"],
        parameters=[path_int("project_id", "Project ID")],
        responses={200: SuccessSerializer, **std_errors()},
    )
    def delete(self, request, project_id):
        result = ProjectService.delete_project(ctx=request.auth, project_id=project_id)
        return Response(result)


class SprintListCreateAPIView(APIView):
    permission_classes = [IsAuthenticated, HasActiveOrganization]

    @extend_schema(
        tags=["Sprints"],
        parameters=[path_int("project_id", "Project ID")],
        responses={200: SprintOutputSerializer(many=True), **std_errors()},
    )
    def get(self, request, project_id):
        sprints = SprintService.list_sprints(ctx=request.auth, project_id=project_id)
        return Response(SprintOutputSerializer(sprints, many=True).data)

    @extend_schema(
        tags=["Sprints"],
        parameters=[path_int("project_id", "Project ID")],
        request=SprintCreateSerializer,
        responses={201: SprintOutputSerializer, **std_errors()},
    )
    def post(self, request, project_id):
        serializer = SprintCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sprint = SprintService.create_sprint(
            ctx=request.auth,
            project_id=project_id,
            **serializer.validated_data
        )
        return Response(SprintOutputSerializer(sprint).data, status=status.HTTP_201_CREATED)


class SprintStatusAPIView(APIView):
    permission_classes = [IsAuthenticated, HasActiveOrganization]

    @extend_schema(
        tags=["Sprints"],
        summary="Start or complete a sprint (org admins only)",
        parameters=[path_int("sprint_id", "Sprint ID")],
        request=SprintStatusSerializer,
        responses={200: SprintOutputSerializer, **std_errors()},
    )
    def patch(self, request, sprint_id):
        serializer = SprintStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sprint = SprintService.update_sprint_status(
            ctx=request.auth,
            sprint_id=sprint_id,
            status=serializer.validated_data['status']
        )
        return Response(SprintOutputSerializer(sprint).data)
