from django.contrib import admin
from .models import Issue, Project, Sprint, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "external_id")
    search_fields = ("name", "email", "external_id")


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("id", "key", "name", "organization_id", "created_at")
    search_fields = ("key", "name", "organization_id")


@admin.register(Sprint)
class SprintAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "project", "status", "start_date", "end_date")
    list_filter = ("status",)


@admin.register(Issue)
class IssueAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "project", "sprint", "status", "order", "priority")
    list_filter = ("status", "priority")
    search_fields = ("title",)
    raw_id_fields = ("reporter", "assignee")
