# ============================================
# tracker/models/project.py
# ============================================
from django.db import models


class Project(models.Model):
    name = models.CharField(max_length=255)
    key = models.CharField(max_length=10)
    description = models.TextField(blank=True)
    organization_id = models.CharField(max_length=64, db_index=True)
    admin_ids = models.JSONField(default=list)  # List of local user IDs
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'projects'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['organization_id', 'key'],
                name='uniq_project_key_per_org'
            ),
        ]

    def __str__(self):
        return f"{self.key} - {self.name}"

    def is_admin(self, user_id) -> bool:
        return user_id in (self.admin_ids or [])
