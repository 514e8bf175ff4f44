# ============================================
# tracker/models/sprint.py
# ============================================
from django.db import models


class Sprint(models.Model):
    class SprintStatus(models.TextChoices):
        PLANNED = 'PLANNED', 'Planned'
        ACTIVE = 'ACTIVE', 'Active'
        COMPLETED = 'COMPLETED', 'Completed'

    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='sprints'
    )
    name = models.CharField(max_length=255)
    status = models.CharField(
        max_length=10,
        choices=SprintStatus.choices,
        default=SprintStatus.PLANNED
    )
    start_date = models.DateField()
    end_date = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sprints'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['project', 'status'], name='sprints_project_c3b0f5_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['project', 'name'],
                name='uniq_sprint_name_per_project'
            ),
        ]

    def __str__(self):
        return f"{self.project.key} - {self.name}"
