# ============================================
# tracker/models/issue.py
# ============================================
from django.db import models


class Issue(models.Model):
    class Status(models.TextChoices):
        # Declaration order is the column order on the board
        TODO = 'TODO', 'Todo'
        IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
        IN_REVIEW = 'IN_REVIEW', 'In Review'
        DONE = 'DONE', 'Done'

    class Priority(models.TextChoices):
        LOW = 'LOW', 'Low'
        MEDIUM = 'MEDIUM', 'Medium'
        HIGH = 'HIGH', 'High'
        URGENT = 'URGENT', 'Urgent'

    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='issues'
    )
    sprint = models.ForeignKey(
        'Sprint',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='issues'
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    status = models.CharField(max_length=20, choices=Status.choices)
    priority = models.CharField(
        max_length=10,
        choices=Priority.choices,
        default=Priority.MEDIUM
    )
    order = models.IntegerField(default=0)
    reporter = models.ForeignKey(
        'User',
        on_delete=models.CASCADE,
        related_name='reported_issues'
    )
    assignee = models.ForeignKey(
        'User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_issues'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'issues'
        ordering = ['order']
        indexes = [
            models.Index(fields=['project', 'status', 'order'], name='issues_project_8e1d2a_idx'),
            models.Index(fields=['sprint'], name='issues_sprint__4f6c9b_idx'),
        ]

    def __str__(self):
        return f"{self.project.key}-{self.pk} - {self.title}"
