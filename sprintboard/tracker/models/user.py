# ============================================
# tracker/models/user.py
# ============================================
from django.db import models


class User(models.Model):
    """Local mirror of an identity owned by the auth provider."""
    external_id = models.CharField(max_length=64, unique=True, db_index=True)
    name = models.CharField(max_length=255, blank=True)
    email = models.EmailField(unique=True)
    image_url = models.URLField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} <{self.email}>"
