# ============================================
# tracker/models/__init__.py
# ============================================
from .user import User
from .project import Project
from .sprint import Sprint
from .issue import Issue

__all__ = [
    'User',
    'Project',
    'Sprint',
    'Issue',
]
