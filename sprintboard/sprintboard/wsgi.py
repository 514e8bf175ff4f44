"""
WSGI config for sprintboard project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'sprintboard.settings')

application = get_wsgi_application()
