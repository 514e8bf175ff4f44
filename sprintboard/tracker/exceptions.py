# ============================================
# tracker/exceptions.py
# ============================================
import logging

from rest_framework import exceptions, status
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class Unauthorized(exceptions.PermissionDenied):
    """No session, or session lacks the organization/role/ownership required"""
    default_detail = 'Unauthorized'
    default_code = 'unauthorized'


class NotFound(exceptions.NotFound):
    default_detail = 'Not found'
    default_code = 'not_found'


class PersistenceFailure(exceptions.APIException):
    """Underlying store operation failed; message carries the operation name"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Persistence failure'
    default_code = 'persistence_failure'


def exception_handler(exc, context):
    if isinstance(exc, PersistenceFailure):
        view = context.get('view')
        logger.error(
            "[api] %s failed in %s: %s",
            context['request'].method if context.get('request') else '-',
            type(view).__name__ if view else '-',
            exc.detail,
            exc_info=exc.__cause__ or exc,
        )
    return drf_exception_handler(exc, context)
