import logging

from django.db import connection, DatabaseError
from django.http import JsonResponse
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status

logger = logging.getLogger(__name__)


@extend_schema(
    responses={
        200: inline_serializer('HealthResponse', fields={
            'status': serializers.CharField(),
            'database': serializers.CharField(),
        }),
    },
    description="Liveness probe; also checks that the database answers.",
    tags=['health'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """Report service and database status."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        logger.exception("Health check could not reach the database")
        return Response(
            {'status': 'degraded', 'database': 'unavailable'},
            status=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    return Response({'status': 'ok', 'database': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
