# ===== apps/users/health_urls.py =====
from django.urls import path
from django.http import JsonResponse
from django.db import connection, DatabaseError
from django.utils import timezone

def health_check(request):
    """Health check endpoint"""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        db_status = "connected"
    except DatabaseError:
        db_status = "disconnected"
    
    return JsonResponse({
        'status': 'healthy' if db_status == 'connected' else 'degraded',
        'timestamp': timezone.now().isoformat(),
        'version': '1.0.0',
        'database': db_status
    })

urlpatterns = [
    path('', health_check, name='health_check'),
]
