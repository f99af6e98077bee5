from django.http import JsonResponse


def health_check(request):
    """Liveness probe."""
    return JsonResponse({'status': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'kind': 'not_found',
        'message': 'Not found',
        'context': {},
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'kind': 'server_error',
        'message': 'Internal server error',
        'context': {},
    }, status=500)
