from django.conf import settings
from django.http import HttpResponse


def cors_headers(get_response):
    """Answer preflights and stamp cross-origin headers on every response."""
    headers = {
        "Access-Control-Allow-Origin": settings.CORS_ALLOWED_ORIGIN,
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }

    def middleware(request):
        if request.method == "OPTIONS":
            response = HttpResponse(status=204)
        else:
            response = get_response(request)

        for name, value in headers.items():
            response[name] = value
        return response

    return middleware
