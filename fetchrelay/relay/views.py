from django.apps import apps
from django.http import HttpResponse, JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_safe
from loguru import logger

from relay.allowlist import is_allowed
from relay.archive import ExtractionError
from relay.fetchers import FetchError
from relay.url_validator import InvalidURL, validate_url

ENDPOINTS = ["/health", "/durham", "/proxy?url=..."]


def _relay():
    return apps.get_app_config("relay")


@require_safe
def health(request):
    return JsonResponse({"ok": True, "ts": timezone.now().isoformat()})


@require_safe
def durham(request):
    """Scrape the Durham archive page and return the newest ADID with its PDF URL."""
    try:
        result = _relay().archive.get_latest_document()
    except (ExtractionError, FetchError) as exc:
        logger.warning(f"Durham archive lookup failed: {exc}")
        return JsonResponse({"error": str(exc)}, status=500)

    return JsonResponse(result.as_dict())


@require_safe
def proxy(request):
    """Relay ``?url=`` through the fetcher and return the upstream bytes as-is."""
    raw_url = request.GET.get("url", "")
    if not raw_url:
        return JsonResponse({"error": "Missing ?url= parameter"}, status=400)

    try:
        target = validate_url(raw_url)
    except InvalidURL as exc:
        logger.warning(f"Rejected proxy url {raw_url!r}: {exc}")
        return JsonResponse({"error": "Invalid URL"}, status=400)

    config = _relay()
    if not is_allowed(target.host, config.relay_settings.allowlist):
        logger.warning(f"Blocked proxy request for {target.host}")
        return JsonResponse(
            {
                "error": f"Domain not allowed: {target.host}. "
                "Add it to RELAY_ALLOWED_DOMAINS in settings."
            },
            status=403,
        )

    try:
        result = config.fetcher.fetch(target)
    except FetchError as exc:
        logger.warning(f"Upstream fetch failed for {target.url}: {exc}")
        return JsonResponse({"error": f"Upstream fetch failed: {exc}"}, status=502)

    logger.info(
        f"Relayed {target.url} -> {result.status_code} "
        f"({result.content_type}, {len(result.body)} bytes)"
    )
    return HttpResponse(
        result.body, status=result.status_code, content_type=result.content_type
    )


def not_found(request, path=""):
    return JsonResponse({"error": "Not found", "endpoints": ENDPOINTS}, status=404)
