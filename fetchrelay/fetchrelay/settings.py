"""
Django settings for the fetchrelay project.

Everything the relay needs is read from the environment once, at import.
A ``.env`` file next to ``manage.py`` is honoured via python-dotenv.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-fetchrelay-dev-key")

DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = os.getenv("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "relay",
]

MIDDLEWARE = [
    "fetchrelay.middleware.cors_headers",
]

ROOT_URLCONF = "fetchrelay.urls"

WSGI_APPLICATION = "fetchrelay.wsgi.application"

# No persistent state.
DATABASES = {}

USE_TZ = True
TIME_ZONE = "UTC"

# ---------------------------------------------------------------------------
# Relay
# ---------------------------------------------------------------------------

RELAY_PORT = int(os.getenv("PORT", 3000))

# '*' allows every origin; set to your dashboard origin to restrict.
CORS_ALLOWED_ORIGIN = os.getenv("ALLOWED_ORIGIN", "*")

# Any value other than "false" keeps the allowlist on.
RELAY_ENFORCE_ALLOWLIST = os.getenv("ENFORCE_ALLOWLIST") != "false"

RELAY_ALLOWED_DOMAINS = [
    "www.durhamnc.gov",
    "durhamnc.gov",
]

RELAY_FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", 20))
RELAY_MAX_REDIRECTS = 5
RELAY_USER_AGENT = "Mozilla/5.0 (compatible; ShootingDashboardProxy/1.0)"

ARCHIVE_URL = "https://www.durhamnc.gov/Archive.aspx?AMID=211"
ARCHIVE_DOCUMENT_URL_TEMPLATE = "https://www.durhamnc.gov/ArchiveCenter/ViewFile/Item/{adid}"
ARCHIVE_SCANNER = os.getenv("ARCHIVE_SCANNER", "regex")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
