import sys

from django.apps import apps
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand
from loguru import logger


class Command(BaseCommand):
    help = "Run the relay on RELAY_PORT and log the endpoint table."

    def add_arguments(self, parser):
        parser.add_argument("--host", default="0.0.0.0")
        parser.add_argument("--port", type=int, default=settings.RELAY_PORT)

    def handle(self, *args, **options):
        logger.remove()
        logger.add(sys.stderr, level=settings.LOG_LEVEL)

        host, port = options["host"], options["port"]
        allowlist = apps.get_app_config("relay").relay_settings.allowlist

        logger.info(f"Fetch relay running on http://localhost:{port}")
        logger.info("  /health          - health check")
        logger.info("  /durham          - Durham latest PDF ADID")
        logger.info("  /proxy?url=...   - general CORS proxy")
        logger.info(f"  Allowlist: {allowlist.describe()}")

        call_command("runserver", f"{host}:{port}", use_reloader=False)
