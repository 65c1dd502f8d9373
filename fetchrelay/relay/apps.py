from django.apps import AppConfig
from django.conf import settings


class RelayAppConfig(AppConfig):
    name = "relay"
    verbose_name = "Fetch relay"

    def ready(self):
        from relay.archive import ArchiveExtractor
        from relay.config import RelaySettings
        from relay.fetchers import HttpFetcher

        self.relay_settings = RelaySettings.from_django_settings(settings)
        self.fetcher = HttpFetcher(
            timeout=self.relay_settings.fetch_timeout,
            max_redirects=self.relay_settings.max_redirects,
            user_agent=self.relay_settings.user_agent,
        )
        self.archive = ArchiveExtractor.from_settings(self.fetcher, self.relay_settings)
