import dataclasses
from unittest.mock import MagicMock

import pytest
from django.apps import apps


@pytest.fixture
def relay_app():
    return apps.get_app_config("relay")


@pytest.fixture
def allowlist_disabled(relay_app, monkeypatch):
    settings = relay_app.relay_settings
    monkeypatch.setattr(
        relay_app,
        "relay_settings",
        dataclasses.replace(
            settings, allowlist=dataclasses.replace(settings.allowlist, enforced=False)
        ),
    )


@pytest.fixture
def upstream_response():
    """Build a stand-in for a streamed requests.Response."""

    def make(status_code=200, body=b"", headers=None):
        response = MagicMock()
        response.status_code = status_code
        response.headers = headers or {}
        response.raw.read1.side_effect = [body, b""] if body else [b""]
        return response

    return make
