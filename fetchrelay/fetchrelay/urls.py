"""
URL configuration for the fetchrelay project.

Paths match exactly, without trailing slashes; anything else falls through to
a JSON 404 that lists the available endpoints.
"""

from django.urls import path, re_path

import relay.views

urlpatterns = [
    path("health", relay.views.health, name="health"),
    path("durham", relay.views.durham, name="durham"),
    path("proxy", relay.views.proxy, name="proxy"),
    re_path(r"^(?P<path>.*)$", relay.views.not_found, name="not-found"),
]
