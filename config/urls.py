"""URL configuration for the museum booking backend."""

from django.urls import include, path

from museum.handlers import health

urlpatterns = [
    path("", health, name="health"),
    path("api/", include("museum.urls")),
]
