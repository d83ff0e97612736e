"""
URL configuration for the daily rates API.
"""

from django.urls import path

from cnbrates.adapters.web import views

urlpatterns = [
    path("api/cnb/daily", views.daily_rates, name="cnb-daily"),
    path("health", views.health, name="health"),
]

handler404 = "cnbrates.adapters.web.views.not_found"
