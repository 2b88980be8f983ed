"""
URL configuration for the location graph API.

This module defines the URL patterns for locations, edges and path queries.
"""
from django.urls import path
from route_optimizer.api.views import LocationListCreateView, EdgeListCreateView, ShortestPathView, health_check

app_name = 'route_optimizer'

urlpatterns = [
    # Health check endpoint
    path('health', health_check, name='health_check_get'),

    # Location graph endpoints
    path('locations', LocationListCreateView.as_view(), name='locations'),
    path('edges', EdgeListCreateView.as_view(), name='edges'),

    # Path queries
    path('route', ShortestPathView.as_view(), name='shortest_path'),
]
