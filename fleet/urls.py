from django.urls import path

from .views import DriverListCreateView, DriverRouteView, DriverLocationView

urlpatterns = [
    path('drivers', DriverListCreateView.as_view(), name='drivers'),
    path('drivers/route', DriverRouteView.as_view(), name='driver_route'),
    path('drivers/location', DriverLocationView.as_view(), name='driver_location'),
]
