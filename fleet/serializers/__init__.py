from .driver import DriverSerializer, DriverCreateSerializer, DriverLocationSerializer, DriverRouteSerializer
