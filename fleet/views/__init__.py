from .driver import DriverListCreateView, DriverRouteView, DriverLocationView
