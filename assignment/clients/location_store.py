import logging

from django.conf import settings
from django.core.cache import cache

from assignment.clients.base import store_operation
from assignment.services.mappers import map_location_model, map_edge_model
from route_optimizer.core.constants import GEO_SNAPSHOT_CACHE_KEY, DEFAULT_GEO_SNAPSHOT_CACHE_TIMEOUT
from route_optimizer.core.geo_model import GeoModel
from route_optimizer.models import Location, Edge

logger = logging.getLogger(__name__)


class LocationStore:
    def get(self, location_id):
        with store_operation(f"load location {location_id}"):
            location = Location.objects.filter(id=location_id).first()
        return map_location_model(location) if location else None

    def all(self):
        with store_operation("list locations"):
            return [map_location_model(loc) for loc in Location.objects.order_by('id')]

    def edges(self):
        with store_operation("list edges"):
            return [map_edge_model(edge) for edge in Edge.objects.order_by('source_id', 'destination_id')]

    def create(self, location_id, name, x, y):
        with store_operation(f"create location {location_id}"):
            location = Location.objects.create(id=location_id, name=name, x=x, y=y)
        logger.info(f"Created location {location.id} '{location.name}' at ({location.x}, {location.y})")
        return map_location_model(location)

    def create_edge(self, source, destination, distance, traffic_factor):
        with store_operation(f"create edge {source}->{destination}"):
            edge = Edge.objects.create(
                source_id=source,
                destination_id=destination,
                distance=distance,
                traffic_factor=traffic_factor,
            )
        logger.info(f"Created edge {source}->{destination} (distance {distance}, traffic {traffic_factor})")
        return map_edge_model(edge)

    def snapshot(self):
        """
        Return the current location graph, cached until a location or edge changes.

        Returns:
            GeoModel built from every stored location and edge.
        """
        geo_model = cache.get(GEO_SNAPSHOT_CACHE_KEY)
        if geo_model is not None:
            return geo_model

        geo_model = GeoModel(self.all(), self.edges())
        timeout = getattr(settings, 'GEO_SNAPSHOT_CACHE_TIMEOUT', DEFAULT_GEO_SNAPSHOT_CACHE_TIMEOUT)
        cache.set(GEO_SNAPSHOT_CACHE_KEY, geo_model, timeout)
        logger.debug(f"Built location graph snapshot with {len(geo_model)} locations.")
        return geo_model
