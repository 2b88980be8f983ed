import heapq
from typing import Dict, List, Tuple, Optional
import logging

from route_optimizer.core.geo_model import GeoModel
from route_optimizer.core.types_1 import ShortestPathResult

# Set up logging
logger = logging.getLogger(__name__)


class DijkstraPathFinder:
    """
    Dijkstra's algorithm over a traffic-weighted location graph, with
    Euclidean fallback edges for sparse graphs.
    """

    def __init__(self, geo_model: GeoModel):
        """Initialize the path finder over a location graph snapshot."""
        self.geo_model = geo_model

    @staticmethod
    def _validate_non_negative_weights(geo_model: GeoModel) -> None:
        """
        Ensure all edge weights in the graph are non-negative.

        Raises:
            ValueError: If a negative edge weight is found.
        """
        for src in geo_model.location_ids:
            for edge in geo_model.edges_from(src):
                if edge.weight < 0:
                    raise ValueError(
                        f"Negative weight detected from '{src}' to '{edge.destination}' with weight {edge.weight}"
                    )

    @staticmethod
    def calculate_shortest_path(
        geo_model: GeoModel,
        start: int,
        end: int
    ) -> Tuple[List[int], Optional[float]]:
        """
        Calculate the shortest path between two locations.

        Edge weight is distance * traffic factor. While the end location has
        no recorded predecessor, every popped node is also linked to every
        other known location by a synthetic edge of plain Euclidean length.
        The search stops as soon as the end location is popped, so the result
        is not guaranteed to be optimal once fallback edges are involved.

        Args:
            geo_model: Snapshot of locations and edges.
            start: Starting location id.
            end: Target location id.

        Returns:
            A tuple of the path (list of location ids, both endpoints
            included) and its weighted cost. Returns ([], None) if no path
            exists or if start/end are unknown.
        """
        DijkstraPathFinder._validate_non_negative_weights(geo_model)

        if not geo_model.has_location(start) or not geo_model.has_location(end):
            logger.warning(f"Start location '{start}' or end location '{end}' not in graph")
            return [], None

        location_ids = geo_model.location_ids

        # Initialize distances dictionary with infinity for all nodes except start
        distances: Dict[int, float] = {loc_id: float('inf') for loc_id in location_ids}
        distances[start] = 0.0

        # Keep track of previous nodes to reconstruct the path
        previous: Dict[int, int] = {}

        # Priority queue with (distance, node); ties pop the lower location id
        queue = [(0.0, start)]

        while queue:
            _, current = heapq.heappop(queue)

            if current == end:
                break

            for edge in geo_model.edges_from(current):
                neighbor = edge.destination
                if neighbor not in distances:
                    logger.debug(f"Skipping edge {current}->{neighbor}: unknown destination.")
                    continue
                alt = distances[current] + edge.weight
                if alt < distances[neighbor]:
                    distances[neighbor] = alt
                    previous[neighbor] = current
                    heapq.heappush(queue, (alt, neighbor))

            # Fallback edges keep sparse graphs connected
            if end not in previous:
                for other in location_ids:
                    if other == current:
                        continue
                    alt = distances[current] + geo_model.distance(current, other)
                    if alt < distances[other]:
                        distances[other] = alt
                        previous[other] = current
                        heapq.heappush(queue, (alt, other))

        if distances[end] == float('inf'):
            logger.warning(f"No path found from '{start}' to '{end}'")
            return [], None

        path = []
        at = end
        while at != start:
            path.append(at)
            at = previous[at]
        path.append(start)
        path.reverse()
        return path, distances[end]

    def find_path(self, start: int, end: int) -> ShortestPathResult:
        """
        Shortest path query returning both the weighted cost and the plain
        Euclidean length along the chosen path.
        """
        path, cost = self.calculate_shortest_path(self.geo_model, start, end)
        distance = self.geo_model.route_length(path) if path else 0.0
        return ShortestPathResult(start=start, end=end, path=path, cost=cost, distance=distance)
