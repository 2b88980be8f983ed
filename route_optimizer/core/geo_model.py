"""
Immutable view of the location graph used by path finding, route building
and dispatch scoring.
"""
import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from route_optimizer.core.distance_matrix import DistanceMatrixBuilder
from route_optimizer.core.exceptions import UnknownLocationError
from route_optimizer.core.types_1 import Location, Edge

logger = logging.getLogger(__name__)


class GeoModel:
    """
    Snapshot of locations and directed edges.

    Distances are looked up in a matrix computed once at construction, so a
    snapshot can be shared between concurrent readers without locking.
    """

    def __init__(self, locations: Iterable[Location], edges: Iterable[Edge] = ()):
        ordered = sorted(locations, key=lambda loc: loc.id)
        self._locations: Dict[int, Location] = {loc.id: loc for loc in ordered}
        self._matrix, ids = DistanceMatrixBuilder.create_distance_matrix(ordered)
        self._index: Dict[int, int] = {loc_id: idx for idx, loc_id in enumerate(ids)}

        outgoing: Dict[int, List[Edge]] = {}
        for edge in edges:
            if edge.source not in self._locations:
                logger.warning(f"Ignoring edge {edge.source}->{edge.destination}: unknown source location.")
                continue
            outgoing.setdefault(edge.source, []).append(edge)
        self._edges: Dict[int, Tuple[Edge, ...]] = {
            source: tuple(sorted(source_edges, key=lambda e: e.destination))
            for source, source_edges in outgoing.items()
        }

    def __len__(self) -> int:
        return len(self._locations)

    def __contains__(self, location_id) -> bool:
        return self.has_location(location_id)

    def has_location(self, location_id) -> bool:
        return location_id in self._locations

    def get_location(self, location_id) -> Location:
        try:
            return self._locations[location_id]
        except KeyError:
            raise UnknownLocationError(location_id) from None

    @property
    def location_ids(self) -> List[int]:
        """All known location ids in ascending order."""
        return list(self._locations)

    def distance(self, a: int, b: int) -> float:
        """
        Euclidean distance between two known locations.

        Raises:
            UnknownLocationError: If either id is not part of the snapshot.
        """
        try:
            i = self._index[a]
        except KeyError:
            raise UnknownLocationError(a) from None
        try:
            j = self._index[b]
        except KeyError:
            raise UnknownLocationError(b) from None
        return float(self._matrix[i, j])

    def edges_from(self, location_id: int) -> Tuple[Edge, ...]:
        """Outgoing edges of a location, empty when it has none."""
        return self._edges.get(location_id, ())

    def route_length(self, location_ids: Sequence[int]) -> float:
        """Sum of Euclidean distances between consecutive locations."""
        total = 0.0
        for current, following in zip(location_ids, location_ids[1:]):
            total += self.distance(current, following)
        return total
