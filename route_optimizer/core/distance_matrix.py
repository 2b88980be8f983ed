"""
Distance matrix utilities for route optimization.

This module builds the pairwise Euclidean distance matrix that backs
GeoModel distance lookups.
"""
from typing import List, Tuple, Sequence
import logging
import numpy as np

from route_optimizer.core.types_1 import Location

logger = logging.getLogger(__name__)


class DistanceMatrixBuilder:
    """
    Builder class for creating distance matrices used in route optimization.
    """

    @staticmethod
    def create_distance_matrix(
        locations: Sequence[Location],
    ) -> Tuple[np.ndarray, List[int]]:
        """
        Create a Euclidean distance matrix from a list of locations.

        Args:
            locations: List of Location objects.

        Returns:
            Tuple containing:
                - Square matrix where entry [i][j] is the distance from location i to j.
                - List of location IDs in the same order as the matrix rows.
        """
        if not locations:
            logger.debug("No locations provided, returning empty distance matrix.")
            return np.array([], dtype=float).reshape(0, 0), []

        location_ids = [loc.id for loc in locations]
        if len(set(location_ids)) != len(location_ids):
            raise ValueError("Duplicate location IDs provided to distance matrix builder")

        coords = np.array([[loc.x, loc.y] for loc in locations], dtype=float)
        dx = coords[:, 0][:, np.newaxis] - coords[:, 0][np.newaxis, :]
        dy = coords[:, 1][:, np.newaxis] - coords[:, 1][np.newaxis, :]
        distance_matrix = np.sqrt(dx ** 2 + dy ** 2)
        np.fill_diagonal(distance_matrix, 0.0)

        logger.debug(f"Built {len(location_ids)}x{len(location_ids)} Euclidean distance matrix.")
        return distance_matrix, location_ids

