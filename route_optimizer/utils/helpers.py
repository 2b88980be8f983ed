"""
Helper functions for the route optimizer module.

This module provides various utility functions used across the apps.
"""
import logging
from typing import Any, List, Mapping

# Set up logging
logger = logging.getLogger(__name__)


def format_route_for_display(route: List[int], location_names: Mapping[int, str]) -> str:
    """
    Format a route for display, converting location IDs to names.

    Args:
        route: List of location IDs in the route.
        location_names: Dictionary mapping location IDs to names.

    Returns:
        Formatted route string.
    """
    route_with_names = [f"{location_names.get(loc_id, loc_id)}" for loc_id in route]
    return " → ".join(route_with_names)


def first_error_message(errors: Any) -> str:
    """
    Flatten DRF serializer errors into a single message.

    The API reports failures as ``{"error": "<message>"}``, so only the first
    message is kept, prefixed with the offending field name.

    Args:
        errors: ``serializer.errors`` (dict, list or string).

    Returns:
        A human readable message.
    """
    if isinstance(errors, dict):
        for field_name, field_errors in errors.items():
            message = first_error_message(field_errors)
            if field_name == 'non_field_errors':
                return message
            return f"{field_name}: {message}"
        return "Invalid input"
    if isinstance(errors, (list, tuple)):
        if not errors:
            return "Invalid input"
        return first_error_message(errors[0])
    return str(errors)
