"""
Error types shared by the routing core, the stores and the API layer.

Only genuinely exceptional situations are raised. Expected dispatch outcomes
(no driver available, no path between two points) are returned as values.
"""


class DispatchError(Exception):
    """Base class for all delivery dispatch errors."""


class NotFoundError(DispatchError):
    """A location, order or driver id does not exist."""

    def __init__(self, kind: str, identifier):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind.capitalize()} {identifier} not found")


class UnknownLocationError(NotFoundError):
    def __init__(self, location_id):
        super().__init__('location', location_id)


class InvalidInputError(DispatchError):
    """Malformed input or a value that would break a model invariant."""


class StoreFailureError(DispatchError):
    """The persistence layer failed to read or write a record."""
