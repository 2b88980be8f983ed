import logging
from contextlib import contextmanager

from django.db import DatabaseError

from route_optimizer.core.exceptions import StoreFailureError

logger = logging.getLogger(__name__)


@contextmanager
def store_operation(description):
    """
    Translate database errors raised inside the block into StoreFailureError.
    """
    try:
        yield
    except DatabaseError as e:
        logger.error(f"Store operation failed ({description}): {e}", exc_info=True)
        raise StoreFailureError(f"Failed to {description}") from e
