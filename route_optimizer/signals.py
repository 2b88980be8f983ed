"""
Keeps the cached location graph snapshot in step with the database.

The snapshot is dropped right away and again once the surrounding transaction
commits, so a snapshot rebuilt from uncommitted state by another worker does
not outlive the change. Workers only see each other's invalidations when the
cache backend is shared (see ``DELIVERY_CACHE_BACKEND``).
"""
import logging

from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from route_optimizer.core.constants import GEO_SNAPSHOT_CACHE_KEY
from route_optimizer.models import Location, Edge

logger = logging.getLogger(__name__)


def _drop_snapshot():
    cache.delete(GEO_SNAPSHOT_CACHE_KEY)


@receiver(post_save, sender=Location)
@receiver(post_delete, sender=Location)
@receiver(post_save, sender=Edge)
@receiver(post_delete, sender=Edge)
def invalidate_geo_snapshot(sender, **kwargs):
    _drop_snapshot()
    transaction.on_commit(_drop_snapshot)
    logger.debug(f"Location graph snapshot invalidated by {sender.__name__} change.")
