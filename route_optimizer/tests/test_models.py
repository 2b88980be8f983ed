from django.core.cache import cache
from django.db import IntegrityError
from django.test import TestCase, override_settings

from assignment.clients import LocationStore
from route_optimizer.core.constants import GEO_SNAPSHOT_CACHE_KEY
from route_optimizer.models import Location, Edge


class EdgeModelTest(TestCase):

    def setUp(self):
        self.a = Location.objects.create(id=1, name="A", x=0, y=0)
        self.b = Location.objects.create(id=2, name="B", x=3, y=4)

    def test_default_traffic_factor(self):
        edge = Edge.objects.create(source=self.a, destination=self.b, distance=5)
        self.assertEqual(edge.traffic_factor, 1.0)
        self.assertEqual(str(edge), "1 -> 2 (5 x 1.0)")

    def test_one_edge_per_direction(self):
        Edge.objects.create(source=self.a, destination=self.b, distance=5)
        Edge.objects.create(source=self.b, destination=self.a, distance=5)
        with self.assertRaises(IntegrityError):
            Edge.objects.create(source=self.a, destination=self.b, distance=7)


@override_settings(CACHES={'default': {'BACKEND': 'django.core.cache.backends.locmem.LocMemCache'}})
class GeoSnapshotCacheTest(TestCase):

    def setUp(self):
        cache.clear()
        Location.objects.create(id=1, name="A", x=0, y=0)

    def tearDown(self):
        cache.clear()

    def test_snapshot_is_cached_until_locations_change(self):
        store = LocationStore()
        first = store.snapshot()
        self.assertEqual(first.location_ids, [1])

        with self.assertNumQueries(0):
            store.snapshot()

        Location.objects.create(id=2, name="B", x=3, y=4)
        self.assertEqual(store.snapshot().location_ids, [1, 2])

    def test_edge_change_invalidates_snapshot(self):
        Location.objects.create(id=2, name="B", x=3, y=4)
        store = LocationStore()
        self.assertEqual(store.snapshot().edges_from(1), ())

        Edge.objects.create(source_id=1, destination_id=2, distance=5)
        self.assertEqual(len(store.snapshot().edges_from(1)), 1)

    def test_snapshot_cached_before_commit_is_dropped_on_commit(self):
        store = LocationStore()
        stale = store.snapshot()

        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            Location.objects.create(id=2, name="B", x=3, y=4)
            cache.set(GEO_SNAPSHOT_CACHE_KEY, stale)

        self.assertEqual(len(callbacks), 1)
        self.assertIsNone(cache.get(GEO_SNAPSHOT_CACHE_KEY))
        self.assertEqual(store.snapshot().location_ids, [1, 2])
