import math

from django.test import TestCase
from rest_framework import status
from rest_framework.test import APITestCase

from route_optimizer.models import Location, Edge


class LocationAPITest(APITestCase):

    def test_create_and_list_locations(self):
        response = self.client.post('/api/locations', {"id": 4, "name": "Pizza Place", "x": 1.5, "y": 2}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data, {})

        self.client.post('/api/locations', {"id": 2, "name": "Home", "x": 0, "y": 0}, format='json')

        response = self.client.get('/api/locations')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [
            {'id': 2, 'name': "Home", 'x': 0.0, 'y': 0.0},
            {'id': 4, 'name': "Pizza Place", 'x': 1.5, 'y': 2.0},
        ])

    def test_duplicate_location_rejected(self):
        Location.objects.create(id=1, name="Home", x=0, y=0)
        response = self.client.post('/api/locations', {"id": 1, "name": "Again", "x": 1, "y": 1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {'error': "Location 1 already exists"})

    def test_missing_field_rejected(self):
        response = self.client.post('/api/locations', {"id": 1, "name": "Home", "x": 1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(response.data['error'].startswith("y: "))


class EdgeAPITest(APITestCase):

    def setUp(self):
        Location.objects.create(id=1, name="A", x=0, y=0)
        Location.objects.create(id=2, name="B", x=12, y=0)

    def test_create_and_list_edges(self):
        response = self.client.post(
            '/api/edges', {"source": 1, "destination": 2, "distance": 10, "trafficFactor": 3}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        response = self.client.post('/api/edges', {"source": 2, "destination": 1, "distance": 11}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        response = self.client.get('/api/edges')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [
            {'source': 1, 'destination': 2, 'distance': 10.0, 'trafficFactor': 3.0},
            {'source': 2, 'destination': 1, 'distance': 11.0, 'trafficFactor': 1.0},
        ])

    def test_negative_distance_rejected(self):
        response = self.client.post('/api/edges', {"source": 1, "destination": 2, "distance": -1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Edge.objects.count(), 0)

    def test_non_positive_traffic_rejected(self):
        response = self.client.post(
            '/api/edges', {"source": 1, "destination": 2, "distance": 1, "trafficFactor": 0}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_location(self):
        response = self.client.post('/api/edges', {"source": 1, "destination": 9, "distance": 1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'error': "Location 9 not found"})

    def test_duplicate_edge_rejected(self):
        Edge.objects.create(source_id=1, destination_id=2, distance=1)
        response = self.client.post('/api/edges', {"source": 1, "destination": 2, "distance": 2}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class ShortestPathAPITest(APITestCase):

    def setUp(self):
        Location.objects.create(id=1, name="A", x=0, y=0)
        Location.objects.create(id=2, name="B", x=12, y=0)
        Location.objects.create(id=3, name="C", x=13, y=0)
        Edge.objects.create(source_id=1, destination_id=2, distance=10, traffic_factor=3)
        Edge.objects.create(source_id=2, destination_id=3, distance=0.5)

    def test_shortest_path(self):
        response = self.client.post('/api/route', {"start": 1, "end": 3}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['path'], [1, 2, 3])
        self.assertTrue(math.isclose(response.data['distance'], 13.0))

    def test_same_start_and_end(self):
        response = self.client.post('/api/route', {"start": 2, "end": 2}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'path': [2], 'distance': 0.0})

    def test_unknown_location(self):
        response = self.client.post('/api/route', {"start": 1, "end": 42}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'error': "Location 42 not found"})

    def test_missing_end(self):
        response = self.client.post('/api/route', {"start": 1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('error', response.data)


class HealthCheckTest(TestCase):

    def test_health_check(self):
        response = self.client.get('/api/health')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"status": "healthy"})


class SwaggerTest(TestCase):

    def test_schema_renders(self):
        response = self.client.get('/swagger/?format=openapi')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
