"""
API views for the location graph and path queries.

This module provides the endpoints for registering locations and edges and
for point-to-point shortest path lookups.
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.decorators import api_view
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi
import logging

from assignment.services.dispatch_service import DispatchService
from route_optimizer.core.exceptions import DispatchError
from route_optimizer.api.responses import dispatch_error_response, validation_error_response
from route_optimizer.api.serializers import (
    LocationSerializer,
    EdgeSerializer,
    ShortestPathRequestSerializer,
    ShortestPathResponseSerializer,
)

# Set up logging
logger = logging.getLogger(__name__)


class LocationListCreateView(APIView):
    """
    API view for listing and registering locations.
    """

    @swagger_auto_schema(
        responses={200: LocationSerializer(many=True)},
        operation_id="locations_list",
        operation_description="Lists every known location in ascending id order.",
        tags=['Locations']
    )
    def get(self, request, format=None):
        try:
            locations = DispatchService().list_locations()
        except DispatchError as e:
            return dispatch_error_response(e)
        return Response(LocationSerializer(locations, many=True).data)

    @swagger_auto_schema(
        request_body=LocationSerializer,
        responses={
            201: "Location created",
            400: "Bad Request - Invalid input or duplicate id",
            500: "Internal Server Error - Store failure"
        },
        operation_id="locations_create",
        operation_description="Registers a location with a client supplied id.",
        tags=['Locations']
    )
    def post(self, request, format=None):
        serializer = LocationSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer)

        data = serializer.validated_data
        try:
            DispatchService().add_location(data['id'], data['name'], data['x'], data['y'])
        except DispatchError as e:
            return dispatch_error_response(e)
        return Response({}, status=status.HTTP_201_CREATED)


class EdgeListCreateView(APIView):
    """
    API view for listing and registering directed road segments.
    """

    @swagger_auto_schema(
        responses={200: EdgeSerializer(many=True)},
        operation_id="edges_list",
        operation_description="Lists every edge ordered by source then destination.",
        tags=['Locations']
    )
    def get(self, request, format=None):
        try:
            edges = DispatchService().list_edges()
        except DispatchError as e:
            return dispatch_error_response(e)
        return Response(EdgeSerializer(edges, many=True).data)

    @swagger_auto_schema(
        request_body=EdgeSerializer,
        responses={
            201: "Edge created",
            400: "Bad Request - Invalid input or duplicate edge",
            404: "Not Found - Unknown location",
            500: "Internal Server Error - Store failure"
        },
        operation_id="edges_create",
        operation_description="Adds a directed edge. Path finding weighs it as distance x traffic factor.",
        tags=['Locations']
    )
    def post(self, request, format=None):
        serializer = EdgeSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer)

        data = serializer.validated_data
        try:
            DispatchService().add_edge(
                data['source'],
                data['destination'],
                data['distance'],
                data['traffic_factor'],
            )
        except DispatchError as e:
            return dispatch_error_response(e)
        return Response({}, status=status.HTTP_201_CREATED)


class ShortestPathView(APIView):
    """
    API view for point-to-point path queries.
    """

    @swagger_auto_schema(
        request_body=ShortestPathRequestSerializer,
        responses={
            200: ShortestPathResponseSerializer,
            400: "Bad Request - Invalid input data",
            404: "Not Found - Unknown location"
        },
        operation_id="route_shortest_path",
        operation_description="""Finds a path between two locations over traffic weighted edges.
        Locations without a usable edge are linked by straight-line fallback segments.
        The reported distance is the straight-line length along the returned path.""",
        tags=['Route Optimization']
    )
    def post(self, request, format=None):
        """
        POST endpoint for shortest path queries.

        Args:
            request: HTTP request object containing ``start`` and ``end``.
            format: Format of the response.

        Returns:
            Response object with the path and its length.
        """
        serializer = ShortestPathRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer)

        start = serializer.validated_data['start']
        end = serializer.validated_data['end']
        try:
            result = DispatchService().shortest_path(start, end)
        except DispatchError as e:
            return dispatch_error_response(e)

        if not result.reachable:
            logger.warning(f"No path between {start} and {end}")
        return Response({'path': result.path, 'distance': result.distance}, status=status.HTTP_200_OK)


@swagger_auto_schema(
    method='get',
    operation_id="health_check_get",
    operation_description="Performs a health check of the API. Returns the operational status of the service.",
    responses={
        200: openapi.Response(
            description="API is healthy and operational.",
            examples={"application/json": {"status": "healthy"}}
        )
    },
    tags=['Health Check']
)
@api_view(['GET'])
def health_check(request):
    """
    Health check endpoint to verify the API is running.

    Args:
        request: HTTP request object.

    Returns:
        Response object with health status.
    """
    return Response({"status": "healthy"}, status=status.HTTP_200_OK)
