import logging

from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from assignment.services.dispatch_service import DispatchService
from fleet.serializers import (
    DriverSerializer,
    DriverCreateSerializer,
    DriverLocationSerializer,
    DriverRouteSerializer,
)
from route_optimizer.api.responses import dispatch_error_response, error_response, validation_error_response
from route_optimizer.core.exceptions import DispatchError

logger = logging.getLogger(__name__)


class DriverListCreateView(APIView):
    """
    API endpoint for listing and registering drivers.
    """

    @swagger_auto_schema(
        responses={200: DriverSerializer(many=True)},
        operation_id="drivers_list",
        tags=['Drivers']
    )
    def get(self, request, format=None):
        try:
            drivers = DispatchService().list_drivers()
        except DispatchError as e:
            return dispatch_error_response(e)
        return Response(DriverSerializer(drivers, many=True).data)

    @swagger_auto_schema(
        request_body=DriverCreateSerializer,
        responses={
            201: openapi.Response(
                description="Driver created",
                examples={"application/json": {"driverId": 1}}
            ),
            400: "Bad Request - Invalid speed or no location to start from",
            404: "Not Found - Unknown start location"
        },
        operation_id="drivers_create",
        tags=['Drivers']
    )
    def post(self, request, format=None):
        serializer = DriverCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer)

        data = serializer.validated_data
        try:
            driver_id = DispatchService().add_driver(data['speed'], data.get('start_location'))
        except DispatchError as e:
            return dispatch_error_response(e)
        return Response({'driverId': driver_id}, status=status.HTTP_201_CREATED)


class DriverRouteView(APIView):
    """
    The stop sequence a driver should follow for its current roster.
    """

    @swagger_auto_schema(
        manual_parameters=[
            openapi.Parameter('id', openapi.IN_QUERY, description="Driver id", type=openapi.TYPE_INTEGER, required=True)
        ],
        responses={
            200: DriverRouteSerializer,
            400: "Bad Request - Missing or malformed driver id"
        },
        operation_id="drivers_route",
        tags=['Drivers']
    )
    def get(self, request, format=None):
        raw_id = request.query_params.get('id')
        if not raw_id:
            return error_response("Missing driver ID parameter")
        try:
            driver_id = int(raw_id)
        except ValueError:
            return error_response("Invalid driver ID parameter")

        try:
            route = DispatchService().driver_route(driver_id)
        except DispatchError as e:
            return dispatch_error_response(e)
        return Response({'route': route})


class DriverLocationView(APIView):
    """
    Moves a driver to another known location.
    """

    @swagger_auto_schema(
        request_body=DriverLocationSerializer,
        responses={
            200: "Driver moved",
            400: "Bad Request - Invalid input data",
            404: "Not Found - Unknown driver or location"
        },
        operation_id="drivers_move",
        tags=['Drivers']
    )
    def post(self, request, format=None):
        serializer = DriverLocationSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer)

        data = serializer.validated_data
        try:
            DispatchService().move_driver(data['driver_id'], data['location_id'])
        except DispatchError as e:
            return dispatch_error_response(e)
        return Response({}, status=status.HTTP_200_OK)
