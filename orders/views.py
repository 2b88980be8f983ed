import logging

from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from assignment.services.dispatch_service import DispatchService
from assignment.services.mappers import map_order_model
from route_optimizer.api.responses import dispatch_error_response, error_response, validation_error_response
from route_optimizer.core.exceptions import DispatchError
from route_optimizer.utils.helpers import first_error_message

from .models import Order
from .serializers import OrderSerializer, OrderCreateSerializer, OrderReferenceSerializer

logger = logging.getLogger(__name__)


class OrderListCreateView(generics.GenericAPIView):
    """
    Lists orders and places new ones. A new order is dispatched immediately.
    """
    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ['status', 'assigned_driver']

    def get(self, request, format=None):
        try:
            orders = self.filter_queryset(self.get_queryset()).order_by('id')
        except ValidationError as e:
            logger.info(f"Rejected order filter: {e.detail}")
            return error_response(first_error_message(e.detail))
        return Response(OrderSerializer([map_order_model(o) for o in orders], many=True).data)

    @swagger_auto_schema(
        request_body=OrderCreateSerializer,
        responses={
            201: openapi.Response(
                description="Order placed, with the driver it went to when one was available",
                examples={"application/json": {
                    "orderId": 1, "driverId": 1, "driverLocation": 3, "driverSpeed": 2.0, "route": [3, 7]
                }}
            ),
            400: "Bad Request - Invalid input data",
            404: "Not Found - Unknown location"
        },
        operation_id="orders_create",
        tags=['Orders']
    )
    def post(self, request, format=None):
        serializer = OrderCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer)

        data = serializer.validated_data
        try:
            placement = DispatchService().place_order(data['restaurant_id'], data['customer_location_id'])
        except DispatchError as e:
            return dispatch_error_response(e)

        if not placement.assignment.assigned:
            return Response({
                'orderId': placement.order_id,
                'status': 'Pending',
                'message': "No driver available",
            }, status=status.HTTP_201_CREATED)

        return Response({
            'orderId': placement.order_id,
            'driverId': placement.assignment.driver_id,
            'driverLocation': placement.driver.current_location_id if placement.driver else None,
            'driverSpeed': placement.driver.speed if placement.driver else None,
            'route': placement.route,
        }, status=status.HTTP_201_CREATED)


class OrderAssignView(APIView):
    """
    Dispatches an existing order again, e.g. one left pending.
    """

    @swagger_auto_schema(
        request_body=OrderReferenceSerializer,
        responses={
            200: openapi.Response(
                description="Outcome of the dispatch attempt",
                examples={"application/json": {"success": True, "orderId": 1, "driverId": 2}}
            ),
            404: "Not Found - Unknown order"
        },
        operation_id="orders_assign",
        tags=['Orders']
    )
    def post(self, request, format=None):
        serializer = OrderReferenceSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer)

        order_id = serializer.validated_data['order_id']
        try:
            result = DispatchService().assign_order(order_id)
        except DispatchError as e:
            return dispatch_error_response(e)

        if result.assigned:
            return Response({'success': True, 'orderId': order_id, 'driverId': result.driver_id})
        return Response({'success': False, 'orderId': order_id, 'message': "No suitable driver available"})


class OrderCompleteView(APIView):
    """
    Marks an order delivered: it leaves its driver's roster and is deleted.
    """

    @swagger_auto_schema(
        request_body=OrderReferenceSerializer,
        responses={
            200: "Order completed",
            400: "Bad Request - Unknown order or invalid input"
        },
        operation_id="orders_complete",
        tags=['Orders']
    )
    def post(self, request, format=None):
        serializer = OrderReferenceSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer)

        try:
            completed = DispatchService().complete_order(serializer.validated_data['order_id'])
        except DispatchError as e:
            return dispatch_error_response(e)

        if not completed:
            return error_response("Failed to complete order")
        return Response({}, status=status.HTTP_200_OK)
