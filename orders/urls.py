from django.urls import path

from .views import OrderListCreateView, OrderAssignView, OrderCompleteView

urlpatterns = [
    path('orders', OrderListCreateView.as_view(), name='orders'),
    path('orders/assign', OrderAssignView.as_view(), name='order_assign'),
    path('orders/complete', OrderCompleteView.as_view(), name='order_complete'),
]
