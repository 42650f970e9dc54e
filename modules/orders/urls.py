"""
Orders module URLs.
"""
from django.urls import path

from .views import OrderCreateView, MyOrdersView, OrderDetailView

urlpatterns = [
    path('', OrderCreateView.as_view(), name='order-create'),
    path('mine/', MyOrdersView.as_view(), name='order-mine'),
    path('<int:order_id>/', OrderDetailView.as_view(), name='order-detail'),
]
