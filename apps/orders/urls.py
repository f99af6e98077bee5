from django.urls import path
from . import views

app_name = 'orders'

urlpatterns = [
    # POST /api/order/create - Place an order (auth_token cookie required)
    path('create', views.create_order, name='create'),
]
