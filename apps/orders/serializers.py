from rest_framework import serializers


class OrderItemSerializer(serializers.Serializer):
    """One basket line: ``{"productId": 1, "quantity": 2}``."""

    productId = serializers.IntegerField(source='product_id')
    quantity = serializers.IntegerField(min_value=1)


class OrderResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
