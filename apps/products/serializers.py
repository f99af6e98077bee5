from decimal import Decimal
from rest_framework import serializers
from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Catalog entry in the camelCase shape the shop frontend uses."""

    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.00'), coerce_to_string=False)
    stockQuantity = serializers.IntegerField(source='stock_quantity', min_value=0, required=False)
    productAvailable = serializers.BooleanField(source='product_available', required=False)
    roastLevel = serializers.IntegerField(source='roast_level', min_value=0, max_value=3, required=False)
    caffeineLevel = serializers.IntegerField(source='caffeine_level', min_value=0, max_value=3, required=False)
    sweetness = serializers.IntegerField(min_value=0, max_value=3, required=False)
    acidity = serializers.IntegerField(min_value=0, max_value=3, required=False)

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'description',
            'price',
            'stockQuantity',
            'sales',
            'productAvailable',
            'roastLevel',
            'caffeineLevel',
            'sweetness',
            'acidity',
            'weight',
        ]
        # sales is only moved by order placement
        read_only_fields = ['id', 'sales']
        extra_kwargs = {
            'description': {'required': False},
            'weight': {'required': False},
        }


class ProductSearchSerializer(serializers.Serializer):
    """Query parameters for product search."""

    keyword = serializers.CharField(required=True, allow_blank=True)
