from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsShopAdminOrReadOnly
from .serializers import ProductSerializer, ProductSearchSerializer
from .services import (
    get_product,
    create_product,
    update_product,
    delete_product,
    list_products,
    search_products,
    get_top_selling_products,
)


class ProductViewSet(viewsets.ViewSet):
    """
    Catalog endpoints.

    list: Get all products
    create: Add a product (shop admin)
    retrieve: Get a specific product
    update: Replace a product's catalog fields (shop admin)
    destroy: Remove a product (shop admin)
    search: Case-insensitive name search
    top10: Best sellers by sales counter
    """

    permission_classes = [IsShopAdminOrReadOnly]
    serializer_class = ProductSerializer

    def list(self, request):
        """Get all products."""
        return Response(ProductSerializer(list_products(), many=True).data)

    def retrieve(self, request, pk=None):
        """Get a specific product."""
        product = get_product(product_id=pk)
        return Response(ProductSerializer(product).data)

    def create(self, request):
        """Add a new product."""
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = create_product(**serializer.validated_data)

        return Response(
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, pk=None):
        """Replace the catalog fields of a product."""
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        update_product(product_id=pk, **serializer.validated_data)

        return Response({'message': 'Updated'})

    def destroy(self, request, pk=None):
        """Remove a product."""
        delete_product(product_id=pk)
        return Response({'message': 'Deleted'})

    @extend_schema(
        parameters=[OpenApiParameter('keyword', str, required=True)],
        responses={200: ProductSerializer(many=True)},
    )
    @action(detail=False, methods=['get'])
    def search(self, request):
        """Search products by name."""
        params = ProductSearchSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        products = search_products(keyword=params.validated_data['keyword'])
        return Response(ProductSerializer(products, many=True).data)

    @action(detail=False, methods=['get'])
    def top10(self, request):
        """Get the ten best-selling products."""
        products = get_top_selling_products()
        return Response(ProductSerializer(products, many=True).data)
