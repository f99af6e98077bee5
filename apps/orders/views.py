from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.services import UnauthorizedError
from apps.accounts.views import ErrorResponseSerializer
from .serializers import OrderItemSerializer, OrderResponseSerializer
from .services import place_order


@extend_schema(
    request=OrderItemSerializer(many=True),
    responses={
        200: OrderResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Place an order for the logged-in user. Stock is reserved atomically "
                "and an order summary is emailed after commit.",
    tags=['orders'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def create_order(request):
    """Place an order from the basket in the request body."""
    # Anonymous callers get the order-specific message code
    if not request.user or not request.user.is_authenticated:
        raise UnauthorizedError('order.notLoggedIn')

    serializer = OrderItemSerializer(data=request.data, many=True)
    serializer.is_valid(raise_exception=True)

    place_order(user=request.user, items=serializer.validated_data)

    return Response({'message': 'order.success'})
