"""
Orders API v1 views.
"""
from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.catalog.infrastructure.providers import get_catalog_provider
from ....application.dtos.cart_dto import AddToCartDTO, UpdateQuantityDTO
from ....application.use_cases.add_to_cart import AddToCartUseCase
from ....application.use_cases.checkout import CheckoutUseCase
from ....application.use_cases.manage_cart import (
    ClearCartUseCase,
    GetCartUseCase,
    RemoveCartItemUseCase,
    UpdateCartItemUseCase,
)
from ....domain.services.order_message_formatter import OrderMessageFormatter
from ....infrastructure.dispatchers.whatsapp_dispatcher import WhatsAppDispatcher
from ....infrastructure.repositories.session_cart_repository import SessionCartRepository
from ...serializers.cart_serializer import (
    CartItemCreateSerializer,
    CartItemUpdateSerializer,
    CartSerializer,
)
from ...serializers.checkout_serializer import CheckoutSerializer


def _cart_repository(request) -> SessionCartRepository:
    return SessionCartRepository(request.session, currency=settings.STOREFRONT_CURRENCY)


@extend_schema(tags=['Cart'])
class CartView(APIView):
    """The cart kept in the visitor's session."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CartSerializer},
        summary="Get current session's cart",
    )
    def get(self, request):
        cart = GetCartUseCase(cart_repository=_cart_repository(request)).execute().data
        return Response(CartSerializer(cart).data)

    @extend_schema(
        request=CartItemCreateSerializer,
        responses={201: CartSerializer},
        summary="Add item to cart",
    )
    def post(self, request):
        serializer = CartItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = AddToCartUseCase(
            catalog=get_catalog_provider(),
            cart_repository=_cart_repository(request),
        )
        cart = use_case.execute(AddToCartDTO(**serializer.validated_data)).data
        return Response(CartSerializer(cart).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={204: None}, summary="Empty the cart")
    def delete(self, request):
        ClearCartUseCase(cart_repository=_cart_repository(request)).execute()
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Cart'])
class CartItemView(APIView):
    """A single cart line, addressed by its derived line item id."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=CartItemUpdateSerializer,
        responses={200: CartSerializer},
        summary="Update cart item quantity",
    )
    def patch(self, request, line_item_id: str):
        serializer = CartItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = UpdateCartItemUseCase(cart_repository=_cart_repository(request))
        cart = use_case.execute(
            UpdateQuantityDTO(line_item_id=line_item_id, **serializer.validated_data)
        ).data
        return Response(CartSerializer(cart).data)

    @extend_schema(responses={204: None}, summary="Remove a line from the cart")
    def delete(self, request, line_item_id: str):
        RemoveCartItemUseCase(cart_repository=_cart_repository(request)).execute(line_item_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Checkout'])
class CheckoutView(APIView):
    """Hand the cart to the ordering channel and empty it."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=None,
        responses={200: CheckoutSerializer},
        summary="Send the cart as an order message",
    )
    def post(self, request):
        use_case = CheckoutUseCase(
            cart_repository=_cart_repository(request),
            formatter=OrderMessageFormatter(brand_name=settings.STOREFRONT_BRAND_NAME),
            dispatcher=WhatsAppDispatcher(),
            destination=settings.CHECKOUT_WHATSAPP_NUMBER,
        )
        checkout = use_case.execute().data
        return Response(CheckoutSerializer(checkout).data)
