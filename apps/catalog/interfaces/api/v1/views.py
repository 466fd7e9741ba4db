"""
Catalog API v1 views.
"""
from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ....application.dtos.menu_dto import CustomizationOptionDTO, MenuQueryDTO
from ....application.use_cases.browse_menu import BrowseMenuUseCase, ListCategoriesUseCase
from ....infrastructure.providers import get_catalog_provider
from ...serializers.menu_serializer import (
    CustomizationOptionSerializer,
    MenuItemSerializer,
    MenuQuerySerializer,
)


@extend_schema(tags=['Catalog'])
class MenuView(APIView):
    """Menu endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[MenuQuerySerializer],
        responses={200: MenuItemSerializer(many=True)},
        summary="Search and filter the menu",
    )
    def get(self, request):
        query = MenuQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        use_case = BrowseMenuUseCase(
            catalog=get_catalog_provider(),
            currency=settings.STOREFRONT_CURRENCY,
        )
        items = use_case.execute(MenuQueryDTO(**query.validated_data)).data
        return Response(MenuItemSerializer(items, many=True).data)


@extend_schema(tags=['Catalog'])
class CategoryListView(APIView):
    """Menu categories endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(summary="List menu categories")
    def get(self, request):
        categories = ListCategoriesUseCase(catalog=get_catalog_provider()).execute().data
        return Response(categories)


@extend_schema(tags=['Catalog'])
class CustomizationOptionListView(APIView):
    """Customization options endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CustomizationOptionSerializer(many=True)},
        summary="List active customization options",
    )
    def get(self, request):
        options = get_catalog_provider().list_customization_options()
        dtos = [CustomizationOptionDTO.from_entity(option) for option in options]
        return Response(CustomizationOptionSerializer(dtos, many=True).data)
