"""
Menu serializers.
"""
from rest_framework import serializers

from ...domain.services.menu_filter import ALL, TEMPERATURE_FILTERS


class MenuQuerySerializer(serializers.Serializer):
    """Serializer for menu query parameters."""
    search = serializers.CharField(required=False, allow_blank=True, default="")
    temperature = serializers.ChoiceField(choices=TEMPERATURE_FILTERS, required=False, default=ALL)
    category = serializers.CharField(required=False, default=ALL)


class CustomizationOptionSerializer(serializers.Serializer):
    """Serializer for customization option output."""
    id = serializers.CharField(read_only=True)
    code = serializers.CharField(read_only=True)
    name_en = serializers.CharField(read_only=True)
    name_ar = serializers.CharField(read_only=True)
    price = serializers.IntegerField(read_only=True)
    price_display = serializers.CharField(read_only=True)


class MenuItemSerializer(serializers.Serializer):
    """Serializer for menu item output."""
    code = serializers.CharField(read_only=True)
    name_en = serializers.CharField(read_only=True)
    name_ar = serializers.CharField(read_only=True)
    category = serializers.CharField(read_only=True)
    tags = serializers.ListField(child=serializers.CharField(), read_only=True)
    flavors = serializers.ListField(child=serializers.CharField(), read_only=True)
    caffeine_index = serializers.IntegerField(read_only=True)
    is_customizable = serializers.BooleanField(read_only=True)
    prices = serializers.DictField(child=serializers.IntegerField(), read_only=True)
    currency = serializers.CharField(read_only=True)
    image_url = serializers.CharField(read_only=True, allow_null=True)
    customization_options = CustomizationOptionSerializer(many=True, read_only=True)
