"""
Cart serializers.
"""
from rest_framework import serializers


class CartCustomizationSerializer(serializers.Serializer):
    """Serializer for a line item's customization snapshot."""
    id = serializers.CharField(read_only=True)
    name_en = serializers.CharField(read_only=True)
    name_ar = serializers.CharField(read_only=True)
    price = serializers.IntegerField(read_only=True)


class CartItemSerializer(serializers.Serializer):
    """Serializer for cart item output."""
    id = serializers.CharField(read_only=True)
    product_id = serializers.CharField(read_only=True)
    product_name_en = serializers.CharField(read_only=True)
    product_name_ar = serializers.CharField(read_only=True)
    size = serializers.CharField(read_only=True)
    unit_price = serializers.IntegerField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    customizations = CartCustomizationSerializer(many=True, read_only=True)
    subtotal = serializers.IntegerField(read_only=True)
    image = serializers.CharField(read_only=True, allow_null=True)


class CartSerializer(serializers.Serializer):
    """Serializer for cart output."""
    id = serializers.UUIDField(read_only=True)
    items = CartItemSerializer(many=True, read_only=True)
    total_amount = serializers.IntegerField(read_only=True)
    total_display = serializers.CharField(read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    currency = serializers.CharField(read_only=True)
    is_empty = serializers.BooleanField(read_only=True)
    line_item_id = serializers.CharField(read_only=True, allow_null=True)


class CartItemCreateSerializer(serializers.Serializer):
    """Serializer for adding item to cart."""
    product_code = serializers.CharField(max_length=100)
    size = serializers.CharField(max_length=50)
    customization_ids = serializers.ListField(
        child=serializers.CharField(max_length=50),
        required=False,
        default=list,
    )


class CartItemUpdateSerializer(serializers.Serializer):
    """Serializer for updating cart item; zero or less removes the line."""
    quantity = serializers.IntegerField()
