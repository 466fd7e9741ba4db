"""
Checkout serializers.
"""
from rest_framework import serializers


class CheckoutSerializer(serializers.Serializer):
    """Serializer for checkout output."""
    channel = serializers.CharField(read_only=True)
    destination = serializers.CharField(read_only=True)
    url = serializers.URLField(read_only=True)
    message = serializers.CharField(read_only=True)
    total_amount = serializers.IntegerField(read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    currency = serializers.CharField(read_only=True)
