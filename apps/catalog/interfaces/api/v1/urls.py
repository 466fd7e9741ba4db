"""
Catalog API v1 URLs.
"""
from django.urls import path

from .views import CategoryListView, CustomizationOptionListView, MenuView

urlpatterns = [
    path('menu/', MenuView.as_view(), name='menu'),
    path('categories/', CategoryListView.as_view(), name='menu-categories'),
    path('customization-options/', CustomizationOptionListView.as_view(), name='customization-options'),
]
