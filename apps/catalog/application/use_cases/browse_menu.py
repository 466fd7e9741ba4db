"""
Browse menu use case.
"""
from dataclasses import dataclass
from typing import List

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.catalog_provider import CatalogProvider
from ...domain.services.customization_lookup import customization_options_for
from ...domain.services.menu_filter import MenuQuery, filter_menu, list_categories
from ..dtos.menu_dto import MenuItemDTO, MenuQueryDTO


@dataclass
class BrowseMenuUseCase(UseCase[MenuQueryDTO, List[MenuItemDTO]]):
    """List menu items matching a search, each with its customization options."""

    catalog: CatalogProvider
    currency: str = "IQD"

    def execute(self, input_dto: MenuQueryDTO) -> UseCaseResult[List[MenuItemDTO]]:
        query = MenuQuery(
            search=input_dto.search,
            temperature=input_dto.temperature,
            category=input_dto.category,
        )
        products = filter_menu(self.catalog.list_products(), query)

        options = self.catalog.list_customization_options() if products else []
        return UseCaseResult.ok([
            MenuItemDTO.from_entity(
                product,
                customization_options_for(product, options),
                currency=self.currency,
            )
            for product in products
        ])


@dataclass
class ListCategoriesUseCase(UseCase[None, List[str]]):
    """List menu categories, starting with ``all``."""

    catalog: CatalogProvider

    def execute(self, input_dto: None = None) -> UseCaseResult[List[str]]:
        return UseCaseResult.ok(list_categories(self.catalog.list_products()))
