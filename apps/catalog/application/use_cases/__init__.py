from .browse_menu import BrowseMenuUseCase, ListCategoriesUseCase

__all__ = ['BrowseMenuUseCase', 'ListCategoriesUseCase']
