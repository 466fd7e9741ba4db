# Shared interfaces module
from .exception_handlers import custom_exception_handler

__all__ = ['custom_exception_handler']
