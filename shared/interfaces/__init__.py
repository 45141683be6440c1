# Shared interfaces module
from .exception_handlers import custom_exception_handler, status_for_exception
from .pagination import StandardPagination

__all__ = ['custom_exception_handler', 'status_for_exception', 'StandardPagination']
