"""
Utility Functions and Classes

Provides error handling helpers.
"""

from tutorchat.utils.error_handlers import (
    ErrorHandler,
    setup_error_handlers
)

__all__ = [
    "ErrorHandler",
    "setup_error_handlers"
]
