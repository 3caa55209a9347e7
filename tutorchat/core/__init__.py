"""
Core Utilities

Modules:
    - security: Password hashing, bearer token issue/verify
    - exceptions: Custom exceptions and HTTP helpers
"""

from tutorchat.core import security, exceptions

__all__ = ["security", "exceptions"]
