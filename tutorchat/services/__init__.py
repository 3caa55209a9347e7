"""
Business Logic Services

Includes:
- user_service: Credential storage, lookup and password checks
- chat_service: TutorClient, single-turn model proxy
"""

# Lazy imports to avoid circular dependencies
# Import services directly from their modules instead

__all__ = [
    "user_service",
    "chat_service",
]
