"""
API Routes and Endpoints

Routers:
    - auth: Signup and login
    - chat: Authenticated single-turn tutor chat
"""

from tutorchat.api import auth, chat

__all__ = ["auth", "chat"]
