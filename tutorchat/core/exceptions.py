"""
Custom exceptions for the Tutor Chat API
"""

from fastapi import HTTPException, status


class TutorChatException(Exception):
    """Base exception for the Tutor Chat API"""
    pass


class AuthenticationError(TutorChatException):
    """Authentication failed"""
    pass


class DuplicateError(TutorChatException):
    """Duplicate resource"""
    pass


class ConfigurationError(TutorChatException):
    """Settings are unusable for the current environment"""
    pass


# HTTP exception helpers
def http_401_unauthorized(detail: str = "Invalid token"):
    """Raise 401 Unauthorized"""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def http_404_not_found(detail: str = "Not found"):
    """Raise 404 Not Found"""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


def http_400_bad_request(detail: str = "Bad request"):
    """Raise 400 Bad Request"""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail,
    )


def http_500_internal_error(detail: str = "Internal server error"):
    """Raise 500 Internal Server Error"""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )
