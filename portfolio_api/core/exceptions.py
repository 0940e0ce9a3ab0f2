"""
Common response models and exceptions for API
"""
import logging
from typing import Any, Optional, List

from fastapi import status
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ResponseBody(BaseModel):
    """Common API success response structure"""
    model_config = ConfigDict(from_attributes=True)

    success: bool = Field(default=True, description="Whether the request succeeded")
    message: Optional[str] = Field(default=None, description="Response message")
    data: Optional[Any] = Field(default=None, description="Response data")


class TokenResponseBody(ResponseBody):
    """Login response: the token sits next to the admin data"""
    token: str = Field(..., description="JWT access token")


class ErrorBody(BaseModel):
    """Common API error response structure"""
    success: bool = Field(default=False)
    error: str = Field(..., description="Error message")
    errors: List[str] = Field(default_factory=list, description="List of error details")


def validation_messages(errors: List[dict]) -> List[str]:
    """Flatten pydantic error dicts into "field: message" strings"""
    messages = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc)
        msg = err.get("msg", "Invalid value")
        messages.append(f"{field}: {msg}" if field else msg)
    return messages


class ApiException(Exception):
    """Base class for errors that map onto an HTTP response"""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(self.message)


class BadRequestException(ApiException):
    """Exception for bad request / validation failures (400)"""
    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateEmailException(BadRequestException):
    """Email already used by another administrator (400)"""

    def __init__(self, message: str = "Email is already in use", errors: Optional[List[str]] = None):
        super().__init__(message, errors)


class UnauthorizedException(ApiException):
    """Exception for missing or rejected credentials (401)"""
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidCredentialsException(UnauthorizedException):
    def __init__(self, message: str = "Invalid credentials", errors: Optional[List[str]] = None):
        super().__init__(message, errors)


class TokenMissingException(UnauthorizedException):
    def __init__(self, message: str = "Authorization header is required", errors: Optional[List[str]] = None):
        super().__init__(message, errors)


class TokenExpiredException(UnauthorizedException):
    def __init__(self, message: str = "Token has expired", errors: Optional[List[str]] = None):
        super().__init__(message, errors)


class TokenInvalidException(UnauthorizedException):
    def __init__(self, message: str = "Invalid token", errors: Optional[List[str]] = None):
        super().__init__(message, errors)


class ForbiddenException(ApiException):
    """Exception for insufficient role (403)"""
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Not authorized to access this resource", errors: Optional[List[str]] = None):
        super().__init__(message, errors)


class NotFoundException(ApiException):
    """Exception for missing entities (404)"""
    status_code = status.HTTP_404_NOT_FOUND


class InternalServerErrorException(ApiException):
    """Exception for internal server error (500)"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        logger.error(message)
        super().__init__("Server Error", errors)


class MissingBootstrapCredentialsException(Exception):
    """Raised when the first administrator cannot be created for lack of credentials"""

    def __init__(self, message: str = "ADMIN_EMAIL and ADMIN_PASSWORD must be set to create the first administrator"):
        self.message = message
        super().__init__(self.message)
