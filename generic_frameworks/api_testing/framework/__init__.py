"""
================================================================================
API Testing Framework
================================================================================

API object automation framework for the ReqRes user API.

Modules:
    - environments: API environment records selected by TEST_ENV
    - http_client: httpx client with Allure logging and redaction
    - models: User / UserListResponse / request payload dataclasses
    - response_validator: Fail-fast structural and business-rule validation
    - user_api: User, login and register endpoints
    - api_factory: Name-based API object construction

Author: Automation Team
License: MIT
================================================================================
"""

from .api_factory import ApiFactory
from .environments import ApiEnvironment, get_environment
from .http_client import HttpClient, HttpClientError
from .models import (
    CreateUserRequest,
    LoginRequest,
    RegisterRequest,
    Support,
    UpdateUserRequest,
    User,
    UserListResponse,
)
from .response_validator import (
    BusinessRuleError,
    FieldTypeError,
    FormatError,
    ResponseValidationError,
    ResponseValidator,
    SchemaError,
)
from .user_api import UserApi

__all__ = [
    "ApiEnvironment",
    "ApiFactory",
    "BusinessRuleError",
    "CreateUserRequest",
    "FieldTypeError",
    "FormatError",
    "HttpClient",
    "HttpClientError",
    "LoginRequest",
    "RegisterRequest",
    "ResponseValidationError",
    "ResponseValidator",
    "SchemaError",
    "Support",
    "UpdateUserRequest",
    "User",
    "UserApi",
    "UserListResponse",
    "get_environment",
]
