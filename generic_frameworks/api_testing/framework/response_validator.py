# ================================================================================
# Response Validator
# ================================================================================
#
# This module validates user API payloads against the shapes in models.py and
# the business rules of the paginated list endpoint.
#
# Key Features:
#   - Required property, type and format checks for users
#   - Pagination metadata and page-bounds checks for user lists
#   - Auth, error and mutation response checks
#   - Fail-fast: the first violated rule raises, nothing is aggregated
#   - Allure steps and loguru output for every validation
#
# ================================================================================

from __future__ import annotations

import functools
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable, Iterable, Optional

import allure
from loguru import logger


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_PATTERN = re.compile(r"^https?://.+")

USER_FIELDS = ("id", "email", "first_name", "last_name", "avatar")
USER_STRING_FIELDS = ("email", "first_name", "last_name", "avatar")
PAGINATION_FIELDS = ("page", "per_page", "total", "total_pages")
USER_LIST_FIELDS = PAGINATION_FIELDS + ("data", "support")
SUPPORT_FIELDS = ("url", "text")


class ResponseValidationError(AssertionError):
    """
    Base class for response validation failures.

    Subclasses ``AssertionError`` so pytest reports a rejected payload as a
    failed assertion.

    Attributes:
        field: The property the failure is about, when there is one
        index: Position in ``data`` for failures raised while validating a list
    """

    def __init__(self, message: str, field: Optional[str] = None, index: Optional[int] = None):
        super().__init__(message)
        self.field = field
        self.index = index


class SchemaError(ResponseValidationError):
    """A required property is missing."""


class FieldTypeError(ResponseValidationError):
    """A property has the wrong JSON type."""


class FormatError(ResponseValidationError):
    """A string property does not match its expected format."""


class BusinessRuleError(ResponseValidationError):
    """A value is well-typed but out of its allowed range."""


def _is_number(value: Any) -> bool:
    # JSON booleans decode to bool, which is an int subclass
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_object(value: Any, what: str) -> None:
    if not isinstance(value, Mapping):
        raise FieldTypeError(
            f"Expected {what} to be an object, got {type(value).__name__}"
        )


def _require_keys(value: Mapping, keys: Iterable[str], what: str) -> None:
    for key in keys:
        if key not in value:
            raise SchemaError(f"{what} is missing required property '{key}'", field=key)


def _require_number(value: Mapping, key: str) -> None:
    if not _is_number(value[key]):
        raise FieldTypeError(
            f"Expected '{key}' to be a number, got {type(value[key]).__name__}",
            field=key,
        )


def _require_string(value: Mapping, key: str) -> None:
    if not isinstance(value[key], str):
        raise FieldTypeError(
            f"Expected '{key}' to be a string, got {type(value[key]).__name__}",
            field=key,
        )


def _require_non_empty_string(value: Mapping, key: str) -> None:
    _require_string(value, key)
    if not value[key]:
        raise BusinessRuleError(f"Expected '{key}' to be a non-empty string", field=key)


def _require_match(value: Mapping, key: str, pattern: "re.Pattern[str]", what: str) -> None:
    if not pattern.match(value[key]):
        raise FormatError(f"'{key}' is not a valid {what}: {value[key]!r}", field=key)


def _require_rule(condition: bool, message: str, field: str) -> None:
    if not condition:
        raise BusinessRuleError(message, field=field)


def _require_timestamp(value: Mapping, key: str) -> None:
    _require_string(value, key)
    text = value[key].strip()
    if text.endswith("Z"):
        text = f"{text[:-1]}+00:00"
    try:
        datetime.fromisoformat(text)
    except ValueError as e:
        raise FormatError(
            f"'{key}' is not a valid timestamp: {value[key]!r}", field=key
        ) from e


def _reported(name: str) -> Callable:
    """Log the outcome of a validator; failures are re-raised untouched."""

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(value: Any) -> Any:
            try:
                result = func(value)
            except ResponseValidationError as e:
                logger.warning(f"❌ {name} failed: {e}")
                raise
            logger.debug(f"✅ {name} passed")
            return result

        return wrapper

    return decorator


class ResponseValidator:
    """
    Validates API response bodies against the user API contract.

    Every method takes the decoded JSON body, raises a
    ``ResponseValidationError`` subclass on the first violation and returns
    the body unchanged when it is accepted, so callers may read its fields
    without re-checking them.

    Example:
        body = user_api.list_users(page=1).json()
        ResponseValidator.validate_user_list(body)
        users = UserListResponse.from_dict(body)
    """

    @staticmethod
    @allure.step("Validate user object")
    @_reported("User validation")
    def validate_user(user: Any) -> Mapping:
        """
        Validate a single user object.

        Raises:
            SchemaError: a required property is missing
            FieldTypeError: ``id`` is not numeric or a name/email/avatar is not a string
            FormatError: ``email`` or ``avatar`` is malformed
        """
        _require_object(user, "user")
        _require_keys(user, USER_FIELDS, "User")

        _require_number(user, "id")
        for key in USER_STRING_FIELDS:
            _require_string(user, key)

        _require_match(user, "email", EMAIL_PATTERN, "email address")
        _require_match(user, "avatar", URL_PATTERN, "http(s) URL")
        return user

    @staticmethod
    @allure.step("Validate paginated user list")
    @_reported("User list validation")
    def validate_user_list(response: Any) -> Mapping:
        """
        Validate a paginated user list, then every user in it.

        Pagination rules: ``page > 0``, ``per_page > 0``, ``total >= 0``,
        ``total_pages >= 0`` and ``page <= total_pages`` whenever
        ``total_pages > 0``. A user failure is re-raised as the same error
        class with its index in the message and on ``error.index``.
        """
        _require_object(response, "user list response")
        _require_keys(response, USER_LIST_FIELDS, "User list response")

        if not isinstance(response["data"], (list, tuple)):
            raise FieldTypeError(
                f"Expected 'data' to be an array, got {type(response['data']).__name__}",
                field="data",
            )
        support = response["support"]
        _require_object(support, "'support'")
        _require_keys(support, SUPPORT_FIELDS, "Support metadata")

        for key in PAGINATION_FIELDS:
            _require_number(response, key)
        for key in SUPPORT_FIELDS:
            _require_string(support, key)

        page = response["page"]
        total_pages = response["total_pages"]
        _require_rule(page > 0, f"'page' must be greater than 0, got {page}", "page")
        _require_rule(
            response["per_page"] > 0,
            f"'per_page' must be greater than 0, got {response['per_page']}",
            "per_page",
        )
        _require_rule(
            response["total"] >= 0,
            f"'total' must not be negative, got {response['total']}",
            "total",
        )
        _require_rule(
            total_pages >= 0,
            f"'total_pages' must not be negative, got {total_pages}",
            "total_pages",
        )
        if total_pages > 0:
            _require_rule(
                page <= total_pages,
                f"'page' ({page}) exceeds 'total_pages' ({total_pages})",
                "page",
            )

        for index, user in enumerate(response["data"]):
            try:
                ResponseValidator.validate_user(user)
            except ResponseValidationError as e:
                raise type(e)(
                    f"User validation failed at index {index}: {e}",
                    field=e.field,
                    index=index,
                ) from e
        return response

    @staticmethod
    @allure.step("Validate auth response")
    @_reported("Auth response validation")
    def validate_auth_response(response: Any) -> Mapping:
        """
        Validate a login/register response.

        ``token`` must be a non-empty string; ``id`` (registration only) must
        be a positive number when present.
        """
        _require_object(response, "auth response")
        _require_keys(response, ("token",), "Auth response")
        _require_non_empty_string(response, "token")

        if "id" in response:
            _require_number(response, "id")
            _require_rule(
                response["id"] > 0,
                f"'id' must be greater than 0, got {response['id']}",
                "id",
            )
        return response

    @staticmethod
    @allure.step("Validate error response")
    @_reported("Error response validation")
    def validate_error_response(response: Any) -> Mapping:
        """Validate an error body: ``error`` must be a non-empty string."""
        _require_object(response, "error response")
        _require_keys(response, ("error",), "Error response")
        _require_non_empty_string(response, "error")
        return response

    @staticmethod
    @allure.step("Validate user mutation response")
    @_reported("User mutation response validation")
    def validate_user_mutation_response(response: Any) -> Mapping:
        """
        Validate a create/update response.

        ``name`` and ``job`` are required strings. At least one of
        ``createdAt``/``updatedAt`` must be present and each present one must
        parse as an ISO-8601 timestamp. ``id`` is optional but, unlike
        ``validate_user``, must be a non-empty *string* here: the create
        endpoint returns server-generated string ids.
        """
        _require_object(response, "user mutation response")
        _require_keys(response, ("name", "job"), "User mutation response")
        _require_string(response, "name")
        _require_string(response, "job")

        timestamps = [key for key in ("createdAt", "updatedAt") if key in response]
        if not timestamps:
            raise SchemaError(
                "User mutation response must contain 'createdAt' or 'updatedAt'",
                field="createdAt",
            )
        for key in timestamps:
            _require_timestamp(response, key)

        if "id" in response:
            _require_non_empty_string(response, "id")
        return response


__all__ = [
    "ResponseValidator",
    "ResponseValidationError",
    "SchemaError",
    "FieldTypeError",
    "FormatError",
    "BusinessRuleError",
]
