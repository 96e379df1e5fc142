"""
Factory for API objects.

API objects are looked up by class name and built around the ``HttpClient``
the test already holds. A new instance is returned on every call.
"""

from __future__ import annotations

from typing import Any

from generic_frameworks.common.registry import Registry

from .http_client import HttpClient
from .user_api import UserApi


API_REGISTRY: Registry[Any] = Registry("API")
API_REGISTRY.register("UserApi", UserApi)


class ApiFactory:
    """Creates API objects bound to an HTTP client."""

    @staticmethod
    def get_user_api(client: HttpClient) -> UserApi:
        return UserApi(client)

    @staticmethod
    def get_api(api_name: str, client: HttpClient) -> Any:
        """
        Build the API object registered under ``api_name``.

        Raises:
            NotFoundError: ``api_name`` is not registered
        """
        return API_REGISTRY.create(api_name, client)

    @staticmethod
    def available() -> list:
        return API_REGISTRY.names()


__all__ = [
    "API_REGISTRY",
    "ApiFactory",
]
