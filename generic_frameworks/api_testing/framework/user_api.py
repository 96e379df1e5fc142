"""
================================================================================
User API Object
================================================================================

API object wrapping the ReqRes user, login and register endpoints.

Each method issues exactly one request and returns the raw ``httpx.Response``;
status assertions and body validation stay in the tests
(see ``ResponseValidator``).

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional, Union

import allure
import httpx

from .http_client import HttpClient
from .models import CreateUserRequest, LoginRequest, RegisterRequest, UpdateUserRequest


USERS_ENDPOINT = "/api/users"
LOGIN_ENDPOINT = "/api/login"
REGISTER_ENDPOINT = "/api/register"


class UserApi:
    """
    User management endpoints.

    Usage:
        >>> with HttpClient() as client:
        ...     user_api = UserApi(client)
        ...     response = user_api.list_users(page=2)
    """

    def __init__(self, client: HttpClient):
        self.client = client

    @allure.step("List users (page={page})")
    def list_users(self, page: int = 1, per_page: Optional[int] = None) -> httpx.Response:
        params = {"page": page}
        if per_page is not None:
            params["per_page"] = per_page
        return self.client.get(USERS_ENDPOINT, params=params)

    @allure.step("Get user {user_id}")
    def get_user(self, user_id: Union[int, str]) -> httpx.Response:
        return self.client.get(f"{USERS_ENDPOINT}/{user_id}")

    @allure.step("Create user")
    def create_user(self, request: CreateUserRequest) -> httpx.Response:
        return self.client.post(USERS_ENDPOINT, json=request.to_payload())

    @allure.step("Update user {user_id}")
    def update_user(self, user_id: Union[int, str], request: UpdateUserRequest) -> httpx.Response:
        """Full update (PUT)."""
        return self.client.put(f"{USERS_ENDPOINT}/{user_id}", json=request.to_payload())

    @allure.step("Patch user {user_id}")
    def patch_user(self, user_id: Union[int, str], request: UpdateUserRequest) -> httpx.Response:
        """Partial update (PATCH); only the fields set on ``request`` are sent."""
        return self.client.patch(f"{USERS_ENDPOINT}/{user_id}", json=request.to_payload())

    @allure.step("Delete user {user_id}")
    def delete_user(self, user_id: Union[int, str]) -> httpx.Response:
        return self.client.delete(f"{USERS_ENDPOINT}/{user_id}")

    @allure.step("Login")
    def login(self, request: LoginRequest) -> httpx.Response:
        return self.client.post(LOGIN_ENDPOINT, json=request.to_payload())

    @allure.step("Register")
    def register(self, request: RegisterRequest) -> httpx.Response:
        return self.client.post(REGISTER_ENDPOINT, json=request.to_payload())


__all__ = [
    "UserApi",
]
