"""
================================================================================
API Testing Pytest Configuration
================================================================================

Shared fixtures for API automation tests.

Fixtures:
    - api_environment: Active API environment (TEST_ENV, default dev)
    - http_client: Configured HTTP client for API requests
    - user_api: UserApi built through ApiFactory
    - new_user_payload: Unique create-user payload

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import uuid
from typing import Generator

import pytest

from generic_frameworks.api_testing.framework import ApiEnvironment, ApiFactory, CreateUserRequest, HttpClient, UserApi, get_environment


# =============================================================================
# Session-Scoped Fixtures (Shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def api_environment() -> ApiEnvironment:
    """
    Active API environment.

    Session-scoped to ensure configuration is resolved only once.
    """
    return get_environment()


# =============================================================================
# Function-Scoped Fixtures (Fresh for each test)
# =============================================================================

@pytest.fixture
def http_client(api_environment: ApiEnvironment) -> Generator[HttpClient, None, None]:
    """
    Provide configured HTTP client for API requests.

    Usage:
        def test_example(http_client):
            response = http_client.get("/api/users/2")
            assert response.status_code == 200
    """
    with HttpClient(api_environment) as client:
        yield client


@pytest.fixture
def user_api(http_client: HttpClient) -> UserApi:
    return ApiFactory.get_user_api(http_client)


@pytest.fixture
def unique_id() -> str:
    """
    Generate unique identifier for test isolation.

    Use this to create test data that won't conflict with other tests
    running in parallel.
    """
    return f"autotest_{uuid.uuid4().hex[:8]}"


@pytest.fixture
def new_user_payload(unique_id: str) -> CreateUserRequest:
    return CreateUserRequest(name=f"User {unique_id}", job="QA Engineer")


# =============================================================================
# Allure Reporting Hooks
# =============================================================================

def pytest_exception_interact(node, call, report):
    """Attach additional info on test failure."""
    import allure

    if report.failed:
        allure.attach(
            str(call.excinfo.value),
            name="Error Details",
            attachment_type=allure.attachment_type.TEXT
        )
