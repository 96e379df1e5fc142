"""
================================================================================
HTTP Client with Allure Integration
================================================================================

A thin httpx client for the API framework featuring:
    - Base URL, timeout and default headers taken from the API environment
    - Connection retries configured on the httpx transport
    - Allure reporting with request/response details and a cURL command
    - Redaction of API keys, tokens and passwords before anything is logged

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import allure
import httpx
from allure_commons.types import AttachmentType
from loguru import logger

from .environments import ApiEnvironment, get_environment


# Maximum response length to include in Allure reports
MAX_RESPONSE_LENGTH = 3000

SENSITIVE_HEADERS = {"authorization", "x-api-key", "cookie", "set-cookie"}
SENSITIVE_BODY_KEYS = ("password", "secret", "token", "api_key", "authorization")
MASK = "***MASKED***"


class HttpClientError(Exception):
    """Base exception for HTTP client errors."""
    pass


class HttpClient:
    """
    HTTP client bound to one API environment.

    Features:
        - Default ``Content-Type: application/json`` and ``x-api-key`` headers
        - Transport-level connection retries (``environment.retries``)
        - Full Allure reporting with request/response details
        - cURL command generation for easy reproduction

    Usage:
        >>> with HttpClient(get_environment("dev")) as client:
        ...     response = client.get("/api/users", params={"page": 1})
        ...     print(response.json())
    """

    def __init__(
        self,
        environment: Optional[ApiEnvironment] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize HTTP client.

        Args:
            environment: API environment. Resolved from TEST_ENV if None.
            transport: Custom httpx transport (e.g. ``httpx.MockTransport``).
                       Defaults to an ``HTTPTransport`` with connection retries.
        """
        self.environment = environment or get_environment()
        self.base_url = self.environment.base_url
        self.timeout = self.environment.timeout_seconds
        self._transport = transport
        self.session: Optional[httpx.Client] = None

    def __enter__(self) -> "HttpClient":
        """Enter context manager - initialize HTTP session."""
        transport = self._transport or httpx.HTTPTransport(retries=self.environment.retries)
        self.session = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            headers=self.default_headers(),
            transport=transport,
        )
        logger.debug(f"HTTP session opened for {self.base_url} ({self.environment.name})")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager - close HTTP session."""
        if self.session:
            self.session.close()
            self.session = None

    def default_headers(self) -> Dict[str, str]:
        """Headers sent with every request."""
        headers = {"Content-Type": "application/json"}
        if self.environment.api_key:
            headers["x-api-key"] = self.environment.api_key
        return headers

    def request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Execute HTTP request and log it to Allure.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, PATCH)
            url: Request URL (relative to base_url)
            **kwargs: Additional arguments passed to httpx.Client.request

        Returns:
            httpx.Response object

        Raises:
            HttpClientError: When used outside the context manager
            httpx.HTTPError: When the transport gives up
        """
        if self.session is None:
            raise HttpClientError(
                "HttpClient must be used within a context manager. "
                "Use 'with HttpClient() as client:'"
            )

        try:
            response = self.session.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise

        logger.info(f"{method} {url} -> {response.status_code}")
        self._log_to_allure(method, url, kwargs, response)
        return response

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Execute GET request."""
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> httpx.Response:
        """Execute POST request."""
        return self.request("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> httpx.Response:
        """Execute PUT request."""
        return self.request("PUT", url, **kwargs)

    def patch(self, url: str, **kwargs: Any) -> httpx.Response:
        """Execute PATCH request."""
        return self.request("PATCH", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        """Execute DELETE request."""
        return self.request("DELETE", url, **kwargs)

    def _log_to_allure(
        self,
        method: str,
        url: str,
        kwargs: Dict[str, Any],
        response: httpx.Response,
    ) -> None:
        """
        Log HTTP request/response to Allure report.

        Attaches:
            - Request URL with query parameters
            - Request headers and body (redacted)
            - cURL command for reproduction
            - Response status and body (truncated if too long)
        """
        full_url = str(response.request.url) if response.request else url
        params = kwargs.get("params")

        status_icon = "✅" if response.status_code < 400 else "❌"
        step_title = f"{status_icon} {method} {url} → {response.status_code}"

        with allure.step(step_title):
            allure.attach(
                full_url,
                name="Request URL",
                attachment_type=AttachmentType.TEXT
            )

            headers = {**self.default_headers(), **kwargs.get("headers", {})}
            safe_headers = self._redact_headers(headers)
            allure.attach(
                json.dumps(safe_headers, ensure_ascii=False, indent=2),
                name="Request Headers",
                attachment_type=AttachmentType.JSON
            )

            safe_body = self._redact_body(kwargs.get("json"))
            if safe_body:
                allure.attach(
                    json.dumps(safe_body, ensure_ascii=False, indent=2),
                    name="Request Body",
                    attachment_type=AttachmentType.JSON
                )

            if params:
                allure.attach(
                    json.dumps(params, ensure_ascii=False, indent=2, default=str),
                    name="Query Params",
                    attachment_type=AttachmentType.JSON
                )

            allure.attach(
                self._build_curl(method, full_url, safe_headers, safe_body),
                name="cURL Command",
                attachment_type=AttachmentType.TEXT
            )

            allure.attach(
                f"{status_icon} {response.status_code}",
                name="Response Status",
                attachment_type=AttachmentType.TEXT
            )

            try:
                response_content = json.dumps(
                    response.json(), ensure_ascii=False, indent=2
                )
            except (json.JSONDecodeError, ValueError):
                response_content = response.text or "<empty>"

            if len(response_content) > MAX_RESPONSE_LENGTH:
                response_content = (
                    f"{response_content[:MAX_RESPONSE_LENGTH]}\n\n"
                    f"... [Truncated, full length: {len(response_content)} chars] ..."
                )

            allure.attach(
                response_content,
                name="Response Body",
                attachment_type=AttachmentType.JSON
            )

    def _redact_headers(self, headers: Dict[str, Any]) -> Dict[str, Any]:
        """Mask sensitive header values before logging."""
        return {
            key: MASK if key.lower() in SENSITIVE_HEADERS else value
            for key, value in headers.items()
        }

    def _redact_body(self, payload: Any) -> Any:
        """Recursively mask sensitive fields in request bodies."""
        if isinstance(payload, dict):
            redacted = {}
            for key, value in payload.items():
                if any(token in key.lower() for token in SENSITIVE_BODY_KEYS):
                    redacted[key] = MASK
                else:
                    redacted[key] = self._redact_body(value)
            return redacted
        if isinstance(payload, list):
            return [self._redact_body(item) for item in payload]
        return payload

    def _build_curl(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Optional[Dict[str, Any]],
    ) -> str:
        """Build a copy-paste ready cURL command from already-redacted parts."""
        parts = [f"curl -X {method}"]

        for key, value in headers.items():
            parts.append(f"-H '{key}: {value}'")

        if body:
            parts.append(f"-d '{json.dumps(body, ensure_ascii=False)}'")

        parts.append(f"'{url}'")

        return " \\\n  ".join(parts)


__all__ = [
    "HttpClient",
    "HttpClientError",
]
