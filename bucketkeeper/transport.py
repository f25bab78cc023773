"""
HTTP transport for the GitBucket REST API.

Handles HTTP communication, token authentication, tolerant decoding of
GitBucket's response bodies and error response parsing.
"""

import json
from abc import ABC, abstractmethod
from typing import Any

import httpx

from bucketkeeper.exceptions import ApiError, NotFoundError, ResponseDecodeError
from bucketkeeper.logging import log_http_request, log_http_response


class Transport(ABC):
    """Issues authenticated JSON requests against an API root."""

    @abstractmethod
    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """
        Make a request and return the decoded JSON response.

        Raises:
            NotFoundError: On 404 responses
            ApiError: On any other failed request
            ResponseDecodeError: If a successful response body cannot be decoded
        """
        pass

    def close(self) -> None:
        """Release any resources held by the transport."""
        pass

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class HTTPTransport(Transport):
    """
    httpx-based transport for GitBucket.

    GitBucket mimics the GitHub v3 API but sometimes sends a JSON document
    encoded as a JSON string. Such bodies are decoded twice; anything that
    still cannot be decoded raises ResponseDecodeError.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        user_agent: str = "bucketkeeper",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: API root (e.g., "https://gitbucket.example.com/api/v3/")
            token: Personal access token
            timeout: Request timeout in seconds
            user_agent: Value of the User-Agent header
            transport: Optional httpx transport, used to intercept requests in tests
        """
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "Authorization": f"token {token}",
                "User-Agent": user_agent,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        path = path.lstrip("/")
        log_http_request(method, f"{self.base_url}{path}", dict(self._client.headers), body)

        try:
            response = self._client.request(method, path, params=params, json=body)
        except httpx.RequestError as e:
            raise ApiError(0, f"{method} {path} failed: {e}") from e

        # elapsed is only set once the response stream is closed
        response.close()
        log_http_response(
            response.status_code,
            str(response.url),
            response.elapsed.total_seconds() * 1000,
        )

        if response.status_code >= 400:
            raise self._parse_error_response(response)

        return self._decode(response)

    def _decode(self, response: httpx.Response) -> Any:
        """
        Decode a successful response body.

        Args:
            response: HTTP response with a success status

        Returns:
            Decoded JSON, or None for an empty body
        """
        if not response.content.strip():
            return None

        try:
            data = response.json()
            if isinstance(data, str):
                # Escaped response: the JSON document was sent as a JSON string
                data = json.loads(data)
        except ValueError as e:
            raise ResponseDecodeError(
                f"Could not decode response from {response.url}: {e}",
                response.text,
            ) from e

        return data

    def _parse_error_response(self, response: httpx.Response) -> ApiError:
        """
        Parse an error response into an ApiError.

        Args:
            response: HTTP response with error status

        Returns:
            NotFoundError for 404, ApiError otherwise
        """
        try:
            data = response.json()
        except ValueError:
            data = None

        message = f"HTTP {response.status_code}"
        if isinstance(data, dict) and data.get("message"):
            message = str(data["message"])

        if response.status_code == 404:
            return NotFoundError(response.status_code, message, response.text)
        return ApiError(response.status_code, message, response.text)
