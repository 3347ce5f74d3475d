import time
import logging
from typing import Any, Callable, Dict, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0  # seconds
DEFAULT_RETRIES = 3
DEFAULT_RETRY_DELAY = 1.0  # seconds

# auth failures will not succeed on retry
NON_RETRYABLE_STATUSES = (401, 403)

# a repeated POST can create the same resource twice
RETRYABLE_METHODS = ("GET", "PUT", "DELETE")


class ApiError(Exception):
    def __init__(self, message: str, status: int = 500, code: str = "UNKNOWN_ERROR"):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code

    def __repr__(self):
        return f"ApiError(status={self.status}, code={self.code!r}, message={self.message!r})"


class ApiGateway:
    """
    Thin wrapper around requests for talking to the interview prep API.

    Adds the JSON and X-API-Key headers, applies a per-request timeout,
    refuses non-JSON responses (e.g. an HTML fallback page), and retries
    idempotent requests with a fixed delay except on 401/403. POST is sent once.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = DEFAULT_RETRIES,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.retries = retries
        self.retry_delay = retry_delay
        self.session = session or requests.Session()
        self._sleep = sleep

    def build_headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        if extra:
            headers.update(extra)
        return headers

    def request(self, endpoint: str, method: str = "GET", json: Any = None,
                headers: Optional[Dict[str, str]] = None, params: Optional[dict] = None) -> Any:
        """Return the decoded JSON body or raise ApiError once retries are exhausted"""
        attempts_left = self.retries if method.upper() in RETRYABLE_METHODS else 0
        while True:
            try:
                return self._send(endpoint, method, json, headers, params)
            except ApiError as e:
                logger.error(f"API Error: {method} {endpoint} -> {e.status} {e.message}")
                if attempts_left <= 0 or e.status in NON_RETRYABLE_STATUSES:
                    raise
                logger.info(f"Retrying API request: {endpoint} ({attempts_left} retries left)")
                attempts_left -= 1
                self._sleep(self.retry_delay)

    def _send(self, endpoint, method, json, headers, params):
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"API Request: {method} {endpoint}")

        try:
            response = self.session.request(
                method,
                url,
                json=json,
                params=params,
                headers=self.build_headers(headers),
                timeout=self.timeout,
            )
        except requests.Timeout:
            raise ApiError("Request timeout - please try again", status=408, code="TIMEOUT")
        except requests.ConnectionError:
            raise ApiError("Network error - please check your connection", status=0, code="NETWORK_ERROR")
        except requests.RequestException as e:
            raise ApiError(str(e) or "An unexpected error occurred", status=500, code="UNKNOWN_ERROR")

        logger.debug(f"API Response: {response.status_code} {response.reason}")

        if not response.ok:
            raise ApiError(_error_message(response), status=response.status_code, code="HTTP_ERROR")

        content_type = response.headers.get("Content-Type", "")
        if "application/json" not in content_type.lower():
            raise ApiError(
                f"Expected JSON response but received '{content_type or 'no content type'}'",
                status=response.status_code,
                code="INVALID_RESPONSE",
            )

        try:
            return response.json()
        except ValueError:
            raise ApiError("Response body is not valid JSON", status=response.status_code, code="INVALID_RESPONSE")

    def get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        return self.request(endpoint, "GET", params=params)

    def post(self, endpoint: str, data: Any) -> Any:
        return self.request(endpoint, "POST", json=data)

    def put(self, endpoint: str, data: Any) -> Any:
        return self.request(endpoint, "PUT", json=data)

    def delete(self, endpoint: str) -> Any:
        return self.request(endpoint, "DELETE")

    def health_check(self) -> Any:
        return self.get("/health")

    def api_health_check(self) -> Any:
        return self.get("/api/health")

    def validate_environment(self) -> dict:
        issues = []
        if not self.api_key or self.api_key == "your_api_key_here":
            issues.append("API key is not properly configured")
        if not self.base_url:
            issues.append("Base URL is not configured")
        return {"valid": not issues, "issues": issues}

    def check_status(self) -> dict:
        """Probe server health, API health and API-key authentication"""
        status = {"server": False, "api": False, "authentication": False, "issues": []}

        try:
            self.health_check()
            status["server"] = True
        except ApiError:
            status["issues"].append("Server is not responding")

        try:
            self.api_health_check()
            status["api"] = True
        except ApiError:
            status["issues"].append("API endpoints are not accessible")

        try:
            self.get("/api/dashboard/stats")
            status["authentication"] = True
        except ApiError as e:
            if e.status == 401:
                status["issues"].append("API key authentication failed")
            else:
                status["issues"].append("Authentication test failed")

        return status


def _error_message(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(data, dict):
        return data.get("error") or data.get("message") or f"HTTP {response.status_code}"
    return f"HTTP {response.status_code}"
