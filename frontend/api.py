"""
HTTP client for the API server, built on a shared requests session.
"""

from __future__ import annotations

from typing import Any, Optional

import requests

from frontend.config import ClientSettings, get_client_settings
from frontend.errors import ApiError

REQUEST_TIMEOUT = 30  # seconds


class ApiClient:
    """
    Thin wrapper that resolves paths against a base URL and decodes JSON.

    With credentials enabled the session keeps cookies set by the server and
    sends them on later requests; otherwise every request starts with an
    empty cookie jar.
    """

    def __init__(
        self,
        base_url: str,
        *,
        with_credentials: bool = True,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.with_credentials = with_credentials
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, **params: Any) -> Any:
        """
        Issue a GET request and return the decoded JSON body.

        Raises:
            ApiError: On transport failure, a non-2xx status, or a body that
                is not valid JSON.
        """
        url = self.url_for(path)
        if not self.with_credentials:
            self.session.cookies.clear()
        try:
            response = self.session.get(
                url, params=params or None, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise ApiError(
                f"GET {url} failed: {exc}", status_code=exc.response.status_code
            ) from exc
        except requests.RequestException as exc:
            raise ApiError(f"GET {url} failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(
                f"GET {url} returned invalid JSON", status_code=response.status_code
            ) from exc

    def close(self) -> None:
        self.session.close()


def create_api_client(settings: ClientSettings | None = None) -> ApiClient:
    settings = settings or get_client_settings()
    return ApiClient(
        settings.main_service_url,
        with_credentials=settings.with_credentials,
        timeout=settings.request_timeout,
    )
