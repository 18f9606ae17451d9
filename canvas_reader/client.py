"""
Canvas API Client

Provides a small REST client for the Canvas API initialized from environment
variables. Requests are synchronous; failed calls are logged and degrade to
``None`` so a single broken endpoint never aborts a whole page.
"""

import os
import re
import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import requests

from .exceptions import APIError, AuthenticationError, ConfigurationError, ValidationError

logger = logging.getLogger("canvas_reader.client")

# Global client instance cache
_canvas_client: Optional["CanvasClient"] = None

# Valid domain pattern
DOMAIN_PATTERN = re.compile(r'^[a-zA-Z0-9][a-zA-Z0-9\-\.]*[a-zA-Z0-9]$')

PER_PAGE = 100
DEFAULT_TIMEOUT = 30
DEFAULT_MAX_PAGES = 50

Params = Union[Mapping[str, Any], Iterable[Tuple[str, Any]], None]


def _validate_domain(domain: str) -> None:
    """Validate Canvas domain format."""
    if not domain:
        raise ConfigurationError(
            "CANVAS_DOMAIN not set.\n"
            "Set it (or CANVAS_BASE_URL) in your .env file or environment:\n"
            "  CANVAS_DOMAIN=canvas.instructure.com"
        )
    if not DOMAIN_PATTERN.match(domain):
        raise ValidationError(f"Invalid Canvas domain format: {domain}")


def _validate_token(token: str) -> None:
    """Validate Canvas API token."""
    if not token:
        raise AuthenticationError(
            "CANVAS_API_TOKEN not set.\n"
            "Set it in your .env file or environment:\n"
            "  CANVAS_API_TOKEN=your_token_here\n"
            "Generate a token at: https://<your-domain>/profile/settings"
        )


def is_absolute(path: str) -> bool:
    return path.startswith("http://") or path.startswith("https://")


def encode_query(params: Params) -> str:
    """
    Join params into a query string, keeping insertion order.

    Values are not percent-escaped, so only identifiers, dates and fixed
    keywords may be passed as values.
    """
    if not params:
        return ""
    pairs = params.items() if isinstance(params, Mapping) else params
    return "&".join(f"{key}={value}" for key, value in pairs)


class CanvasClient:
    """Synchronous Canvas REST client with lazy session creation."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        domain: Optional[str] = None,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """
        Initialize Canvas client.

        Args:
            base_url: Full API base URL (e.g., 'https://canvas.example.edu/api/v1')
            token: Canvas API token
            domain: Canvas domain, used to build the base URL when none is given
            timeout: Per-request timeout in seconds

        If not provided, reads CANVAS_BASE_URL, CANVAS_DOMAIN and CANVAS_API_TOKEN
        from the environment. Credentials are validated on first request.
        """
        self.domain = domain or os.getenv("CANVAS_DOMAIN")
        self.base_url = (base_url or os.getenv("CANVAS_BASE_URL") or "").rstrip("/")
        self.token = token or os.getenv("CANVAS_API_TOKEN")
        self.timeout = timeout
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """
        Get or create the HTTP session.

        Raises:
            ConfigurationError: If no base URL or domain is configured
            ValidationError: If domain format is invalid
            AuthenticationError: If no token is configured
        """
        if self._session is None:
            if not self.base_url:
                _validate_domain(self.domain)
                self.base_url = f"https://{self.domain}/api/v1"
            _validate_token(self.token)

            self._session = requests.Session()
            self._session.headers.update({
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/json",
            })
            logger.info(f"Canvas API client initialized with base URL: {self.base_url}")

        return self._session

    def build_url(self, path: str, params: Params = None) -> str:
        """Resolve path against the base URL and append the query string."""
        url = path if is_absolute(path) else f"{self.base_url}{path}"
        query = encode_query(params)
        if query:
            url += ("&" if "?" in url else "?") + query
        return url

    def _send(self, path: str, params: Params, method: str) -> requests.Response:
        session = self.session
        method = method.upper()
        if method == "GET":
            url = self.build_url(path, params)
            logger.debug(f"GET {url}")
            response = session.get(url, timeout=self.timeout)
        else:
            url = self.build_url(path)
            logger.debug(f"{method} {url}")
            data = dict(params.items() if isinstance(params, Mapping) else params or [])
            response = session.request(method, url, data=data, timeout=self.timeout)

        if not response.ok:
            raise APIError(
                f"{method} {url} failed with HTTP {response.status_code}",
                status_code=response.status_code,
                response=response.text,
            )
        return response

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        content_type = response.headers.get("Content-Type", "")
        if "json" in content_type:
            return response.json()
        return response.text

    def request(self, path: str, params: Params = None, method: str = "GET") -> Any:
        """
        Issue one request and return parsed JSON, raw text, or None on failure.

        Args:
            path: API path relative to the base URL, or an absolute URL
            params: Query parameters (GET) or form fields (other methods)
            method: HTTP method

        Raises:
            AuthenticationError: If no token is configured
        """
        try:
            return self._decode(self._send(path, params, method))
        except (requests.RequestException, APIError, ValueError) as e:
            logger.error(f"Canvas request failed for {path}: {e}")
            return None

    def request_all(
        self,
        path: str,
        params: Params = None,
        max_pages: int = DEFAULT_MAX_PAGES,
    ) -> List[Dict[str, Any]]:
        """
        GET a list endpoint, following rel="next" links.

        Pages beyond max_pages are dropped with a warning. A failure on any page
        keeps whatever was collected before it.
        """
        results: List[Dict[str, Any]] = []
        url: Optional[str] = path
        page_params = params
        pages = 0

        while url:
            if pages >= max_pages:
                logger.warning(f"Stopped paginating {path} after {max_pages} pages")
                break
            try:
                response = self._send(url, page_params, "GET")
                data = self._decode(response)
            except (requests.RequestException, APIError, ValueError) as e:
                logger.error(f"Canvas request failed for {url}: {e}")
                break

            if not isinstance(data, list):
                logger.error(f"Expected a list from {url}, got {type(data).__name__}")
                break
            results.extend(data)
            pages += 1

            url = response.links.get("next", {}).get("url")
            page_params = None  # next links already carry the query

        logger.debug(f"Fetched {len(results)} records from {path} in {pages} page(s)")
        return results


def get_canvas_client(
    base_url: Optional[str] = None,
    token: Optional[str] = None,
) -> CanvasClient:
    """
    Get the global Canvas client instance.

    Args:
        base_url: Optional API base URL override
        token: Optional Canvas API token override

    Returns:
        CanvasClient instance
    """
    global _canvas_client

    # If new credentials provided, create new client
    if base_url or token:
        return CanvasClient(base_url=base_url, token=token)

    # Return cached global client
    if _canvas_client is None:
        _canvas_client = CanvasClient()

    return _canvas_client
