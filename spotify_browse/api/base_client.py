"""
Base API client providing the authenticated GET used by every browse resource.
Includes async HTTP session handling, token caching, transport retries, and response decoding.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Iterable, Optional
import aiohttp
import backoff
from pydantic import TypeAdapter, ValidationError
from spotify_browse.utils.query_encoder import QueryPair, to_query_string

logger = logging.getLogger(__name__)

class APIError(Exception):
    """Base exception for API errors."""
    pass

class AuthenticationError(APIError):
    """Exception raised when authentication fails."""
    pass

class HttpError(APIError):
    """Exception raised for a non-2xx response."""

    def __init__(self, status: int, body: str, url: Optional[str] = None):
        self.status = status
        self.body = body
        self.url = url
        super().__init__(f"HTTP {status} for {url or 'request'}: {body[:200]}")

class DecodeError(APIError):
    """Exception raised when a response body does not match the expected shape."""

    def __init__(self, message: str, path: Optional[str] = None, body: Any = None):
        self.path = path
        self.body = body
        super().__init__(message)

TRANSPORT_ERRORS = (aiohttp.ClientConnectionError, asyncio.TimeoutError)

class ResourceDispatcher(ABC):
    """Performs authenticated GETs and decodes the JSON response."""

    @abstractmethod
    async def get_with_token(
        self,
        path: str,
        query: Iterable[QueryPair] = (),
        model: Any = None,
        unwrap_key: Optional[str] = None
    ) -> Any:
        """
        GET ``path`` with a bearer token and decode the body.

        Args:
            path: Resource path relative to the API base URL
            query: Ordered query pairs, sent as given
            model: Pydantic model (or any type pydantic can validate) for the result;
                None returns the parsed JSON unchanged
            unwrap_key: Name of the envelope field holding the result, if any

        Raises:
            HttpError: On a non-2xx response
            DecodeError: If the body is not JSON or does not fit ``model``
            AuthenticationError: If no token can be obtained
        """
        pass

class BaseAPIClient(ResourceDispatcher):
    """Base class for Web API clients backed by an aiohttp session."""

    def __init__(self, base_url: str, timeout: int = 30, max_tries: int = 3):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.max_tries = max(1, max_tries)
        self.session: Optional[aiohttp.ClientSession] = None
        self._auth_token: Optional[str] = None
        self._token_expires_at: Optional[datetime] = None
        self._token_lock = asyncio.Lock()

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self):
        """Ensure HTTP session is created."""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self.session = aiohttp.ClientSession(timeout=timeout)

    async def close(self):
        """Close the HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()

    @abstractmethod
    async def authenticate(self) -> str:
        """Authenticate with the API and return access token."""
        pass

    async def _get_auth_token(self) -> str:
        """Get valid authentication token, refreshing if necessary."""
        async with self._token_lock:
            if (self._auth_token is None or
                self._token_expires_at is None or
                datetime.now() >= self._token_expires_at):
                self._auth_token = await self.authenticate()

            return self._auth_token

    def _get_auth_headers(self) -> Dict[str, str]:
        """Get authentication headers. Override in subclasses."""
        return {}

    def _invalidate_token(self):
        self._auth_token = None
        self._token_expires_at = None

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _fetch_json(self, path: str, query: Iterable[QueryPair]) -> Any:
        """Issue one GET and return the parsed JSON body."""
        await self._ensure_session()
        await self._get_auth_token()

        url = self.build_url(path)
        params = list(query)
        logger.debug(f"GET {url}?{to_query_string(params)}")

        async with self.session.get(url, params=params, headers=self._get_auth_headers()) as response:
            try:
                body = await response.text()
            except UnicodeDecodeError as e:
                raw = await response.read()
                if 200 <= response.status < 300:
                    logger.error(f"Response from {url} is not valid {response.charset or 'utf-8'} text")
                    raise DecodeError(f"Response is not valid text: {e}", path=path, body=raw) from e
                body = raw.decode("utf-8", errors="replace")

            if response.status == 401:
                # Force a fresh token on the next call
                self._invalidate_token()

            if not 200 <= response.status < 300:
                logger.error(f"GET {url} failed with status {response.status}")
                raise HttpError(response.status, body, str(response.url))

        if not body:
            return {}
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            logger.error(f"Response from {url} is not valid JSON: {e}")
            raise DecodeError(f"Response is not valid JSON: {e}", path=path, body=body)

    async def get_with_token(
        self,
        path: str,
        query: Iterable[QueryPair] = (),
        model: Any = None,
        unwrap_key: Optional[str] = None
    ) -> Any:
        """GET a resource with the bearer token and decode it into ``model``."""
        fetch = backoff.on_exception(
            backoff.expo,
            TRANSPORT_ERRORS,
            max_tries=self.max_tries,
            logger=logger
        )(self._fetch_json)

        try:
            data = await fetch(path, list(query))
        except TRANSPORT_ERRORS as e:
            logger.error(f"HTTP request failed: {e!r}")
            raise APIError(f"Request failed: {e!r}") from e
        except aiohttp.ClientError as e:
            logger.error(f"HTTP request failed: {e}")
            raise APIError(f"Request failed: {e}") from e

        return self.decode(data, model=model, unwrap_key=unwrap_key, path=path)

    @staticmethod
    def decode(data: Any, model: Any = None, unwrap_key: Optional[str] = None, path: Optional[str] = None) -> Any:
        """Unwrap ``unwrap_key`` from the envelope and validate the result against ``model``."""
        if unwrap_key is not None:
            if not isinstance(data, dict) or unwrap_key not in data:
                raise DecodeError(f"Response has no '{unwrap_key}' field", path=path, body=data)
            data = data[unwrap_key]

        if model is None:
            return data

        try:
            return TypeAdapter(model).validate_python(data)
        except ValidationError as e:
            logger.error(f"Response from {path} does not match {getattr(model, '__name__', model)}")
            raise DecodeError(f"Invalid response for {path}: {e}", path=path, body=data) from e
