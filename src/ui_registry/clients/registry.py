"""Registry HTTP Client"""

import asyncio
from typing import Any

import httpx
from returns.result import Failure, Result, Success

from ui_registry.core import get_logger
from ui_registry.core.config import DEFAULT_REGISTRY_URL, Settings
from ui_registry.core.errors import ErrorKind, RegistryError, report_error
from ui_registry.core.json import JSONParseError, parse_json

logger = get_logger(__name__)


class RegistryFetcher:
    """
    Fetches registry documents concurrently.
    A batch either yields every document or fails as a whole.
    """

    def __init__(
        self,
        registry_url: str = DEFAULT_REGISTRY_URL,
        proxy: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize registry fetcher.

        Args:
            registry_url: Base URL of the registry host
            proxy: Optional HTTPS proxy URL for all requests
            timeout: Request timeout in seconds, None to wait indefinitely
        """
        self.registry_url = registry_url.rstrip("/")
        self.proxy = proxy
        self.timeout = timeout
        self._client = httpx.AsyncClient(proxy=proxy, timeout=timeout, follow_redirects=True)

        logger.info("client_init", url=self.registry_url, proxy=bool(proxy))

    @classmethod
    def from_settings(cls, settings: Settings) -> "RegistryFetcher":
        """Build a fetcher from explicit settings."""
        return cls(
            registry_url=settings.registry_url,
            proxy=settings.https_proxy,
            timeout=settings.registry_timeout,
        )

    def url_for(self, path: str) -> str:
        """Absolute URL of a registry-relative path."""
        return f"{self.registry_url}/registry/{path}"

    async def fetch(self, paths: list[str]) -> Result[list[Any], RegistryError]:
        """
        Fetch registry documents concurrently.

        All requests run to completion. The first failure in path order
        fails the whole batch and is reported once.

        Args:
            paths: Registry-relative paths (e.g. "styles/default/button.json")

        Returns:
            Decoded documents in path order, or the batch failure
        """
        results = await asyncio.gather(*(self._fetch_one(path) for path in paths))

        for result in results:
            if isinstance(result, Failure):
                report_error(result.failure())
                return result

        logger.debug("registry_fetch", paths=len(paths))
        return Success([result.unwrap() for result in results])

    async def _fetch_one(self, path: str) -> Result[Any, RegistryError]:
        url = self.url_for(path)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            return Failure(
                RegistryError(
                    kind=ErrorKind.TRANSPORT,
                    message=f"Failed to fetch from {url}. {e}",
                    url=url,
                )
            )

        if not response.is_success:
            return Failure(
                RegistryError.from_status(url, response.status_code, response.reason_phrase)
            )

        try:
            return Success(parse_json(response.content))
        except JSONParseError as e:
            return Failure(
                RegistryError(
                    kind=ErrorKind.VALIDATION,
                    message=f"Failed to fetch from {url}. {e}",
                    url=url,
                    status=response.status_code,
                )
            )

    async def aclose(self) -> None:
        """Close HTTP client"""
        await self._client.aclose()

    async def __aenter__(self) -> "RegistryFetcher":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
