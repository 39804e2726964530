"""HTTP client for the design-system documentation site."""

import json
import logging

import httpx
from bs4 import BeautifulSoup

from ui_components_server.core.errors import ParseError, RetrievalError
from ui_components_server.models.config.server import ServerConfig

logger = logging.getLogger(__name__)

# Bodies attached to errors are cut to keep tool responses readable
MAX_ERROR_BODY = 500


class DocsSiteClient:
    """Fetches JSON and HTML resources relative to the configured base URL."""

    def __init__(
        self,
        config: ServerConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            config: Server settings providing ``base_url`` and ``request_timeout``
            transport: Optional httpx transport, used to plug in a mock in tests
        """
        self.config = config
        self.base_url = config.base_url
        self.transport = transport

    def resolve_url(self, path: str) -> str:
        """Join ``path`` to the base URL; absolute http(s) URLs pass through."""
        if path.startswith(("http://", "https://")):
            return path
        if not self.base_url:
            raise RetrievalError(
                "Documentation site base URL is not configured (set UI_LIB_BASE_URL)"
            )
        return f"{self.base_url}{path}"

    async def fetch_text(self, path: str) -> str:
        """Retrieve ``path`` and return the response body as text.

        Raises:
            RetrievalError: On transport failure or a non-success status
        """
        url = self.resolve_url(path)

        try:
            async with httpx.AsyncClient(
                timeout=self.config.request_timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(url)
        except httpx.TimeoutException:
            raise RetrievalError(f"Request timeout: {url}")
        except httpx.RequestError as e:
            raise RetrievalError(f"Cannot connect to {url}: {e}")

        if not response.is_success:
            body = response.text[:MAX_ERROR_BODY] if response.text else None
            raise RetrievalError(
                f"HTTP {response.status_code}: {response.reason_phrase} ({url})",
                status_code=response.status_code,
                body=body,
            )

        logger.debug(f"Fetched {url} ({len(response.content)} bytes)")
        return response.text

    async def fetch_json(self, path: str) -> dict | list:
        """Retrieve ``path`` and decode it as JSON.

        Raises:
            RetrievalError: On transport failure or a non-success status
            ParseError: If the body is not valid JSON
        """
        text = await self.fetch_text(path)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(
                f"Invalid JSON from {self.resolve_url(path)}: {e}",
                details={"body": text[:MAX_ERROR_BODY]},
            )

    async def fetch_document(self, path: str) -> BeautifulSoup:
        """Retrieve ``path`` and parse it as an HTML document.

        Raises:
            RetrievalError: On transport failure or a non-success status
            ParseError: If the body cannot be parsed as markup
        """
        text = await self.fetch_text(path)
        try:
            return BeautifulSoup(text, "html.parser")
        except Exception as e:
            raise ParseError(
                f"Failed to parse HTML from {self.resolve_url(path)}: {e}",
                details={"body": text[:MAX_ERROR_BODY]},
            )
