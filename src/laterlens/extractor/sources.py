"""
Document sources: where the tree for an extraction call comes from.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import httpx
import structlog
from bs4 import BeautifulSoup

from .dom import parse_html

logger = structlog.get_logger(__name__)

DEFAULT_USER_AGENT = "LaterLens/0.1 (+content-extraction)"


class HtmlDocumentSource:
    """An in-memory HTML string."""

    def __init__(self, html: str, *, parser: str = "html.parser", url: Optional[str] = None) -> None:
        self.html = html
        self.parser = parser
        self.url = url

    async def load(self) -> BeautifulSoup:
        return parse_html(self.html, self.parser)


class FileDocumentSource:
    """An HTML file on disk, read and parsed off the event loop."""

    def __init__(self, path: str | Path, *, encoding: str = "utf-8", parser: str = "html.parser") -> None:
        self.path = Path(path)
        self.encoding = encoding
        self.parser = parser
        self.url = self.path.resolve().as_uri()

    async def load(self) -> BeautifulSoup:
        return await asyncio.to_thread(self._load_sync)

    def _load_sync(self) -> BeautifulSoup:
        html = self.path.read_text(encoding=self.encoding, errors="replace")
        return parse_html(html, self.parser)


class UrlDocumentSource:
    """A page fetched over HTTP(S)."""

    def __init__(
        self,
        url: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 15.0,
        parser: str = "html.parser",
    ) -> None:
        self.url = url
        self.client = client
        self.timeout = timeout
        self.parser = parser

    async def load(self) -> BeautifulSoup:
        if self.client is not None:
            html = await self._fetch(self.client)
        else:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"User-Agent": DEFAULT_USER_AGENT},
            ) as client:
                html = await self._fetch(client)
        return await asyncio.to_thread(parse_html, html, self.parser)

    async def _fetch(self, client: httpx.AsyncClient) -> str:
        logger.debug("Fetching document", url=self.url)
        response = await client.get(self.url, timeout=self.timeout)
        response.raise_for_status()
        return response.text
