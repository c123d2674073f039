"""
Protocols for the collaborators around the extraction engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from bs4 import BeautifulSoup


@runtime_checkable
class DocumentSource(Protocol):
    """Supplies the document tree for one extraction call."""

    async def load(self) -> BeautifulSoup:
        """Return the parsed document.

        This is the only suspension point of an extraction call.
        """
        ...


@dataclass(slots=True, frozen=True)
class SummaryResult:
    success: bool
    summary: Optional[str] = None
    error: Optional[str] = None


@runtime_checkable
class SummaryProvider(Protocol):
    """Downstream summarization service fed with ``ExtractionResult.summary_input``."""

    async def summarize(self, content: str, *, max_length: int, language: str, style: str) -> SummaryResult:
        ...
