"""
ContentExtractor: the entry point of the extraction engine.

Loads a document, then runs Locator → Structured Extractor → Content
Processor → Quality Validator. Any failure along the way is recovered by the
Fallback Extractor, so callers always get a result carrying a quality value.
"""

from __future__ import annotations

import time
from typing import Any, Mapping, Optional

import structlog
from bs4 import BeautifulSoup

from ..config.config import ExtractionConfig
from ..observability.metrics import MetricsRecorder
from .cleaner import TreeCleaner
from .exceptions import ContentValidationError, DocumentLoadError, ExtractionError, NoContentFoundError
from .fallback import FallbackExtractor
from .locator import MainContentLocator
from .models import ExtractionMetadata, ExtractionResult
from .processor import ContentProcessor
from .protocols import DocumentSource
from .scorer import ElementScorer
from .sources import HtmlDocumentSource
from .structured import StructuredExtractor
from .validator import QualityValidator

logger = structlog.get_logger(__name__)


class ContentExtractor:
    """
    Extracts summarization-ready text from arbitrary web documents.

    Instances hold only immutable configuration and stateless components, so
    one instance can serve concurrent extractions of independent documents.
    """

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        *,
        metrics: Optional[MetricsRecorder] = None,
        locator: Optional[MainContentLocator] = None,
        fallback_extractor: Optional[FallbackExtractor] = None,
    ) -> None:
        self.config = config or ExtractionConfig()
        self.metrics = metrics or MetricsRecorder()
        self.cleaner = TreeCleaner()
        self.locator = locator or MainContentLocator(ElementScorer(), metrics=self.metrics)
        self.structured_extractor = StructuredExtractor(self.cleaner)
        self.processor = ContentProcessor()
        self.validator = QualityValidator()
        self.fallback_extractor = fallback_extractor or FallbackExtractor()
        self.logger = logger.bind(component="ContentExtractor")

    async def extract_for_summarization(
        self,
        source: DocumentSource,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> ExtractionResult:
        """
        Load ``source`` and extract its main content.

        Args:
            source: Supplier of the document tree
            overrides: Subset of configuration fields merged over the defaults

        Returns:
            ExtractionResult with content on success, or a fallback otherwise

        Raises:
            DocumentLoadError: the document tree could not be obtained
        """
        config = self.config.merged(overrides)
        url = getattr(source, "url", None)

        try:
            document = await source.load()
        except Exception as e:
            self.logger.error("Failed to load document", url=url, error=str(e), error_type=type(e).__name__)
            raise DocumentLoadError(f"Could not load document: {e}") from e

        with structlog.contextvars.bound_contextvars(document_url=url):
            return self.extract_document(document, config)

    async def extract_html(self, html: str, overrides: Optional[Mapping[str, Any]] = None) -> ExtractionResult:
        parser = self.config.merged(overrides).parser
        return await self.extract_for_summarization(HtmlDocumentSource(html, parser=parser), overrides)

    def extract_document(self, document: BeautifulSoup, config: Optional[ExtractionConfig] = None) -> ExtractionResult:
        """Run the pipeline on an already loaded document. Never raises."""
        config = config or self.config
        start_time = time.perf_counter()

        try:
            result = self._extract_primary(document, config)
        except ExtractionError as e:
            self.logger.warning("Content extraction failed", error_kind=e.kind, error=str(e))
            result = ExtractionResult.failed(str(e), self.fallback_extractor.extract(document, config))
        except Exception as e:
            self.logger.error(
                "Unexpected extraction error",
                event_type="extraction_unexpected_error",
                error=str(e),
                error_type=type(e).__name__,
            )
            result = ExtractionResult.failed(str(e), self.fallback_extractor.extract(document, config))

        self.metrics.record_extraction(
            outcome="success" if result.success else "fallback",
            source=result.source,
            quality=result.quality,
            duration=time.perf_counter() - start_time,
        )
        return result

    def _extract_primary(self, document: BeautifulSoup, config: ExtractionConfig) -> ExtractionResult:
        tree = self.cleaner.clean(document)

        candidate = self.locator.locate(tree)
        if candidate is None:
            raise NoContentFoundError()

        structured = self.structured_extractor.extract(candidate.node, config)
        processed = self.processor.process(structured, config)

        validation = self.validator.validate(processed, config)
        if not validation.is_valid:
            raise ContentValidationError(validation)

        metadata = ExtractionMetadata(
            original_length=structured.original_length,
            processed_length=len(processed.text),
            language=processed.language,
            structure=processed.structure,
            quality=validation.quality,
            extracted_at=int(time.time() * 1000),
            source=candidate.source.value,
            confidence=candidate.confidence,
        )

        self.logger.info(
            "Extraction completed",
            source=metadata.source,
            score=candidate.score,
            confidence=candidate.confidence,
            quality=validation.quality,
            warnings=list(validation.warnings),
            text_length=metadata.processed_length,
        )
        return ExtractionResult.succeeded(processed.text, metadata)
