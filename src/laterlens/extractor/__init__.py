"""
LaterLens Content Extraction Module

Finds the main content region of a web document and turns it into a clean,
length-bounded text for summarization:

1. Tree Cleaner: drops scripts, ads, navigation and widgets from a clone
2. Main Content Locator: semantic tags, scoring, text density, structure
3. Structured Extractor: headings, paragraphs, lists, quotes, image captions
4. Content Processor: formatting, whitespace cleanup, language, truncation
5. Quality Validator: thresholds, issues, warnings and a quality score
6. Fallback Extractor: body text, then title and description
"""

from .cleaner import TreeCleaner
from .exceptions import (
    ContentValidationError,
    DocumentLoadError,
    ExtractionError,
    NoContentFoundError,
    StructuredExtractionError,
)
from .fallback import FallbackExtractor
from .language_detector import LanguageDetector
from .locator import (
    MainContentLocator,
    ScoringStrategy,
    SemanticTagStrategy,
    StructuralStrategy,
    TextDensityStrategy,
)
from .manager import ContentExtractor
from .models import (
    CandidateSource,
    ContentCandidate,
    ExtractionMetadata,
    ExtractionResult,
    FallbackResult,
    ProcessedContent,
    StructuredContent,
    StructureStats,
    ValidationResult,
)
from .processor import ContentProcessor
from .protocols import DocumentSource, SummaryProvider, SummaryResult
from .scorer import ElementScorer
from .sources import FileDocumentSource, HtmlDocumentSource, UrlDocumentSource
from .structured import StructuredExtractor
from .validator import QualityValidator

__all__ = [
    "CandidateSource",
    "ContentCandidate",
    "ContentExtractor",
    "ContentProcessor",
    "ContentValidationError",
    "DocumentLoadError",
    "DocumentSource",
    "ElementScorer",
    "ExtractionError",
    "ExtractionMetadata",
    "ExtractionResult",
    "FallbackExtractor",
    "FallbackResult",
    "FileDocumentSource",
    "HtmlDocumentSource",
    "LanguageDetector",
    "MainContentLocator",
    "NoContentFoundError",
    "ProcessedContent",
    "QualityValidator",
    "ScoringStrategy",
    "SemanticTagStrategy",
    "StructuralStrategy",
    "StructuredContent",
    "StructuredExtractionError",
    "StructuredExtractor",
    "StructureStats",
    "SummaryProvider",
    "SummaryResult",
    "TextDensityStrategy",
    "TreeCleaner",
    "UrlDocumentSource",
    "ValidationResult",
]
