"""
LaterLens - main-content extraction for web page summarization.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config, ExtractionConfig
from .extractor import ContentExtractor, ExtractionResult

__all__ = ["__version__", "Config", "ExtractionConfig", "ContentExtractor", "ExtractionResult"]
