"""
Configuration management for LaterLens using Pydantic.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

# One character longer than the truncation marker.
MIN_CONTENT_LIMIT = 31


def _to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


# --- Nested Configuration Models ---


class ExtractionConfig(BaseModel):
    """Options controlling main-content extraction for summarization."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_content_length: int = Field(
        default=8000, ge=MIN_CONTENT_LIMIT, description="Upper bound on the processed text length."
    )
    min_content_length: int = Field(default=100, ge=0, description="Shortest processed text considered valid.")
    max_paragraphs: int = Field(default=20, ge=1, description="Maximum number of paragraphs to keep.")
    min_sentence_length: int = Field(default=10, ge=1, description="Shortest paragraph, in characters, to keep.")
    include_headings: bool = Field(default=True, description="Emit the 'Main Topics' section.")
    include_lists: bool = Field(default=True, description="Emit the 'Key Points' section.")
    include_quotes: bool = Field(default=True, description="Emit the 'Notable Quotes' section.")
    detect_language: bool = Field(default=True, description="Detect the language of the processed text.")
    parser: str = Field(default="html.parser", description="BeautifulSoup tree builder used to parse documents.")
    fetch_timeout: float = Field(default=15.0, gt=0, description="HTTP timeout, in seconds, for URL sources.")

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> "ExtractionConfig":
        """
        Return a new config with ``overrides`` applied on top of this one.

        Keys may be given in snake_case or in camelCase (``maxContentLength``).
        """
        if not overrides:
            return self
        data = self.model_dump()
        for key, value in overrides.items():
            data[_to_snake(key)] = value
        return ExtractionConfig.model_validate(data)


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_level: str = Field(default="INFO", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to console.")
    json_logs: bool = Field(default=False, description="Render console logs as JSON.")
    metrics_enabled: bool = Field(default=True, description="Record Prometheus metrics for extractions.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "LaterLens"
    version: str = "0.1.0"
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="LATERLENS_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for name in ("laterlens.yaml", "laterlens.yml"):
        path = current_dir / name
        if path.exists():
            return path
    return None

