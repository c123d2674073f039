"""Configuration models and loaders."""

from .config import Config, ExtractionConfig, MonitoringConfig, find_config_file

__all__ = ["Config", "ExtractionConfig", "MonitoringConfig", "find_config_file"]
