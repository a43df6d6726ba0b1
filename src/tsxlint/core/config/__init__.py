"""Configuration loading (bundled YAML + project YAML + TSXLINT_* env)."""
from .manager import ENV_PREFIX, PROJECT_CONFIG_DIRNAME, ConfigManager
from .settings import LintSettings, ScanSettings

__all__ = ["ConfigManager", "ENV_PREFIX", "PROJECT_CONFIG_DIRNAME", "LintSettings", "ScanSettings"]
