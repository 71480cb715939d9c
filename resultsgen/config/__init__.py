"""Configuration layer: YAML loading and validated settings."""

from .errors import ConfigLoadError, ConfigValidationError, ConfigurationError
from .loader import load_config, load_yaml, parse_config
from .models import DEFAULT_HEADER, DEFAULT_MAX_ARITY, GeneratorConfig

__all__ = [
    "ConfigLoadError",
    "ConfigValidationError",
    "ConfigurationError",
    "DEFAULT_HEADER",
    "DEFAULT_MAX_ARITY",
    "GeneratorConfig",
    "load_config",
    "load_yaml",
    "parse_config",
]
