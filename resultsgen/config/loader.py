"""Read generator settings from an optional YAML file."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import ConfigLoadError, ConfigValidationError
from .models import GeneratorConfig


def load_yaml(path: str | Path) -> dict:
    """Read a config file and return its top-level mapping.

    An empty file yields an empty mapping so every setting keeps its default.

    Raises:
        ConfigLoadError: If the file is missing, unreadable, not YAML, or its
            root is not a mapping.
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"Config file not found: {path}", str(path))
    if not path.is_file():
        raise ConfigLoadError(f"Not a file: {path}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file: {e}", str(path)) from e

    return _settings_mapping(text, str(path))


def _settings_mapping(text: str, source: str) -> dict:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {source}: {e}", source) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"{source} must hold a mapping of settings, got {type(data).__name__}", source
        )
    return data


def parse_config(path: str | Path) -> GeneratorConfig:
    """Load a config file into a validated GeneratorConfig.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed.
        ConfigValidationError: If a setting is out of range or mistyped.
    """
    try:
        return GeneratorConfig.model_validate(load_yaml(path))
    except ValidationError as e:
        raise _to_config_error(e) from e


def load_config(path: str | Path | None = None, max_arity: int | None = None) -> GeneratorConfig:
    """Build the effective config from an optional file and CLI override.

    Args:
        path: Optional path to a YAML config file. Defaults apply when None.
        max_arity: Optional override for the file's max_arity.
    """
    config = parse_config(path) if path is not None else GeneratorConfig()
    try:
        return config.with_max_arity(max_arity)
    except ValidationError as e:
        raise _to_config_error(e) from e


def _to_config_error(e: ValidationError) -> ConfigValidationError:
    errors = [
        {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in e.errors()
    ]
    return ConfigValidationError(f"Config validation failed with {len(errors)} error(s)", errors)
