"""Configuration-related exceptions."""


class ConfigLoadError(Exception):
    """Raised when a YAML config file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class ConfigValidationError(Exception):
    """Raised when config data fails model validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class ConfigurationError(Exception):
    """Raised for an invalid invocation, before any generation work starts."""

    pass
