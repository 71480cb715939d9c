"""Exceptions raised while producing output files."""

import errno

from ..validators.base import ValidationResult


class GenerationError(Exception):
    """Base exception for generation failures."""

    pass


class InvalidPlanError(GenerationError):
    """Raised when the planned test suite fails its consistency checks."""

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(
            f"Test plan failed validation with {len(result.errors)} error(s)"
        )


class OutputNotWrittenError(GenerationError, FileNotFoundError):
    """Raised when a target file is missing or empty after writing."""

    def __init__(self, path: object):
        self.path = str(path)
        super().__init__(errno.ENOENT, "Output file missing or empty after write", self.path)
