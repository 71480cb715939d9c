"""Generation of the wrapper type family."""

from .generator import emit_classes, write_class_file, write_results_class

__all__ = [
    "emit_classes",
    "write_class_file",
    "write_results_class",
]
