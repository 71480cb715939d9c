"""Number words and indented text emission."""

from .emitter import INDENT, IndentedWriter
from .errors import UnsupportedValueError
from .numbers import title_case, to_cardinal_word, to_ordinal_word

__all__ = [
    "INDENT",
    "IndentedWriter",
    "UnsupportedValueError",
    "title_case",
    "to_cardinal_word",
    "to_ordinal_word",
]
