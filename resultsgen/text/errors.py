"""Text-layer exceptions."""


class UnsupportedValueError(ValueError):
    """Raised when a number has no entry in the word lookup tables."""

    def __init__(self, value: object, kind: str = "cardinal"):
        self.value = value
        self.kind = kind
        super().__init__(
            f"No {kind} word for {value!r}; supported values are 1 to 20. "
            "Extend the lookup table to support larger arities."
        )
