from __future__ import annotations


class InvalidColorInput(ValueError):
    """Raised when a value cannot be turned into a color.

    Covers unsupported input shapes (``None``, booleans, numbers, arbitrary
    objects), mappings with missing or non-numeric channels, and strings that
    are neither a supported CSS notation nor a known color name.
    """

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        message = f"Cannot interpret {value!r} as a color"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
