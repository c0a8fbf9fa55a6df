"""Domain errors raised by the identicon pipeline."""


class IdenticonError(ValueError):
    """Base class for all identicon generation errors."""


class InvalidHashFormat(IdenticonError):
    """Hash contains a character that is not a hexadecimal digit."""

    def __init__(self, hash_value: str, position: int) -> None:
        self.hash_value = hash_value
        self.position = position
        super().__init__(
            f"Invalid hex character {hash_value[position]!r} at position {position}"
        )


class InvalidDimensions(IdenticonError):
    """Grid size or pixel width cannot produce an image."""


class InsufficientBitData(IdenticonError):
    """Bit array is too short for the requested grid size."""

    def __init__(self, required: int, available: int, size: int) -> None:
        self.required = required
        self.available = available
        self.size = size
        super().__init__(
            f"Grid size {size} needs {required} bits, hash provides {available}"
        )
