"""Symmetric identicon grid entity."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from ..errors import InsufficientBitData, InvalidDimensions


def required_bits(size: int) -> int:
    """Number of bits the fill loop reads for a grid of ``size``.

    The last read is row ``size - 1``, column ``size // 2 - 1``.
    """
    half = size // 2
    if half == 0:
        return 0
    return (size - 1) * size + half


@dataclass(frozen=True, slots=True)
class Grid:
    """Square matrix of filled (1) and empty (0) cells.

    Every row is mirrored around the vertical axis. For odd sizes the
    middle column is never written and stays empty.
    """

    size: int
    cells: tuple[tuple[int, ...], ...]

    @classmethod
    def from_bits(cls, bits: Sequence[int], size: int) -> "Grid":
        """Fold a bit array into a symmetric grid.

        Row ``r`` takes ``bits[r * size + c]`` for ``c < size // 2`` and
        copies it to column ``size - 1 - c``.

        Raises:
            InvalidDimensions: If size is not positive.
            InsufficientBitData: If ``bits`` is shorter than the fill loop reads.
        """
        if size <= 0:
            raise InvalidDimensions(f"size must be positive, got {size}")

        needed = required_bits(size)
        if len(bits) < needed:
            raise InsufficientBitData(needed, len(bits), size)

        rows = []
        for r in range(size):
            row = [0] * size
            for c in range(size // 2):
                bit = bits[r * size + c]
                row[c] = bit
                row[size - 1 - c] = bit
            rows.append(tuple(row))
        return cls(size=size, cells=tuple(rows))

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, col = position
        return self.cells[row][col]

    def flat(self) -> list[int]:
        """Cells in row-major order."""
        return [cell for row in self.cells for cell in row]

    def filled(self) -> Iterator[tuple[int, int]]:
        """Yield ``(row, col)`` of every filled cell in row-major order."""
        for i, cell in enumerate(self.flat()):
            if cell == 1:
                yield i // self.size, i % self.size

    @property
    def filled_count(self) -> int:
        return sum(self.flat())

    def is_symmetric(self) -> bool:
        """Check the horizontal mirror invariant."""
        return all(
            row[c] == row[self.size - 1 - c] for row in self.cells for c in range(self.size // 2)
        )
