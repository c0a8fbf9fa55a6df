"""Hex hash to bit array conversion."""

from ..values import byte_count, validate_hash


def extract_bytes(hash_value: str) -> list[int]:
    """Read a hex hash two characters at a time, from the tail to the head.

    Byte ``i`` is the pair starting at ``len(hash) - (i + 1) * 2``, so the
    last pair becomes the first byte. With an odd length the leading
    character is never read.

    Raises:
        InvalidHashFormat: If the hash contains a non-hex character.
    """
    validate_hash(hash_value)
    end = len(hash_value)
    return [
        int(hash_value[end - (i + 1) * 2 : end - i * 2], 16) for i in range(byte_count(hash_value))
    ]


def extract_bits(hash_value: str) -> list[int]:
    """Convert a hex hash into the bit array consumed by the grid renderer.

    Each byte from :func:`extract_bytes` is written as 8 big-endian bits,
    the strings are joined in byte order and the whole sequence is reversed.

    Args:
        hash_value: Hexadecimal string, case-insensitive.

    Returns:
        List of 0/1 ints of length ``8 * (len(hash_value) // 2)``.

    Raises:
        InvalidHashFormat: If the hash contains a non-hex character.
    """
    bit_string = "".join(f"{byte:08b}" for byte in extract_bytes(hash_value))
    bits = [int(ch) for ch in bit_string]
    bits.reverse()
    return bits
