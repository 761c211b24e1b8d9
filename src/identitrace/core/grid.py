"""Occupancy grid derivation from hashed text.

The text is hashed with a digest long enough for the requested grid size. The
digest bytes are cut into rows covering the left half of the grid (plus the
middle column for odd sizes), each row is mirrored to give the grid its
left-right symmetry, and a byte marks its cell as filled when it is even.

Size 6 grids use sha1 rather than ripemd160, which OpenSSL 3 builds of
hashlib may not provide. Both digests are 20 bytes long, but size 6
identicons differ from those of generators hashing with ripemd160. The
algorithm is fixed so the same text gives the same grid on every machine.
"""

import hashlib
from collections.abc import Sequence

from identitrace.domain import OccupancyGrid
from identitrace.exceptions import InvalidGridSizeError

MIN_SIZE = 4
MAX_SIZE = 10

# Digest algorithm per grid size. Size 6 needs 18 bytes; sha1 gives 20.
HASHES: dict[int, str] = {
    4: "md5",
    5: "md5",
    6: "sha1",
    7: "sha3_224",
    8: "sha3_256",
    9: "sha3_384",
    10: "sha3_512",
}


def appropriate_hash(size: int) -> str:
    """Name of the hashlib algorithm used for a grid size.

    Raises:
        InvalidGridSizeError: If the size is not supported

    Examples:
        >>> appropriate_hash(5)
        'md5'
        >>> appropriate_hash(8)
        'sha3_256'
    """
    try:
        return HASHES[size]
    except KeyError:
        raise InvalidGridSizeError(
            size, f"supported sizes are {MIN_SIZE} to {MAX_SIZE}"
        ) from None


def hash_input(text: str, size: int) -> bytes:
    """Digest of the UTF-8 encoded text with the algorithm for the size."""
    return hashlib.new(appropriate_hash(size), text.encode("utf-8")).digest()


def mirror_row(row: Sequence[int], odd: int = 1) -> list[int]:
    """Mirror a half row around its last element (odd) or its right edge (even).

    Examples:
        >>> mirror_row([1, 2, 3])
        [1, 2, 3, 2, 1]
        >>> mirror_row([1, 2], odd=0)
        [1, 2, 2, 1]
    """
    row = list(row)
    return row + row[: len(row) - odd][::-1]


def square_grid(digest: bytes, size: int) -> list[int]:
    """Lay the digest bytes out as a row-major size×size grid of byte values."""
    odd = size % 2
    chunk = size // 2 + odd
    rows = [digest[i:i + chunk] for i in range(0, len(digest), chunk)][:size]
    if len(rows) < size or len(rows[-1]) < chunk:
        raise InvalidGridSizeError(
            size, f"digest of {len(digest)} bytes is too short"
        )

    values: list[int] = []
    for row in rows:
        values.extend(mirror_row(row, odd))
    return values


def mark_present(values: Sequence[int]) -> list[int]:
    """Presence flags: 1 for even byte values, 0 for odd ones."""
    return [1 - value % 2 for value in values]


def build_grid(text: str, size: int) -> OccupancyGrid:
    """Foreground occupancy grid of the identicon for a text.

    Args:
        text: Input text
        size: Number of cells per grid side (4 to 10)

    Returns:
        OccupancyGrid of the filled cells

    Raises:
        InvalidGridSizeError: If the size is not supported
    """
    digest = hash_input(text, size)
    flags = mark_present(square_grid(digest, size))
    return OccupancyGrid.from_flags(flags, size)
