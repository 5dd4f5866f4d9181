"""
Reading u16 data files and splitting them into blocks.

A data file is a flat sequence of little-endian unsigned 16-bit values. A
trailing odd byte is ignored.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np

VALUE_SIZE = 2


def decode_u16_le(data: bytes) -> np.ndarray:
    """Decode little-endian u16 values, dropping a trailing odd byte."""
    usable = len(data) - (len(data) % VALUE_SIZE)
    return np.frombuffer(data[:usable], dtype="<u2").astype(np.uint32)


def read_u16_le_file(path: Path) -> np.ndarray:
    """Read a whole file as little-endian u16 values."""
    return decode_u16_le(Path(path).read_bytes())


def split_blocks(values: np.ndarray, block_len: int, max_blocks: int) -> list[np.ndarray]:
    """
    Split values into consecutive non-overlapping blocks.

    Args:
        values: Decoded u16 values
        block_len: Values per block
        max_blocks: Upper bound on the number of blocks returned

    Returns:
        min(max_blocks, len(values) // block_len) blocks of block_len values.
        Leftover values that do not fill a block are dropped.
    """
    if block_len < 1:
        raise ValueError("block_len must be at least 1")
    if max_blocks < 1:
        raise ValueError("max_blocks must be at least 1")
    if len(values) < block_len:
        raise ValueError("File too small for block length")

    num_blocks = min(max_blocks, len(values) // block_len)
    return [values[i * block_len : (i + 1) * block_len] for i in range(num_blocks)]
