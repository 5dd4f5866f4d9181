"""
List membership and block scoring.

A key defines a "list": the half of the 16-bit universe whose PRP16 image
has its most significant bit clear. Because PRP16 is a bijection, every list
holds exactly 32768 values.

The score of a key against a block is the number of block values on the
majority side of that split. A key that rejects almost every value is as
informative as one that accepts almost every value, so the score is
max(count, n - count).
"""

import numpy as np

from .prp import prp16, prp16_array

MSB = 0x8000


def has_value(key: int, x: int) -> bool:
    """Return True if x is in the list identified by key."""
    return (prp16(x, key) & MSB) == 0


def count_members(key: int, block) -> int:
    """Number of values in block that are members of key's list."""
    return sum(1 for x in block if has_value(key, x))


def score_list(key: int, block) -> int:
    """
    Score a key against a block.

    Args:
        key: 32-bit key
        block: Sequence of 16-bit values

    Returns:
        max(count, n - count), in [ceil(n/2), n]. An empty block scores 0.
    """
    n = len(block)
    count = count_members(key, block)
    return max(count, n - count)


def member_mask(key: int, values) -> np.ndarray:
    """Boolean membership mask over an array of values."""
    return (prp16_array(values, key) & np.uint32(MSB)) == 0


def score_block(key: int, values: np.ndarray) -> int:
    """
    Vectorized score_list().

    Args:
        key: 32-bit key
        values: uint32 array of 16-bit values

    Returns:
        Same value as score_list(key, values)
    """
    n = int(values.shape[0])
    count = int(np.count_nonzero(member_mask(key, values)))
    return max(count, n - count)
