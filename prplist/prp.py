"""
PRP16: keyed 16-bit permutation built from a 4-round Feistel network.

The 16-bit input is split into two 8-bit halves (L = high byte, R = low byte)
and each round computes:

    t = L ^ F(R, key, i)
    L, R = R, t

The round function F need not be invertible: a Feistel step is always a
bijection, so PRP16(., key) is a permutation of [0, 65536) for every 32-bit
key. Round i consumes key byte i.

F is a multiply-xorshift mixer, not a cryptographic function. It only
provides diffusion.
"""

import numpy as np

NUM_ROUNDS = 4
DOMAIN_SIZE = 1 << 16
KEY_MASK = 0xFFFFFFFF
MIX_CONSTANT = 0x45D9F3B


def round_function(r: int, key: int, round_idx: int) -> int:
    """
    Round function F(r, key, i) on 8-bit halves.

    Args:
        r: Right half in [0, 256)
        key: 32-bit key
        round_idx: Round index in [0, 4)

    Returns:
        8-bit output
    """
    # Python ints: numpy scalars would overflow in the multiplies
    x = int(r) ^ ((int(key) >> (round_idx * 8)) & 0xFF)
    x = (x * MIX_CONSTANT) & KEY_MASK
    x ^= x >> 16
    x = (x * MIX_CONSTANT) & KEY_MASK
    x ^= x >> 16
    return x & 0xFF


def prp16(x: int, key: int) -> int:
    """Forward permutation PRP16(x, key)."""
    x = int(x)
    left = (x >> 8) & 0xFF
    right = x & 0xFF
    for i in range(NUM_ROUNDS):
        t = left ^ round_function(right, key, i)
        left = right
        right = t
    return (left << 8) | right


def prp16_inverse(y: int, key: int) -> int:
    """Inverse permutation: rounds are undone in reverse order."""
    y = int(y)
    left = (y >> 8) & 0xFF
    right = y & 0xFF
    for i in range(NUM_ROUNDS - 1, -1, -1):
        prev_right = left
        prev_left = right ^ round_function(left, key, i)
        left = prev_left
        right = prev_right
    return (left << 8) | right


def round_tables(key: int) -> np.ndarray:
    """
    Tabulate F(., key, i) for all 256 half-values and every round.

    Returns:
        uint32 array of shape (NUM_ROUNDS, 256)
    """
    r = np.arange(256, dtype=np.uint32)
    mul = np.uint32(MIX_CONSTANT)
    tables = np.empty((NUM_ROUNDS, 256), dtype=np.uint32)
    for i in range(NUM_ROUNDS):
        # uint32 array arithmetic wraps mod 2^32
        x = r ^ np.uint32((key >> (i * 8)) & 0xFF)
        x = x * mul
        x ^= x >> np.uint32(16)
        x = x * mul
        x ^= x >> np.uint32(16)
        tables[i] = x & np.uint32(0xFF)
    return tables


def prp16_array(values, key: int) -> np.ndarray:
    """
    Vectorized PRP16 over an array of 16-bit values.

    Bit-identical to calling prp16() on each element.

    Args:
        values: Array-like of ints in [0, 65536)
        key: 32-bit key

    Returns:
        uint32 array of outputs, same shape as values
    """
    v = np.asarray(values, dtype=np.uint32)
    tables = round_tables(key)
    left = (v >> np.uint32(8)) & np.uint32(0xFF)
    right = v & np.uint32(0xFF)
    for i in range(NUM_ROUNDS):
        t = left ^ tables[i][right]
        left = right
        right = t
    return (left << np.uint32(8)) | right


class PRP16:
    """
    PRP16 bound to a single key.

    Implements the PRP protocol over the domain [0, 65536).
    """

    def __init__(self, key: int):
        """
        Initialize PRP16.

        Args:
            key: 32-bit key in [0, 2^32)
        """
        if key < 0 or key > KEY_MASK:
            raise ValueError(f"Key {key} out of range [0, 2^32)")
        self._key = key

    @property
    def key(self) -> int:
        return self._key

    @property
    def domain_size(self) -> int:
        """Size of the domain [0, 65536)."""
        return DOMAIN_SIZE

    def forward(self, x: int) -> int:
        if x < 0 or x >= DOMAIN_SIZE:
            raise ValueError(f"Input {x} out of range [0, {DOMAIN_SIZE})")
        return prp16(x, self._key)

    def inverse(self, y: int) -> int:
        if y < 0 or y >= DOMAIN_SIZE:
            raise ValueError(f"Input {y} out of range [0, {DOMAIN_SIZE})")
        return prp16_inverse(y, self._key)

    def __repr__(self) -> str:
        return f"PRP16(key=0x{self._key:08x})"
