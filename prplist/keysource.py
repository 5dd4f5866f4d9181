"""
Seedable key sources for the search.

AESKeySource expands a 64-bit seed into an AES-128 key and nonce with
SHAKE-256, then reads 32-bit keys from the AES-CTR keystream. The same seed
always yields the same key sequence, independently of any global random
state.

SequenceKeySource replays a fixed list of keys, for tests.
"""

import hashlib
import struct

from Crypto.Cipher import AES

KEY_BITS = 32
SEED_LIMIT = 1 << 64

# Keystream bytes fetched per refill (256 keys)
_CHUNK_BYTES = 1024


def derive_seed(seed: int, label: bytes) -> bytes:
    """
    Derive 32 deterministic bytes from an integer seed and a label.

    Args:
        seed: Seed in [0, 2^64)
        label: Domain separation label
    """
    if seed < 0 or seed >= SEED_LIMIT:
        raise ValueError(f"Seed {seed} out of range [0, 2^64)")
    return hashlib.shake_256(struct.pack("<Q", seed) + label).digest(32)


class AESKeySource:
    """
    AES-CTR based key generator.

    Deterministic: same seed produces same sequence.
    """

    def __init__(self, seed: int):
        """
        Initialize with a seed.

        Args:
            seed: Seed in [0, 2^64)
        """
        material = derive_seed(seed, b"keysource")
        self._seed = seed
        self._cipher = AES.new(material[:16], AES.MODE_CTR, nonce=material[16:24])
        self._buffer = b""
        self._pos = 0

    @property
    def seed(self) -> int:
        return self._seed

    def _refill(self) -> None:
        self._buffer = self._cipher.encrypt(bytes(_CHUNK_BYTES))
        self._pos = 0

    def next_key(self) -> int:
        """Get the next 32-bit key."""
        if self._pos + 4 > len(self._buffer):
            self._refill()
        (key,) = struct.unpack_from("<I", self._buffer, self._pos)
        self._pos += 4
        return key


class SequenceKeySource:
    """Key source that returns a fixed sequence of keys."""

    def __init__(self, keys):
        self._keys = list(keys)
        for key in self._keys:
            if key < 0 or key >= (1 << KEY_BITS):
                raise ValueError(f"Key {key} out of range [0, 2^32)")
        self._pos = 0

    def next_key(self) -> int:
        if self._pos >= len(self._keys):
            raise ValueError("Key sequence exhausted")
        key = self._keys[self._pos]
        self._pos += 1
        return key

    def remaining(self) -> int:
        return len(self._keys) - self._pos
