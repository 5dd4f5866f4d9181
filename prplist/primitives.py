"""
Primitive protocol interfaces for the list-membership search.

This module defines protocol interfaces for:
- PRP: Keyed pseudorandom permutation on a small domain
- KeySource: Seedable source of 32-bit candidate keys

Concrete implementations are in prplist/prp.py and prplist/keysource.py.
"""

from typing import Protocol


class PRP(Protocol):
    """
    Keyed Pseudorandom Permutation.

    Properties:
    - Bijective: P is a permutation (one-to-one and onto)
    - Deterministic: the same key always gives the same permutation
    - Efficiently invertible: Can compute P^{-1}(y) given key
    """

    @property
    def domain_size(self) -> int:
        """Size of the domain [0, N)."""
        ...

    def forward(self, x: int) -> int:
        """
        Forward permutation: P(x).

        Args:
            x: Input in [0, N)

        Returns:
            Output in [0, N)
        """
        ...

    def inverse(self, y: int) -> int:
        """
        Inverse permutation: P^{-1}(y).

        Args:
            y: Input in [0, N)

        Returns:
            Output in [0, N) such that P(output) = y
        """
        ...


class KeySource(Protocol):
    """
    Source of candidate keys for the search.

    Each call returns the next key of a reproducible sequence. Tests can
    substitute a fixed sequence.
    """

    def next_key(self) -> int:
        """
        Draw the next key.

        Returns:
            Key in [0, 2^32)
        """
        ...
