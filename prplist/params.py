"""
Parameters for the key search.

Key parameters:
- restarts: Number of random starting keys (one hillclimb per start)
- hill_iters: Maximum number of bit-flip passes per hillclimb

Tradeoffs:
- Work per block is at most restarts * (1 + 32 * hill_iters) score evaluations
- hill_iters = 0 reduces the search to pure random sampling
- Most climbs converge in a few passes, so large hill_iters rarely costs much
"""

from dataclasses import dataclass

# Seed used by the command line run for block 0
DEFAULT_SEED = 0xC0FFEE123456789


@dataclass(frozen=True)
class SearchParams:
    """Parameters for random-restart hillclimbing."""

    restarts: int = 200  # Number of random initial keys
    hill_iters: int = 6  # Hillclimb passes per restart

    def __post_init__(self):
        if self.restarts < 1:
            raise ValueError("restarts must be at least 1")
        if self.hill_iters < 0:
            raise ValueError("hill_iters must be non-negative")

    @property
    def max_evaluations(self) -> int:
        """Upper bound on score evaluations for one block."""
        return self.restarts * (1 + 32 * self.hill_iters)

    def __repr__(self) -> str:
        return f"SearchParams(restarts={self.restarts}, hill_iters={self.hill_iters})"
