"""
PRP16 list-membership key search.

For a block of 16-bit values, searches the 32-bit key space of a keyed
16-bit Feistel permutation for the key whose membership predicate (MSB of
the permuted value is clear) puts the largest share of the block on one side
of an exact 50/50 split of the universe.

Modules:
- primitives: Protocol interfaces (PRP, KeySource)
- prp: Round function and the 4-round Feistel permutation PRP16
- membership: Membership predicate and block scoring
- keysource: Seeded key generators
- params: Search parameters
- search: Random-restart bit-flip hillclimbing
- blocks: Reading u16 files and splitting them into blocks
- report: Per-block and aggregate results
- cli: Command line entry point (prplist-search)
"""

from .params import SearchParams, DEFAULT_SEED
from .prp import PRP16, round_function, prp16, prp16_inverse, prp16_array
from .membership import has_value, count_members, score_list, score_block
from .keysource import AESKeySource, SequenceKeySource
from .search import SearchResult, hillclimb, search_best_key

__version__ = "0.1.0"
__all__ = [
    "SearchParams",
    "DEFAULT_SEED",
    "PRP16",
    "round_function",
    "prp16",
    "prp16_inverse",
    "prp16_array",
    "has_value",
    "count_members",
    "score_list",
    "score_block",
    "AESKeySource",
    "SequenceKeySource",
    "SearchResult",
    "hillclimb",
    "search_best_key",
]
