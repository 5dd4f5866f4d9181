"""
Key search: random restarts with greedy bit-flip hillclimbing.

procedure Search(block, restarts, hill_iters, seed):
    best = none
    for r = 1 to restarts:
        key = next key from the seeded source
        key, score = Hillclimb(key)
        if best is none or score > best.score: best = (key, score)
    return best

procedure Hillclimb(key):
    score = Score(key)
    repeat up to hill_iters passes:
        for b = 0 to 31:
            cand = key ^ (1 << b)
            if Score(cand) > score: key, score = cand, Score(cand)
        if no bit improved during the pass: stop
    return key, score

Flips are accepted eagerly: a later bit in the same pass is tried against the
key that already carries earlier accepted flips. Ties between restarts keep
the earliest restart.
"""

import concurrent.futures
from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from .keysource import AESKeySource
from .membership import score_block
from .params import DEFAULT_SEED, SearchParams
from .primitives import KeySource

KEY_BITS = 32


@dataclass
class SearchResult:
    """Best key found for one block."""

    key: int
    score: int
    restart_scores: list[int] = field(default_factory=list)  # Best score per restart

    def __repr__(self) -> str:
        return f"SearchResult(key=0x{self.key:08x}, score={self.score})"


def as_values(block) -> np.ndarray:
    """Convert a block of 16-bit values to the array form used for scoring."""
    try:
        values = np.asarray(block, dtype=np.int64)
    except OverflowError:
        raise ValueError("Block values must be in [0, 65536)") from None
    if values.ndim != 1:
        raise ValueError("Block must be one-dimensional")
    if values.size and (values.min() < 0 or values.max() > 0xFFFF):
        raise ValueError("Block values must be in [0, 65536)")
    return values.astype(np.uint32)


def climb_passes(start: int, values: np.ndarray, hill_iters: int) -> Iterator[tuple[int, int]]:
    """
    Run a hillclimb pass by pass.

    Yields (key, score) for the start key, then after every pass that
    improved the score. Stops after hill_iters passes or at the first pass
    with no improvement.
    """
    cur = start
    cur_score = score_block(cur, values)
    yield cur, cur_score

    for _ in range(hill_iters):
        improved = False
        for b in range(KEY_BITS):
            cand = cur ^ (1 << b)
            sc = score_block(cand, values)
            if sc > cur_score:
                cur = cand
                cur_score = sc
                improved = True
        if not improved:
            break
        yield cur, cur_score


def hillclimb(start: int, values: np.ndarray, hill_iters: int) -> tuple[int, int]:
    """
    Greedy first-improvement bit-flip hillclimb from start.

    Args:
        start: Starting 32-bit key
        values: Block as returned by as_values()
        hill_iters: Maximum number of passes

    Returns:
        (key, score) at the local optimum (or after hill_iters passes)
    """
    result = None
    for result in climb_passes(start, values, hill_iters):
        pass
    return result


def _climb_task(args: tuple[int, np.ndarray, int]) -> tuple[int, int]:
    start, values, hill_iters = args
    return hillclimb(start, values, hill_iters)


def search_best_key(
    block,
    params: SearchParams,
    seed: int = DEFAULT_SEED,
    key_source: KeySource | None = None,
    workers: int = 1,
) -> SearchResult:
    """
    Search for the key with the highest score against block.

    Args:
        block: Sequence of 16-bit values
        params: Search parameters
        seed: Seed for the default AESKeySource (ignored if key_source is given)
        key_source: Optional source of starting keys
        workers: Number of worker processes for the restarts (1 = in process)

    Returns:
        SearchResult with the best key, its score and per-restart scores.
        Identical for identical block, params and seed, for any worker count.
    """
    if workers < 1:
        raise ValueError("workers must be at least 1")
    if key_source is None:
        key_source = AESKeySource(seed)

    values = as_values(block)

    # Starting keys are drawn up front so the sequence never depends on workers
    starts = [key_source.next_key() for _ in range(params.restarts)]
    tasks = [(start, values, params.hill_iters) for start in starts]

    if workers == 1 or len(tasks) == 1:
        climbs = [_climb_task(t) for t in tasks]
    else:
        with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as ex:
            climbs = list(ex.map(_climb_task, tasks))

    best_key, best_score = climbs[0]
    for key, score in climbs[1:]:
        if score > best_score:
            best_key, best_score = key, score

    return SearchResult(
        key=best_key,
        score=best_score,
        restart_scores=[score for _, score in climbs],
    )
