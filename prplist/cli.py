"""
Command line: search PRP16 list keys for consecutive blocks of a u16 data file.

Usage:
    prplist-search data.bin                      # 50 blocks of 64 values
    prplist-search data.bin --block-len 128      # Custom block length
    prplist-search data.bin --blocks 10 -v       # Fewer blocks, per-block timing
    prplist-search data.bin --workers 8          # Parallel restarts
"""

import argparse
import sys
import time

from .params import DEFAULT_SEED, SearchParams
from .search import search_best_key
from .blocks import read_u16_le_file, split_blocks
from .keysource import SEED_LIMIT
from .report import BlockReport, summarize, format_time


# =============================================================================
# Main
# =============================================================================


# Default parameters
DEFAULT_BLOCK_LEN = 64
DEFAULT_BLOCKS = 50
DEFAULT_RESTARTS = 250
DEFAULT_HILL_ITERS = 8

EXIT_READ_ERROR = 2
EXIT_TOO_SMALL = 3


def run_search(
    path: str,
    block_len: int,
    max_blocks: int,
    params: SearchParams,
    seed: int,
    workers: int = 1,
    verbose: bool = False,
) -> int:
    """Run the key search over the blocks of a file and print results."""
    try:
        data = read_u16_le_file(path)
    except OSError as e:
        print(f"Cannot read: {path} ({e.strerror})", file=sys.stderr)
        return EXIT_READ_ERROR

    try:
        blocks = split_blocks(data, block_len, max_blocks)
    except ValueError as e:
        print(f"{e}.", file=sys.stderr)
        return EXIT_TOO_SMALL

    print(f"u16 count: {len(data)}")
    print(f"blockLen: {block_len}, blocksToTest: {max_blocks}")
    print(f"search: restarts={params.restarts} hillIters={params.hill_iters}")

    print(f"\n{'Blocks':─^70}")
    reports = []
    for bi, block in enumerate(blocks):
        start = time.perf_counter()
        result = search_best_key(block, params, seed=(seed + bi) % SEED_LIMIT, workers=workers)
        report = BlockReport(
            index=bi,
            block_len=block_len,
            result=result,
            seconds=time.perf_counter() - start,
        )
        reports.append(report)

        print(report.format_line())
        if verbose:
            print(
                f"    restarts: min={min(result.restart_scores)} "
                f"max={max(result.restart_scores)}  time={format_time(report.seconds)}"
            )

    summary = summarize(reports)
    print(f"\n{'Summary':─^70}")
    for line in summary.format_lines():
        print(line)
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Search PRP16 list keys that best split blocks of u16 data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  prplist-search data.bin                     # 50 blocks of 64 values
  prplist-search data.bin --block-len 128     # Custom block length
  prplist-search data.bin --seed 0x1234       # Custom base seed
        """,
    )
    parser.add_argument("file", help="File of little-endian u16 values")
    parser.add_argument("--block-len", type=int, default=DEFAULT_BLOCK_LEN, help=f"Values per block (default: {DEFAULT_BLOCK_LEN})")
    parser.add_argument("--blocks", type=int, default=DEFAULT_BLOCKS, help=f"Maximum number of blocks (default: {DEFAULT_BLOCKS})")
    parser.add_argument("--restarts", type=int, default=DEFAULT_RESTARTS, help=f"Random restarts per block (default: {DEFAULT_RESTARTS})")
    parser.add_argument("--hill-iters", type=int, default=DEFAULT_HILL_ITERS, help=f"Hillclimb passes per restart (default: {DEFAULT_HILL_ITERS})")
    parser.add_argument("--seed", type=lambda s: int(s, 0), default=DEFAULT_SEED, help=f"Seed for block 0; block i uses seed+i (default: 0x{DEFAULT_SEED:x})")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes for restarts (default: 1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print per-restart statistics and timing")
    args = parser.parse_args(argv)

    try:
        params = SearchParams(restarts=args.restarts, hill_iters=args.hill_iters)
    except ValueError as e:
        parser.error(str(e))
    if args.workers < 1:
        parser.error("workers must be at least 1")
    if args.block_len < 1:
        parser.error("block-len must be at least 1")
    if args.blocks < 1:
        parser.error("blocks must be at least 1")
    if args.seed < 0 or args.seed >= SEED_LIMIT:
        parser.error("seed must be in [0, 2^64)")

    return run_search(
        args.file,
        args.block_len,
        args.blocks,
        params,
        args.seed,
        workers=args.workers,
        verbose=args.verbose,
    )


if __name__ == "__main__":
    sys.exit(main())
