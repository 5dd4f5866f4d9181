"""
Per-block results and aggregate statistics for a search run.
"""

from dataclasses import dataclass

from .search import SearchResult


@dataclass
class BlockReport:
    """Search outcome for one block."""

    index: int
    block_len: int
    result: SearchResult
    seconds: float = 0.0

    def format_line(self) -> str:
        return (
            f"Block {self.index} bestScore={self.result.score}/{self.block_len}"
            f"  listID=0x{self.result.key:08x}"
        )


@dataclass
class Summary:
    """Aggregate statistics over all searched blocks."""

    num_blocks: int
    block_len: int
    average_score: float
    best_score: int
    best_key: int
    best_block: int

    @property
    def average_fraction(self) -> float:
        """Average best score as a fraction of the block length."""
        return self.average_score / self.block_len

    def format_lines(self) -> list[str]:
        return [
            f"Average bestScore: {self.average_score:.2f}/{self.block_len}"
            f" ({100.0 * self.average_fraction:.2f}%)",
            f"Best ever: {self.best_score}/{self.block_len}"
            f"  listID=0x{self.best_key:08x}  (block {self.best_block})",
        ]


def summarize(reports: list[BlockReport]) -> Summary:
    """
    Aggregate block reports.

    The best-ever block is the first one reaching the maximum score.
    """
    if not reports:
        raise ValueError("Cannot summarize an empty run")

    best = reports[0]
    for report in reports[1:]:
        if report.result.score > best.result.score:
            best = report

    total = sum(r.result.score for r in reports)
    return Summary(
        num_blocks=len(reports),
        block_len=reports[0].block_len,
        average_score=total / len(reports),
        best_score=best.result.score,
        best_key=best.result.key,
        best_block=best.index,
    )


def format_time(seconds: float) -> str:
    """Format time with appropriate unit."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 0.001:
        return f"{seconds*1000:.2f}ms"
    return f"{seconds*1_000_000:.1f}us"
