"""Tests for run reporting."""

import pytest
from prplist.report import BlockReport, format_time, summarize
from prplist.search import SearchResult


def make_report(index: int, key: int, score: int, block_len: int = 64) -> BlockReport:
    return BlockReport(index=index, block_len=block_len, result=SearchResult(key=key, score=score))


class TestBlockReport:
    """Tests for BlockReport."""

    def test_format_line(self):
        line = make_report(3, 0xDEADBEEF, 41).format_line()
        assert line == "Block 3 bestScore=41/64  listID=0xdeadbeef"


class TestSummarize:
    """Tests for summarize."""

    def test_average_and_best(self):
        reports = [
            make_report(0, 0x1, 40),
            make_report(1, 0x2, 44),
            make_report(2, 0x3, 42),
        ]
        summary = summarize(reports)
        assert summary.num_blocks == 3
        assert summary.average_score == pytest.approx(42.0)
        assert summary.best_score == 44
        assert summary.best_key == 0x2
        assert summary.best_block == 1
        assert summary.average_fraction == pytest.approx(42.0 / 64)

    def test_best_tie_keeps_first(self):
        reports = [make_report(0, 0xA, 44), make_report(1, 0xB, 44)]
        summary = summarize(reports)
        assert summary.best_key == 0xA
        assert summary.best_block == 0

    def test_format_lines(self):
        summary = summarize([make_report(0, 0x10, 40), make_report(1, 0x20, 41)])
        lines = summary.format_lines()
        assert lines[0] == "Average bestScore: 40.50/64 (63.28%)"
        assert lines[1] == "Best ever: 41/64  listID=0x00000020  (block 1)"

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            summarize([])


class TestFormatTime:
    """Tests for format_time."""

    def test_units(self):
        assert format_time(2.5) == "2.50s"
        assert format_time(0.0125) == "12.50ms"
        assert format_time(0.00005) == "50.0us"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
