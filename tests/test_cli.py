import struct
from pathlib import Path

import pytest

from prplist import cli


def write_u16_file(path: Path, values: list[int]) -> Path:
    path.write_bytes(struct.pack(f"<{len(values)}H", *values))
    return path


def test_runs_blocks_and_summary(tmp_path: Path, capsys):
    src = write_u16_file(tmp_path / "data.bin", [(i * 2654435761) & 0xFFFF for i in range(200)])

    code = cli.main([str(src), "--block-len", "64", "--blocks", "5", "--restarts", "2", "--hill-iters", "1"])

    out = capsys.readouterr().out
    assert code == 0
    assert "u16 count: 200" in out
    # 200 // 64 = 3 blocks even though 5 were requested
    assert "Block 2 bestScore=" in out
    assert "Block 3 " not in out
    assert "Average bestScore:" in out
    assert "Best ever:" in out


def test_verbose_prints_restart_stats(tmp_path: Path, capsys):
    src = write_u16_file(tmp_path / "data.bin", list(range(64)))

    code = cli.main([str(src), "--restarts", "3", "--hill-iters", "0", "-v"])

    assert code == 0
    assert "restarts: min=" in capsys.readouterr().out


def test_same_seed_same_output(tmp_path: Path, capsys):
    src = write_u16_file(tmp_path / "data.bin", list(range(128)))
    args = [str(src), "--restarts", "2", "--hill-iters", "1", "--seed", "0x1234"]

    cli.main(args)
    first = capsys.readouterr().out
    cli.main(args)
    second = capsys.readouterr().out

    assert first == second


def test_missing_file(tmp_path: Path, capsys):
    code = cli.main([str(tmp_path / "missing.bin")])

    assert code == cli.EXIT_READ_ERROR
    assert "Cannot read" in capsys.readouterr().err


def test_file_too_small(tmp_path: Path, capsys):
    src = write_u16_file(tmp_path / "data.bin", list(range(10)))

    code = cli.main([str(src)])

    assert code == cli.EXIT_TOO_SMALL
    assert "too small" in capsys.readouterr().err


def test_invalid_restarts_is_usage_error(tmp_path: Path):
    src = write_u16_file(tmp_path / "data.bin", list(range(64)))

    with pytest.raises(SystemExit) as exc:
        cli.main([str(src), "--restarts", "0"])

    assert exc.value.code == 2


def test_demo_script_delegates_to_package_cli():
    import demo

    assert demo.main is cli.main
