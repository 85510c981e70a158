"""Tests for the command line."""
from __future__ import annotations

import sys

import pytest

from cli.main import main


def run_cli(monkeypatch, *argv) -> int:
    """Run the CLI with the given arguments and return its exit code."""
    monkeypatch.setattr(sys, "argv", ["cli.main", *argv])
    with pytest.raises(SystemExit) as exc:
        main()
    return exc.value.code


def test_cli_main_help(monkeypatch, capsys):
    """CLI should show help without error."""
    assert run_cli(monkeypatch, "--help") == 0

    captured = capsys.readouterr()
    assert "allocate" in captured.out


def test_allocate_from_pairs(monkeypatch, capsys):
    """Units given as NAME=COUNT should be allocated and printed."""
    code = run_cli(
        monkeypatch, "allocate", "--limit", "100",
        "--unit", "A=45", "--unit", "B=82", "--unit", "C=30",
    )

    out = capsys.readouterr().out
    assert code == 0
    assert "total_allocated: 100" in out
    assert "excess: 57" in out
    assert "->     29" in out


def test_allocate_explain(monkeypatch, capsys):
    """--explain should print the remainder breakdown."""
    code = run_cli(monkeypatch, "allocate", "--limit", "2", "--unit", "A=1", "--unit", "B=1", "--unit", "C=1", "--explain")

    out = capsys.readouterr().out
    assert code == 0
    assert out.count("+1 remainder seat") == 2


def test_allocate_text_format(monkeypatch, capsys):
    """Text format should print the shareable report."""
    code = run_cli(monkeypatch, "allocate", "--limit", "20", "--unit", "A=5", "--unit", "B=5", "--format", "text", "--title", "Trip")

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("[Trip]\nTotal limit: 20\nTotal signup: 10")
    assert "Approved: 5 (reduced by 0)" in out


def test_allocate_session_csv_output(monkeypatch, capsys, tmp_path):
    """A session file should supply the limit and CSV output should be written."""
    session = tmp_path / "s.yaml"
    session.write_text("title: T\ntotal_limit: 6\nunits:\n  - name: B\n    count: 7\n  - name: C\n    count: 5\n", encoding="utf-8")
    out_path = tmp_path / "out.csv"

    code = run_cli(monkeypatch, "allocate", "--session", str(session), "--format", "csv", "--output", str(out_path))

    assert code == 0
    lines = out_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "id,name,count,exact_share,base_allocated,remainder,allocated,reduction"
    assert len(lines) == 3
    assert lines[1].startswith("u1,B,7,")
    assert lines[1].endswith(",4,3")


def test_allocate_requires_limit(monkeypatch, capsys):
    """Without a session file --limit is required."""
    code = run_cli(monkeypatch, "allocate", "--unit", "A=5")

    assert code == 1
    assert "--limit is required" in capsys.readouterr().out


def test_allocate_rejects_negative_count(monkeypatch, capsys):
    """Invalid units should be reported and not allocated."""
    code = run_cli(monkeypatch, "allocate", "--limit", "5", "--unit", "A=-3")

    assert code == 1
    assert "Negative count" in capsys.readouterr().out


def test_allocate_missing_session(monkeypatch, capsys, tmp_path):
    """A missing session file should be an error, not a traceback."""
    code = run_cli(monkeypatch, "allocate", "--session", str(tmp_path / "missing.yaml"))

    assert code == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_validate(monkeypatch, capsys):
    """validate should report OK for good units and issues for bad ones."""
    assert run_cli(monkeypatch, "validate", "--unit", "A=1", "--unit", "B=2") == 0
    assert "2 unit(s) OK" in capsys.readouterr().out

    assert run_cli(monkeypatch, "validate", "--unit", "A=-1") == 1
    assert "Issues:" in capsys.readouterr().out
