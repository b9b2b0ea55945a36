import json

import pytest

from asciinet.core import entropy
from cli.main import main


def test_cli_headless_run_writes_metrics(tmp_path, capsys):
    metrics = tmp_path / "run" / "metrics.jsonl"
    table = tmp_path / "run" / "metrics.csv"
    main(
        [
            "--epochs",
            "3",
            "--frame-delay",
            "0",
            "--no-render",
            "--metrics",
            str(metrics),
            "--metrics-csv",
            str(table),
        ]
    )
    out = capsys.readouterr().out.strip().splitlines()
    payload = json.loads(out[-1])
    assert payload["steps"] == 12
    assert 0.0 <= payload["final_loss"] <= 1.0
    records = [json.loads(line) for line in metrics.read_text().splitlines()]
    assert [r["epoch"] for r in records] == [0, 1, 2]
    assert len(table.read_text().splitlines()) == 4


def test_cli_renders_frames(capsys):
    main(["--epochs", "1", "--frame-delay", "0"])
    out = capsys.readouterr().out
    assert out.count("Epoch: 0 | Loss:") == 4
    assert "Hidden Layer:" in out
    assert "Average Loss:" in out


def test_cli_entropy_failure_exits(monkeypatch):
    def _broken(n):
        raise OSError("entropy pool unavailable")

    monkeypatch.setattr(entropy.os, "urandom", _broken)
    with pytest.raises(SystemExit) as excinfo:
        main(["--epochs", "1", "--frame-delay", "0", "--no-render"])
    assert "network initialisation failed" in str(excinfo.value.code)


def test_cli_rejects_negative_epochs():
    with pytest.raises(SystemExit):
        main(["--epochs", "-2", "--no-render"])
