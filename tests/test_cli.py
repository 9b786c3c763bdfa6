import json
from pathlib import Path

import pandas as pd

from socnet.cli import main


def _edges(tmp_path: Path) -> Path:
    path = tmp_path / "0.edges"
    path.write_text("1 2\n1 3\n2 3\n3 4\n4 5\n4 6\n5 6\n")
    return path


def test_stats_command(tmp_path: Path, capsys):
    assert main(["stats", "--edges", str(_edges(tmp_path))]) == 0
    out = capsys.readouterr().out
    assert "max_degree" in out


def test_centrality_writes_outputs(tmp_path: Path):
    out_dir = tmp_path / "run"
    code = main(["centrality", "--edges", str(_edges(tmp_path)), "--k", "2", "--out", str(out_dir)])
    assert code == 0
    frame = pd.read_csv(out_dir / "centrality.csv")
    assert frame["node"].tolist() == [3, 4]
    assert (out_dir / "config_resolved.yaml").exists()
    metadata = json.loads((out_dir / "run_metadata.json").read_text())
    assert metadata["command"] == "centrality"
    assert metadata["seed"] == "42"


def test_seeds_and_spread_commands(tmp_path: Path):
    edges = str(_edges(tmp_path))
    out_dir = tmp_path / "seeds"
    assert main(["seeds", "--edges", edges, "--k", "2", "--trials-per-eval", "5", "--out", str(out_dir)]) == 0
    frame = pd.read_csv(out_dir / "seeds.csv")
    assert len(frame) <= 2
    assert main(["spread", "--edges", edges, "--seeds", "1", "42", "--trials", "20", "--seed", "3"]) == 0


def test_unknown_user_fails(tmp_path: Path):
    edges = str(_edges(tmp_path))
    assert main(["recommend", "--edges", edges, "--user", "99"]) == 1
    assert main(["hybrid", "--edges", edges, "--user", "1", "--k", "3"]) == 0


def test_demo_command(tmp_path: Path, capsys):
    assert main(["demo", "--edges", str(_edges(tmp_path))]) == 0
    assert "hybrid_score" in capsys.readouterr().out


def test_explicit_zero_k_is_respected(tmp_path: Path):
    out_dir = tmp_path / "zero"
    assert main(["seeds", "--edges", str(_edges(tmp_path)), "--k", "0", "--out", str(out_dir)]) == 0
    frame = pd.read_csv(out_dir / "seeds.csv")
    assert frame.empty
    assert list(frame.columns) == ["order", "node"]


def test_missing_edge_list_fails(tmp_path: Path, caplog):
    assert main(["stats", "--edges", str(tmp_path / "missing.edges")]) == 1
    assert "Edge list not found" in caplog.text
