from pathlib import Path

import pytest

from socnet.config import LoaderConfig
from socnet.graph.loader import load_edge_list, parse_edge_list


def test_parse_skips_malformed_lines():
    lines = [
        "# comment",
        "1 2",
        "",
        "2 3 0.25",
        "garbage",
        "4 x",
        "5 6 1.7",
        "3 4",
    ]
    result = parse_edge_list(lines, default_probability=0.01)
    assert result.edges_loaded == 3
    assert result.lines_skipped == 3
    assert result.graph.nodes() == [1, 2, 3, 4]
    assert result.graph.neighbors(1)[0].probability == 0.01
    assert result.graph.neighbors(3)[0].probability == 0.25


def test_load_edge_list_file(tmp_path: Path):
    path = tmp_path / "0.edges"
    path.write_text("1 2\n2 3\n3 1\n")
    result = load_edge_list(path, LoaderConfig(default_probability=0.2))
    assert result.edges_loaded == 3
    assert result.graph.num_edges() == 3
    assert all(e.probability == 0.2 for e in result.graph.neighbors(2))


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_edge_list(tmp_path / "missing.edges")
