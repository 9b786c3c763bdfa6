from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

from socnet.config import LoaderConfig
from socnet.graph.store import Graph

_COMMENT_PREFIXES = ("#", "%")


@dataclass
class LoadResult:
    graph: Graph
    edges_loaded: int
    lines_skipped: int


def _parse_line(line: str, default_probability: float) -> Tuple[int, int, float] | None:
    parts = line.split()
    if len(parts) < 2:
        return None
    try:
        u, v = int(parts[0]), int(parts[1])
        probability = float(parts[2]) if len(parts) > 2 else default_probability
    except ValueError:
        return None
    if not 0.0 <= probability <= 1.0:
        return None
    return u, v, probability


def parse_edge_list(lines: Iterable[str], default_probability: float = 0.01) -> LoadResult:
    """
    Build a graph from edge-list lines: ``u v [probability]``.

    Blank and comment lines are ignored. Lines that cannot be parsed are
    skipped and counted rather than aborting the load.
    """
    graph = Graph()
    loaded = 0
    skipped = 0
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith(_COMMENT_PREFIXES):
            continue
        parsed = _parse_line(stripped, default_probability)
        if parsed is None:
            skipped += 1
            continue
        graph.add_edge(*parsed)
        loaded += 1
    if skipped:
        logging.warning("Skipped %d malformed edge-list lines", skipped)
    return LoadResult(graph=graph, edges_loaded=loaded, lines_skipped=skipped)


def load_edge_list(path: str | Path, cfg: LoaderConfig | None = None) -> LoadResult:
    cfg = cfg or LoaderConfig()
    path = Path(path)
    with path.open() as f:
        result = parse_edge_list(f, cfg.default_probability)
    logging.info("Loaded %d edges over %d nodes from %s", result.edges_loaded, len(result.graph), path)
    return result
