from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import List

import pandas as pd

from socnet.analysis.report import (
    centrality_frame,
    compare_strategies,
    hybrid_frame,
    impact_frame,
    recommendation_frame,
    stats_frame,
)
from socnet.cascades.selector import select_seeds
from socnet.cascades.simulator import estimate_spread
from socnet.centrality.betweenness import compute_betweenness, top_k_central
from socnet.config import AnalyticsConfig, dump_config, load_config
from socnet.deadline import Deadline
from socnet.graph.loader import load_edge_list
from socnet.graph.stats import graph_stats
from socnet.graph.store import Graph
from socnet.hybrid.ranker import rank_hybrid, recommendation_impact
from socnet.io.logging import setup_logging
from socnet.io.metadata import build_run_metadata
from socnet.rng import RNGManager
from socnet.similarity.scorer import recommend


def _common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--edges", required=True, help="Edge-list file (u v [probability] per line)")
    parser.add_argument("--config", default=None, help="Path to config YAML")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--out", default=None, help="Directory for CSV, resolved config and metadata")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="socnet", description="Social network influence analytics")
    parser.add_argument("--log-level", default="INFO")
    sub = parser.add_subparsers(dest="command", required=True)

    stats = sub.add_parser("stats", help="Node/edge counts and degree summary")
    _common(stats)

    centrality = sub.add_parser("centrality", help="Top-k nodes by betweenness centrality")
    _common(centrality)
    centrality.add_argument("--k", type=int, default=10)

    spread = sub.add_parser("spread", help="Estimate cascade spread of a seed set")
    _common(spread)
    spread.add_argument("--seeds", nargs="+", type=int, required=True)
    spread.add_argument("--trials", type=int, default=None)

    seeds = sub.add_parser("seeds", help="Greedy seed selection")
    _common(seeds)
    seeds.add_argument("--k", type=int, default=None)
    seeds.add_argument("--trials-per-eval", type=int, default=None)

    compare = sub.add_parser("compare", help="Betweenness seeds vs greedy seeds")
    _common(compare)
    compare.add_argument("--k", type=int, default=None)

    rec = sub.add_parser("recommend", help="Friend recommendations for a user")
    _common(rec)
    rec.add_argument("--user", type=int, required=True)
    rec.add_argument("--k", type=int, default=None)

    hybrid = sub.add_parser("hybrid", help="Recommendations blended with centrality")
    _common(hybrid)
    hybrid.add_argument("--user", type=int, required=True)
    hybrid.add_argument("--k", type=int, default=None)

    impact = sub.add_parser("impact", help="Influence potential of a user's recommendations")
    _common(impact)
    impact.add_argument("--user", type=int, required=True)
    impact.add_argument("--seeds", nargs="+", type=int, required=True)
    impact.add_argument("--trials", type=int, default=None)

    demo = sub.add_parser("demo", help="Run every analysis once on the graph")
    _common(demo)

    return parser


def _option(value, default):
    return value if value is not None else default


def resolve_config(args: argparse.Namespace) -> AnalyticsConfig:
    cfg = load_config(args.config) if args.config else AnalyticsConfig()
    if args.seed is not None:
        cfg.run.seed = args.seed
    return cfg


def _known_seeds(graph: Graph, seeds: List[int]) -> List[int]:
    known = []
    for node in seeds:
        if node in graph:
            known.append(node)
        else:
            logging.warning("Node %d not in graph; ignoring", node)
    return known


def _emit(frame: pd.DataFrame, args: argparse.Namespace, cfg: AnalyticsConfig, name: str) -> None:
    print(frame.to_string(index=False))
    if args.out is None:
        return
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    frame.to_csv(out_dir / f"{name}.csv", index=False)
    dump_config(cfg, out_dir / "config_resolved.yaml")
    with (out_dir / "run_metadata.json").open("w") as f:
        json.dump(build_run_metadata(cfg, args.command), f, indent=2)


def run_stats(args, cfg, graph) -> int:
    _emit(stats_frame(graph_stats(graph)), args, cfg, "stats")
    return 0


def run_centrality(args, cfg, graph) -> int:
    start = time.perf_counter()
    scores = compute_betweenness(graph)
    logging.info("Betweenness computed in %.2fs", time.perf_counter() - start)
    _emit(centrality_frame(scores, args.k), args, cfg, "centrality")
    return 0


def run_spread(args, cfg, graph) -> int:
    seeds = _known_seeds(graph, args.seeds)
    if not seeds:
        logging.error("No valid seeds given")
        return 1
    trials = _option(args.trials, cfg.cascade.num_trials)
    rng = RNGManager(cfg.run.seed).numpy
    deadline = Deadline.from_seconds(cfg.cascade.deadline_seconds)
    spread = estimate_spread(graph, seeds, trials, rng, cfg.cascade, deadline)
    frame = pd.DataFrame(
        [{"seeds": " ".join(map(str, seeds)), "trials": trials, "spread": spread, "spread_fraction": spread / len(graph)}]
    )
    _emit(frame, args, cfg, "spread")
    return 0


def run_seeds(args, cfg, graph) -> int:
    k = _option(args.k, cfg.seeds.k)
    trials = _option(args.trials_per_eval, cfg.seeds.trials_per_eval)
    rng = RNGManager(cfg.run.seed).numpy
    deadline = Deadline.from_seconds(cfg.cascade.deadline_seconds)
    selected = select_seeds(graph, k, trials, rng, cfg.cascade, deadline)
    frame = pd.DataFrame({"order": range(1, len(selected) + 1), "node": selected})
    _emit(frame, args, cfg, "seeds")
    return 0


def run_compare(args, cfg, graph) -> int:
    k = _option(args.k, cfg.seeds.k)
    frame = compare_strategies(
        graph,
        k,
        RNGManager(cfg.run.seed),
        eval_trials=cfg.seeds.eval_trials,
        trials_per_eval=cfg.seeds.trials_per_eval,
        cfg=cfg.cascade,
        deadline=Deadline.from_seconds(cfg.cascade.deadline_seconds),
    )
    _emit(frame, args, cfg, "compare")
    return 0


def _check_user(graph: Graph, user: int) -> bool:
    if user not in graph:
        logging.error("User %d not found in graph", user)
        return False
    return True


def run_recommend(args, cfg, graph) -> int:
    if not _check_user(graph, args.user):
        return 1
    k = _option(args.k, cfg.recommend.max_recs)
    recs = recommend(graph, args.user, k, cfg.recommend, cfg.cascade.scaling_factor)
    if not recs:
        logging.info("No recommendations for user %d", args.user)
    _emit(recommendation_frame(recs), args, cfg, "recommendations")
    return 0


def run_hybrid(args, cfg, graph) -> int:
    if not _check_user(graph, args.user):
        return 1
    ranked = rank_hybrid(
        graph,
        args.user,
        _option(args.k, cfg.hybrid.top_k),
        cfg=cfg.hybrid,
        rec_cfg=cfg.recommend,
        scaling_factor=cfg.cascade.scaling_factor,
    )
    _emit(hybrid_frame(ranked), args, cfg, "hybrid")
    return 0


def run_impact(args, cfg, graph) -> int:
    if not _check_user(graph, args.user):
        return 1
    seeds = _known_seeds(graph, args.seeds)
    trials = _option(args.trials, cfg.cascade.num_trials)
    rng = RNGManager(cfg.run.seed).numpy
    report = recommendation_impact(
        graph, args.user, seeds, trials, rng, cfg=cfg.cascade, rec_cfg=cfg.recommend
    )
    logging.info("Baseline spread: %d nodes", report.baseline_spread)
    _emit(impact_frame(report), args, cfg, "impact")
    return 0


def run_demo(args, cfg, graph) -> int:
    k = cfg.seeds.k
    rng = RNGManager(cfg.run.seed).numpy
    user = graph.nodes()[0]

    print(stats_frame(graph_stats(graph)).to_string(index=False))

    start = time.perf_counter()
    scores = compute_betweenness(graph)
    logging.info("Betweenness computed in %.2fs", time.perf_counter() - start)
    bc_seeds = top_k_central(graph, k, scores)
    spread = estimate_spread(graph, bc_seeds, cfg.cascade.num_trials, rng, cfg.cascade)
    print(centrality_frame(scores, k).to_string(index=False))
    print(f"Spread of top-{k} betweenness seeds: {spread} ({100.0 * spread / len(graph):.1f}%)")

    recs = recommend(graph, user, 5, cfg.recommend, cfg.cascade.scaling_factor)
    print(recommendation_frame(recs).to_string(index=False))

    ranked = rank_hybrid(
        graph,
        user,
        5,
        centrality=scores,
        cfg=cfg.hybrid,
        rec_cfg=cfg.recommend,
        scaling_factor=cfg.cascade.scaling_factor,
    )
    _emit(hybrid_frame(ranked), args, cfg, "demo_hybrid")
    return 0


COMMANDS = {
    "stats": run_stats,
    "centrality": run_centrality,
    "spread": run_spread,
    "seeds": run_seeds,
    "compare": run_compare,
    "recommend": run_recommend,
    "hybrid": run_hybrid,
    "impact": run_impact,
    "demo": run_demo,
}


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    cfg = resolve_config(args)
    try:
        graph = load_edge_list(args.edges, cfg.loader).graph
    except FileNotFoundError:
        logging.error("Edge list not found: %s", args.edges)
        return 1
    if len(graph) == 0:
        logging.error("Graph is empty: %s", args.edges)
        return 1
    return COMMANDS[args.command](args, cfg, graph)
