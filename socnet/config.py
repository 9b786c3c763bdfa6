from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError


class LoaderConfig(BaseModel):
    default_probability: float = Field(default=0.01, ge=0.0, le=1.0)


class CascadeConfig(BaseModel):
    num_trials: int = Field(default=1000, ge=1)
    scaling_factor: float = Field(default=0.1, ge=0.0)
    # "edge" reads the probability stored on each edge instead of the
    # common-neighbour estimate.
    activation: Literal["common_neighbors", "edge"] = "common_neighbors"
    deadline_seconds: float | None = Field(default=None, gt=0.0)


class SeedConfig(BaseModel):
    k: int = Field(default=5, ge=1)
    trials_per_eval: int = Field(default=50, ge=1)
    eval_trials: int = Field(default=500, ge=1)


class RecommendConfig(BaseModel):
    max_recs: int = Field(default=10, ge=1)
    adamic_adar_weight: float = 0.5
    jaccard_weight: float = 0.3
    influence_weight: float = 0.2


class HybridConfig(BaseModel):
    top_k: int = Field(default=10, ge=1)
    pool_size: int = Field(default=50, ge=1)
    similarity_weight: float = 0.7
    centrality_weight: float = 0.3
    centrality_scale: float = Field(default=100.0, gt=0.0)


class RunConfig(BaseModel):
    seed: int = 42


class AnalyticsConfig(BaseModel):
    run: RunConfig = RunConfig()
    loader: LoaderConfig = LoaderConfig()
    cascade: CascadeConfig = CascadeConfig()
    seeds: SeedConfig = SeedConfig()
    recommend: RecommendConfig = RecommendConfig()
    hybrid: HybridConfig = HybridConfig()


class ConfigError(Exception):
    pass


def deep_merge(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | Path) -> AnalyticsConfig:
    path = Path(path)
    data = yaml.safe_load(path.read_text()) or {}
    base_path = data.get("base")
    if base_path:
        base_data = yaml.safe_load((path.parent / base_path).read_text()) or {}
        data = deep_merge(base_data, data)
        data.pop("base", None)
    try:
        return AnalyticsConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def dump_config(cfg: AnalyticsConfig, path: str | Path) -> None:
    path = Path(path)
    path.write_text(yaml.safe_dump(cfg.model_dump(), sort_keys=False))
