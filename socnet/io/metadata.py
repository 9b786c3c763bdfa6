from __future__ import annotations

import platform
import subprocess
import sys
from importlib import metadata
from typing import Dict

from socnet.config import AnalyticsConfig


def _pkg_version(name: str) -> str:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return "unknown"


def build_run_metadata(cfg: AnalyticsConfig, command: str) -> Dict[str, str]:
    try:
        git_hash = subprocess.check_output(
            ["git", "rev-parse", "HEAD"],
            text=True,
            stderr=subprocess.DEVNULL,
        ).strip()
    except (OSError, subprocess.CalledProcessError):
        git_hash = "unknown"
    return {
        "python_version": sys.version.split()[0],
        "platform": platform.platform(),
        "numpy_version": _pkg_version("numpy"),
        "pandas_version": _pkg_version("pandas"),
        "pydantic_version": _pkg_version("pydantic"),
        "socnet_version": _pkg_version("socnet-influence"),
        "git_commit": git_hash,
        "command": command,
        "seed": str(cfg.run.seed),
        "activation": cfg.cascade.activation,
    }
