"""Loads YAML/JSON configuration files and per-run diagnostic flags."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_meta_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the toolkit's packaged defaults."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "defaults.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


META_CONFIG: Dict[str, Any] = load_meta_config()
DEBUG_FLAG: str = str(META_CONFIG.get("debug_flag", "-d"))
VERBOSE_FLAG: str = str(META_CONFIG.get("verbose_flag", "-v"))


@dataclass(frozen=True)
class RunConfig:
    """Diagnostic switches for one solver run.

    Built once at process start and passed down to whatever emits
    diagnostics. ``debug`` enables rendered maps and paths, ``verbose``
    enables progress and timing messages.
    """

    debug: bool = False
    verbose: bool = False

    @classmethod
    def from_argv(cls, argv: Optional[Sequence[str]] = None) -> "RunConfig":
        """Detect the flags by literal presence anywhere in ``argv``."""
        if argv is None:
            argv = sys.argv[1:]
        args = set(argv)
        return cls(debug=DEBUG_FLAG in args, verbose=VERBOSE_FLAG in args)


def print_runtime_config(config: RunConfig) -> None:
    """Print a summary of the current runtime configuration to stderr."""
    info = {
        "debug": config.debug,
        "verbose": config.verbose,
        "debug_flag": DEBUG_FLAG,
        "verbose_flag": VERBOSE_FLAG,
    }
    print("Runtime configuration:", file=sys.stderr)
    for k, v in info.items():
        print(f"  {k}: {v}", file=sys.stderr)
