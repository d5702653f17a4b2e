"""
Paths and run settings for the entity resolution pipeline.

Defaults live here; a YAML file (see pipeline.yaml at the project root)
can override any PipelineConfig field.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

# ---------------------------------------------------------
# Paths
# ---------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = PROJECT_ROOT / "data"
ARTIFACTS_DIR = PROJECT_ROOT / "artifacts"

AMAZON_PATH = DATA_DIR / "Amazon_small.csv"
GOOGLE_PATH = DATA_DIR / "Google_small.csv"
STOPWORDS_PATH = DATA_DIR / "stopwords.txt"
HISTOGRAM_PATH = ARTIFACTS_DIR / "idf_histogram.csv"
SCORES_PATH = ARTIFACTS_DIR / "pair_scores.csv"

_PATH_FIELDS = (
    "amazon_path",
    "google_path",
    "stopwords_path",
    "histogram_path",
    "scores_path",
)


@dataclass
class PipelineConfig:
    """Settings for one pipeline run."""

    amazon_path: Path = AMAZON_PATH
    google_path: Path = GOOGLE_PATH
    stopwords_path: Path = STOPWORDS_PATH
    histogram_path: Path = HISTOGRAM_PATH
    scores_path: Path = SCORES_PATH
    use_stopwords: bool = True
    number_of_bins: int = 50
    lowest_idf_count: int = 11
    max_workers: Optional[int] = None
    # (amazon_id, google_id) pairs to score
    pairs: List[Tuple[str, str]] = field(default_factory=list)


def load_pipeline_config(config_path: Path) -> PipelineConfig:
    """
    Load a PipelineConfig from a YAML file.

    Relative paths are resolved against the YAML file's directory. Keys
    that are not PipelineConfig fields raise KeyError.

    Example:

        amazon_path: data/Amazon_small.csv
        number_of_bins: 50
        pairs:
          - [b000o24l3q, "http://www.google.com/base/feeds/snippets/17242822440574356561"]
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Pipeline config not found at: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    if not isinstance(cfg, dict):
        raise ValueError(f"Pipeline config must be a mapping: {config_path}")

    known = {f.name for f in fields(PipelineConfig)}
    for key in cfg:
        if key not in known:
            raise KeyError(f"Unknown pipeline config key '{key}' in {config_path}")

    base_dir = config_path.parent
    for key in _PATH_FIELDS:
        if key in cfg:
            path = Path(cfg[key])
            cfg[key] = path if path.is_absolute() else base_dir / path

    if "pairs" in cfg:
        if not isinstance(cfg["pairs"] or [], list):
            raise ValueError(f"'pairs' must be a list in {config_path}")
        pairs = []
        for pair in cfg["pairs"] or []:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise ValueError(f"Each pair needs exactly two ids, got: {pair}")
            pairs.append((str(pair[0]), str(pair[1])))
        cfg["pairs"] = pairs

    return PipelineConfig(**cfg)
