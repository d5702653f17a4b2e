# scripts/run_entity_resolution.py
"""
Entry script: run the full TF-IDF scoring pipeline.

It will:
1) Load stopwords and both catalogs.
2) Build the combined IDF table.
3) Print corpus statistics (token count, biggest record, common tokens).
4) Save the IDF histogram.
5) Score the configured (amazon_id, google_id) pairs.

Run:
    python scripts/run_entity_resolution.py --config pipeline.yaml
"""

from __future__ import annotations

import argparse
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from entity_resolution.config import PipelineConfig, load_pipeline_config  # noqa: E402
from entity_resolution.pipeline import run_pipeline  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="TF-IDF entity resolution pipeline")
    parser.add_argument("--config", help="Pipeline YAML config")
    args = parser.parse_args()

    config = load_pipeline_config(args.config) if args.config else PipelineConfig()

    print("=======================================================")
    print("  TF-IDF ENTITY RESOLUTION (Amazon <-> Google)")
    print("=======================================================")

    run_pipeline(config)

    print("\n=== Pipeline finished ===")
    print("Main outputs:")
    print(f"  {config.histogram_path}    # IDF histogram bin counts")
    print(f"  {config.scores_path}    # pair similarity scores")


if __name__ == "__main__":
    main()
