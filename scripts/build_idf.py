# scripts/build_idf.py
"""
Build the combined Amazon + Google IDF table and save its histogram.

Input:
    data/Amazon_small.csv
    data/Google_small.csv
    data/stopwords.txt

Output:
    artifacts/idf_histogram.csv    # bin, lower, upper, count

Run:
    python scripts/build_idf.py [--config pipeline.yaml] [--bins 50]
"""

from __future__ import annotations

import argparse
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from entity_resolution.config import PipelineConfig, load_pipeline_config  # noqa: E402
from entity_resolution.corpus import histogram_bounds, write_histogram  # noqa: E402
from entity_resolution.pipeline import load_corpus  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Build IDF table and histogram")
    parser.add_argument("--config", help="Pipeline YAML config")
    parser.add_argument("--bins", type=int, help="Number of histogram bins")
    args = parser.parse_args()

    config = load_pipeline_config(args.config) if args.config else PipelineConfig()
    if args.bins is not None:
        config.number_of_bins = args.bins

    _, _, corpus, _ = load_corpus(config)

    print(f"[IDF] Lowest {config.lowest_idf_count} IDF tokens:")
    for token, value in corpus.lowest_idf_tokens(config.lowest_idf_count):
        print(f"    {token:<20} {value:.4f}")

    counts = corpus.histogram(config.number_of_bins)
    bounds = histogram_bounds(corpus.idf)
    print(f"[IDF] Histogram range: [{bounds[0]:.0f}, {bounds[1]:.0f}], {len(counts)} bins")

    write_histogram(counts, bounds, config.histogram_path)
    print(f"[IDF] Saved histogram to: {config.histogram_path}")
    print("[IDF] Done.")


if __name__ == "__main__":
    main()
