# scripts/score_pair.py
"""
Score one Amazon/Google record pair, or two free-text strings, against
the combined IDF table.

Run:
    python scripts/score_pair.py --a-id b000o24l3q \
        --b-id http://www.google.com/base/feeds/snippets/17242822440574356561

    python scripts/score_pair.py --text1 "Adobe Photoshop" --text2 "Adobe Illustrator"
"""

from __future__ import annotations

import argparse
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from entity_resolution.config import PipelineConfig, load_pipeline_config  # noqa: E402
from entity_resolution.pipeline import load_corpus  # noqa: E402
from entity_resolution.similarity import record_similarity  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="TF-IDF cosine similarity of one pair")
    parser.add_argument("--config", help="Pipeline YAML config")
    parser.add_argument("--a-id", help="Amazon record id")
    parser.add_argument("--b-id", help="Google record id")
    parser.add_argument("--text1", help="First free-text string")
    parser.add_argument("--text2", help="Second free-text string")
    args = parser.parse_args()

    by_id = args.a_id is not None and args.b_id is not None
    by_text = args.text1 is not None and args.text2 is not None
    if by_id == by_text:
        parser.error("give either --a-id and --b-id, or --text1 and --text2")

    config = load_pipeline_config(args.config) if args.config else PipelineConfig()
    amazon, google, corpus, _ = load_corpus(config)

    if by_id:
        sim = record_similarity(amazon, args.a_id, google, args.b_id, corpus.idf)
        print(f"[Score] {args.a_id} <-> {args.b_id}: {sim:.10f}")
    else:
        sim = corpus.string_similarity(args.text1, args.text2)
        print(f"[Score] '{args.text1}' <-> '{args.text2}': {sim:.10f}")


if __name__ == "__main__":
    main()
