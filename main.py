"""
Entry point for the Amazon/Google entity resolution project.

Runs the full TF-IDF pipeline with the settings in pipeline.yaml:
    - Load both catalogs and the stopword list
    - Build the combined IDF table
    - Save the IDF histogram
    - Score the configured record pairs
"""

from pathlib import Path

from entity_resolution.config import load_pipeline_config
from entity_resolution.pipeline import run_pipeline

CONFIG_PATH = Path(__file__).resolve().parent / "pipeline.yaml"


def main() -> None:
    config = load_pipeline_config(CONFIG_PATH)
    result = run_pipeline(config)

    print(f"\nScored {len(result.scores)} pair(s) over {result.corpus.record_count} records.")


if __name__ == "__main__":
    main()
