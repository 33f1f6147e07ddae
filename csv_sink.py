"""CSV output for per-cluster keyword summaries."""

from __future__ import annotations

import csv
import json
import logging
import os
from typing import Any, Iterable

from models import ClusterSummary

CLUSTER_KEYWORDS_CSV_PATH = os.getenv("CLUSTER_KEYWORDS_CSV_PATH", "cluster_keywords.csv")

LOGGER = logging.getLogger(__name__)

CLUSTER_CSV_COLUMNS = [
    "cluster_id",
    "num_papers",
    "keywords",        # comma-joined, most distinctive first
    "noun_phrases",    # comma-joined; empty unless requested
    "label",           # LLM topic label; empty unless requested
    "paper_ids",       # JSON array
]


def summaries_to_rows(summaries: Iterable[ClusterSummary]) -> list[dict[str, Any]]:
    """Serialize ClusterSummaries to flat dicts for CSV writing."""
    rows = []
    for s in summaries:
        rows.append({
            "cluster_id": s.cluster_id,
            "num_papers": len(s.paper_ids),
            "keywords": ", ".join(s.keywords),
            "noun_phrases": ", ".join(s.noun_phrases),
            "label": s.label or "",
            "paper_ids": json.dumps(s.paper_ids),
        })
    return rows


def write_csv(path: str, columns: list[str], rows: list[dict[str, Any]]) -> None:
    """Write rows to a CSV file, creating or overwriting it."""
    with open(path, "w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(rows)
    LOGGER.info("Wrote %s rows to %s", len(rows), path)
