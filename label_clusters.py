"""CLI: summarize pre-clustered papers with distinctive keywords.

Usage examples
--------------
# Keywords per cluster (no LLM calls):
python label_clusters.py --input papers.csv

# Extra stopwords, more keywords, noun phrases too:
python label_clusters.py --input papers.csv --max-keywords 8 --stopword traffic --noun-phrases

# Also name each cluster with OpenAI:
python label_clusters.py --input papers.csv --generate-labels
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

from dotenv import load_dotenv

from cluster_labeler import label_cluster
from csv_sink import CLUSTER_CSV_COLUMNS, CLUSTER_KEYWORDS_CSV_PATH, summaries_to_rows, write_csv
from keyword_extractor import (
    DEFAULT_MAX_KEYWORDS,
    extract_meaningful_keywords,
    extract_noun_phrases,
    find_distinctive_keywords,
)
from models import ClusterKeywords, ClusterSummary, Paper
from paper_loader import group_by_cluster, load_papers
from stopwords import merge_stopwords

LOGGER = logging.getLogger(__name__)


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Extract distinctive keywords for each cluster of papers in a CSV."
    )
    p.add_argument(
        "--input",
        nargs="+",
        default=[os.getenv("PAPERS_CSV_PATH", "papers.csv")],
        help="One or more CSV files or URLs with title, abstract and cluster columns.",
    )
    p.add_argument(
        "--output",
        default=CLUSTER_KEYWORDS_CSV_PATH,
        help=f"Output path for the cluster keywords CSV (default: {CLUSTER_KEYWORDS_CSV_PATH}).",
    )
    p.add_argument(
        "--max-keywords",
        type=_non_negative_int,
        default=int(os.getenv("MAX_KEYWORDS", str(DEFAULT_MAX_KEYWORDS))),
        help="Maximum keywords per cluster (default: 5).",
    )
    p.add_argument(
        "--stopword",
        action="append",
        default=[],
        help="Additional stopword to filter; repeat for several.",
    )
    p.add_argument(
        "--no-distinctive",
        action="store_true",
        help="Keep relevance order instead of ranking cluster-unique keywords first.",
    )
    p.add_argument(
        "--noun-phrases",
        action="store_true",
        help="Also extract pattern-based noun phrases per cluster.",
    )
    p.add_argument(
        "--generate-labels",
        action="store_true",
        help="Call OpenAI to name each cluster from its keywords and titles.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the cluster table without writing the output CSV.",
    )
    return p.parse_args(argv)


def summarize_clusters(
    papers: Sequence[Paper],
    custom_stopwords: Sequence[str] = (),
    max_keywords: int = DEFAULT_MAX_KEYWORDS,
    distinctive: bool = True,
    noun_phrases: bool = False,
) -> list[ClusterSummary]:
    """Build one ClusterSummary per cluster present in ``papers``.

    Every loaded paper, clustered or not, is the IDF corpus.
    """
    groups = group_by_cluster(papers)
    LOGGER.info("summarize_clusters: clusters=%s papers=%s", len(groups), len(papers))

    keyword_sets = [
        ClusterKeywords(
            cluster_id=cluster_id,
            keywords=extract_meaningful_keywords(members, papers, custom_stopwords, max_keywords),
        )
        for cluster_id, members in groups.items()
    ]
    if distinctive:
        keyword_sets = find_distinctive_keywords(keyword_sets)

    stopwords = merge_stopwords(custom_stopwords)
    summaries: list[ClusterSummary] = []
    for entry in keyword_sets:
        members = groups[entry.cluster_id]
        phrases: list[str] = []
        if noun_phrases:
            text = " ".join(f"{p.title}. {p.abstract}" for p in members)
            phrases = extract_noun_phrases(text, stopwords)
        summaries.append(ClusterSummary(
            cluster_id=entry.cluster_id,
            paper_ids=[p.paper_id for p in members],
            keywords=entry.keywords,
            noun_phrases=phrases,
            label=None,
        ))
    return summaries


def _generate_labels(
    summaries: list[ClusterSummary],
    groups: dict[str, list[Paper]],
) -> list[ClusterSummary]:
    """Call OpenAI once per cluster; failures leave the label empty."""
    updated: list[ClusterSummary] = []
    for summary in summaries:
        try:
            label = label_cluster(summary, groups[summary.cluster_id])
        except Exception as exc:
            LOGGER.warning("Label generation failed for cluster=%s: %s", summary.cluster_id, exc)
            label = None
        updated.append(summary._replace(label=label))
    return updated


def _print_cluster_table(summaries: list[ClusterSummary]) -> None:
    print(f"\n{'CLUSTER':<10} {'PAPERS':>6}  KEYWORDS")
    print("─" * 70)
    for s in summaries:
        print(f"{str(s.cluster_id):<10} {len(s.paper_ids):>6}  {', '.join(s.keywords)}")
        if s.label:
            print(f"{'':<18}label: {s.label}")
    print("─" * 70)


def main(argv: Sequence[str] | None = None) -> None:
    """Load papers, summarize every cluster and write the keywords CSV."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = parse_args(argv)

    papers = load_papers(args.input)
    if not papers:
        print("No papers loaded. Check --input paths.")
        return

    summaries = summarize_clusters(
        papers,
        custom_stopwords=args.stopword,
        max_keywords=args.max_keywords,
        distinctive=not args.no_distinctive,
        noun_phrases=args.noun_phrases,
    )
    if not summaries:
        print("No clustered papers found. Add a 'cluster' column to the input CSV.")
        return

    if args.generate_labels and not args.dry_run:
        summaries = _generate_labels(summaries, group_by_cluster(papers))

    _print_cluster_table(summaries)

    if args.dry_run:
        LOGGER.info("[dry-run] Would write %s clusters to %s", len(summaries), args.output)
        return

    write_csv(args.output, CLUSTER_CSV_COLUMNS, summaries_to_rows(summaries))
    print(f"Cluster keywords written to: {args.output}")


if __name__ == "__main__":
    main()
