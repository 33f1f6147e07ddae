"""Paper CSV ingestion from local files or HTTP(S) URLs."""

from __future__ import annotations

import csv
import io
import logging
import os
from typing import Any, Iterable

import requests

from models import Paper

REQUEST_TIMEOUT_SECONDS = 20

LOGGER = logging.getLogger(__name__)


def load_papers(sources: Iterable[str]) -> list[Paper]:
    """Load and normalize papers from one or more CSV sources.

    A source is either a local path or an ``http(s)://`` URL. Missing files
    and failed downloads are logged and skipped. Rows with neither a title
    nor an id are dropped; every other missing field gets a default so the
    keyword core always sees string ``title`` and ``abstract`` values.

    Args:
        sources: CSV file paths and/or URLs, loaded in order.

    Returns:
        Papers in file order, indices continuing across sources.
    """
    papers: list[Paper] = []
    total_read = 0

    for source in sources:
        text = _read_source(source)
        if text is None:
            continue

        rows = list(csv.DictReader(io.StringIO(text)))
        LOGGER.info("Loaded %s rows from %s", len(rows), source)
        total_read += len(rows)

        for row in rows:
            paper = _row_to_paper(row, index=len(papers))
            if paper is not None:
                papers.append(paper)

    LOGGER.info("load_papers: read=%s kept=%s", total_read, len(papers))
    return papers


def _read_source(source: str) -> str | None:
    if source.startswith(("http://", "https://")):
        try:
            response = requests.get(source, timeout=REQUEST_TIMEOUT_SECONDS)
            response.raise_for_status()
        except requests.RequestException as exc:
            LOGGER.warning("CSV fetch failed, skipping %s: %s", source, exc)
            return None
        return response.text

    if not os.path.exists(source):
        LOGGER.warning("CSV not found, skipping: %s", source)
        return None
    with open(source, newline="", encoding="utf-8") as fh:
        return fh.read()


def _row_to_paper(row: dict[str, Any], index: int) -> Paper | None:
    """Normalize a raw CSV row; missing text fields default to empty strings."""
    paper_id = _str(row.get("id")) or _str(row.get("paper_id"))
    title = _str(row.get("title"))
    if not paper_id and not title:
        return None

    return Paper(
        title=title or f"Paper {index}",
        abstract=_str(row.get("abstract")) or "",
        paper_id=paper_id or f"paper-{index}",
        authors=_str(row.get("authors")) or "",
        venue=_str(row.get("venue")) or _str(row.get("conference")) or "",
        year=_int(row.get("year")),
        url=_str(row.get("url")) or _str(row.get("link")) or "",
        cluster=_str(row.get("cluster")) or _str(row.get("cluster_id")),
    )


def group_by_cluster(papers: Iterable[Paper]) -> dict[str, list[Paper]]:
    """Group papers by cluster id in first-seen order; unassigned papers are skipped."""
    groups: dict[str, list[Paper]] = {}
    for paper in papers:
        if paper.cluster is None:
            continue
        groups.setdefault(paper.cluster, []).append(paper)
    return groups


def _str(value: Any) -> str | None:
    if isinstance(value, str):
        s = value.strip()
        return s if s else None
    return None


def _int(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except (ValueError, TypeError):
        return None
