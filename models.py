"""Shared typed models for cluster keyword extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True, slots=True)
class Paper:
    """Normalized paper record.

    Only ``title`` and ``abstract`` feed keyword extraction; the remaining
    fields are carried through untouched for grouping and output.
    """

    title: str
    abstract: str
    paper_id: str = ""
    authors: str = ""
    venue: str = ""
    year: int | None = None
    url: str = ""
    cluster: str | None = None


class ClusterKeywords(NamedTuple):
    cluster_id: str | int
    keywords: list[str]


class ClusterSummary(NamedTuple):
    cluster_id: str | int
    paper_ids: list[str]
    keywords: list[str]
    noun_phrases: list[str]
    label: str | None  # filled in by LLM; None until then
