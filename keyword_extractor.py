"""Cluster keyword extraction: TF-IDF unigrams, bigrams and distinctiveness.

Public API
----------
extract_meaningful_keywords(papers_in_cluster, all_papers, custom_stopwords, max_keywords) -> list[str]
extract_noun_phrases(text, stopwords)                  -> list[str]
find_distinctive_keywords(clusters_with_keywords)      -> list[ClusterKeywords]

All functions are pure: no I/O and no state shared between calls apart from
the constant stopword table.
"""

from __future__ import annotations

import logging
import math
import re
from collections import Counter
from typing import Any, Iterable, Mapping, Sequence

from bigrams import rank_bigrams
from models import ClusterKeywords
from stopwords import AI_STOPWORDS, merge_stopwords
from tfidf import score_terms, top_terms

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_KEYWORDS = 5


# ─────────────────────────────────────────────────────────────────────────────
# Keyword combiner
# ─────────────────────────────────────────────────────────────────────────────

def extract_meaningful_keywords(
    papers_in_cluster: Sequence[Any],
    all_papers: Sequence[Any],
    custom_stopwords: Iterable[str] = (),
    max_keywords: int = DEFAULT_MAX_KEYWORDS,
) -> list[str]:
    """Summarize a cluster of papers as a short ranked keyword list.

    The top ``ceil(max_keywords / 2)`` bigrams by count seed the list, then the
    top ``max_keywords`` TF-IDF unigrams are appended unless they already occur
    as a substring of an entry in the list. The result is cut to
    ``max_keywords``.

    Args:
        papers_in_cluster: Papers assigned to the cluster (title + abstract used).
        all_papers: The whole corpus, used for document frequencies.
        custom_stopwords: Extra words to exclude on top of ``AI_STOPWORDS``.
        max_keywords: Maximum number of keywords to return; 0 yields [].

    Returns:
        Keywords ordered by relevance; empty for an empty cluster or corpus.
    """
    if max_keywords < 0:
        raise ValueError(f"max_keywords must be >= 0, got {max_keywords}")

    if max_keywords == 0 or not papers_in_cluster or not all_papers:
        return []

    stopwords = merge_stopwords(custom_stopwords)

    unigrams = top_terms(score_terms(papers_in_cluster, all_papers, stopwords), max_keywords)
    top_bigrams = [
        bigram
        for bigram, _ in rank_bigrams(papers_in_cluster, stopwords)[: math.ceil(max_keywords / 2)]
    ]

    combined = list(top_bigrams)
    for word in unigrams:
        if not any(word in entry for entry in combined):
            combined.append(word)

    keywords = combined[:max_keywords]
    LOGGER.debug(
        "extract_meaningful_keywords: papers=%s bigrams=%s unigrams=%s keywords=%s",
        len(papers_in_cluster),
        len(top_bigrams),
        len(unigrams),
        keywords,
    )
    return keywords


# ─────────────────────────────────────────────────────────────────────────────
# Noun-phrase heuristics
# ─────────────────────────────────────────────────────────────────────────────

_NOUN_PHRASE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\w+)\s+(analysis|model|learning|system|algorithm|framework|method|approach)", re.IGNORECASE),
    re.compile(r"(deep|machine|reinforcement|supervised|unsupervised)\s+(\w+)", re.IGNORECASE),
    re.compile(r"(neural|bayesian|generative)\s+(\w+)", re.IGNORECASE),
    re.compile(r"(\w+)\s+(recognition|detection|classification|prediction|estimation|segmentation)", re.IGNORECASE),
)


def extract_noun_phrases(
    text: str,
    stopwords: Iterable[str] = AI_STOPWORDS,
) -> list[str]:
    """Pull two-word technical phrases out of ``text`` with fixed patterns.

    Phrases containing any stopword are skipped. Result is lower-cased and
    de-duplicated in match order (pattern by pattern).
    """
    stop = stopwords if isinstance(stopwords, (set, frozenset)) else frozenset(stopwords)

    phrases: list[str] = []
    for pattern in _NOUN_PHRASE_PATTERNS:
        for match in pattern.finditer(text):
            phrase = match.group(0).lower()
            if any(word in stop for word in phrase.split()):
                continue
            phrases.append(phrase)

    return list(dict.fromkeys(phrases))


# ─────────────────────────────────────────────────────────────────────────────
# Cross-cluster distinctiveness
# ─────────────────────────────────────────────────────────────────────────────

def find_distinctive_keywords(
    clusters_with_keywords: Sequence[ClusterKeywords | Mapping[str, Any]],
) -> list[ClusterKeywords]:
    """Reorder each cluster's keywords so the rarest across clusters come first.

    Entries are ClusterKeywords or mappings with "cluster_id" and "keywords"
    keys; the result is always ClusterKeywords. A keyword's rank is the number
    of clusters whose list contains it; ties keep their original order. The
    keyword sets themselves are unchanged.
    """
    clusters = [_as_cluster_keywords(c) for c in clusters_with_keywords]

    cluster_counts: Counter[str] = Counter()
    for cluster in clusters:
        cluster_counts.update(set(cluster.keywords))

    reordered = [
        ClusterKeywords(
            cluster_id=cluster.cluster_id,
            keywords=sorted(cluster.keywords, key=lambda keyword: cluster_counts[keyword]),
        )
        for cluster in clusters
    ]

    LOGGER.debug(
        "find_distinctive_keywords: clusters=%s shared=%s",
        len(reordered),
        sum(1 for count in cluster_counts.values() if count > 1),
    )
    return reordered


def _as_cluster_keywords(cluster: ClusterKeywords | Mapping[str, Any]) -> ClusterKeywords:
    if isinstance(cluster, Mapping):
        return ClusterKeywords(cluster_id=cluster["cluster_id"], keywords=list(cluster["keywords"]))
    return cluster
