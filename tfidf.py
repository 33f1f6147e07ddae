"""TF-IDF term scoring of a cluster against the full paper corpus."""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Any, Sequence

from tokenizer import TERM_MIN_LENGTH, iter_paper_texts, iter_terms

LOGGER = logging.getLogger(__name__)


def score_terms(
    cluster_papers: Sequence[Any],
    corpus_papers: Sequence[Any],
    stopwords: frozenset[str],
) -> dict[str, float]:
    """Score every filtered unigram of a cluster by TF x IDF.

    - TF is the word's share of the cluster's whole token pool.
    - DF counts corpus papers whose lower-cased title+abstract contains the
      word as a plain substring, so "graph" also hits "graphs".
    - IDF = ln(N / (1 + DF)). Words present in most papers go negative and
      sink to the bottom; they are not dropped.

    Returns a mapping in first-encountered word order. An empty cluster token
    pool or an empty corpus yields ``{}``.
    """
    counts: Counter[str] = Counter()
    for text in iter_paper_texts(cluster_papers):
        counts.update(iter_terms(text, stopwords, min_length=TERM_MIN_LENGTH))

    total_tokens = sum(counts.values())
    total_documents = len(corpus_papers)
    if total_tokens == 0 or total_documents == 0:
        LOGGER.debug(
            "score_terms: nothing to score tokens=%s documents=%s",
            total_tokens,
            total_documents,
        )
        return {}

    corpus_texts = list(iter_paper_texts(corpus_papers))

    scores: dict[str, float] = {}
    for word, count in counts.items():
        doc_freq = sum(1 for text in corpus_texts if word in text)
        tf = count / total_tokens
        idf = math.log(total_documents / (1 + (doc_freq or 1)))
        scores[word] = tf * idf

    LOGGER.debug(
        "score_terms: vocabulary=%s tokens=%s documents=%s",
        len(scores),
        total_tokens,
        total_documents,
    )
    return scores


def top_terms(scores: dict[str, float], limit: int) -> list[str]:
    """Return up to ``limit`` words by descending score, ties in encounter order."""
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:limit]]
