"""Frequency ranking of adjacent word pairs within a cluster."""

from __future__ import annotations

from collections import Counter
from typing import Any, Sequence

from tokenizer import iter_bigrams, iter_paper_texts


def rank_bigrams(
    cluster_papers: Sequence[Any],
    stopwords: frozenset[str],
) -> list[tuple[str, int]]:
    """Count bigrams across all cluster papers and rank them by raw count.

    Bigrams with a stopword on either side are dropped again here before
    sorting. Ties keep first-encountered order.
    """
    counts: Counter[str] = Counter()
    for text in iter_paper_texts(cluster_papers):
        counts.update(iter_bigrams(text, stopwords))

    kept = [
        (bigram, count)
        for bigram, count in counts.items()
        if not any(word in stopwords for word in bigram.split(" "))
    ]
    kept.sort(key=lambda item: item[1], reverse=True)
    return kept
