"""Word and bigram tokenization over paper title + abstract text."""

from __future__ import annotations

import re
from typing import Any, Iterable, Iterator

_NON_WORD_RE = re.compile(r"\W+")

# Minimum token lengths (exclusive) for the two call sites.
TERM_MIN_LENGTH = 3    # TF-IDF unigrams: len > 3
BIGRAM_MIN_LENGTH = 2  # bigram source words: len > 2


def paper_text(paper: Any) -> str:
    """Return ``"<title> <abstract>"`` lower-cased.

    Raises TypeError when either field is not a string; callers are expected
    to default missing fields to "" before extraction.
    """
    title = paper.title
    abstract = paper.abstract
    if not isinstance(title, str) or not isinstance(abstract, str):
        raise TypeError(
            f"paper title and abstract must be str, got "
            f"{type(title).__name__} and {type(abstract).__name__}"
        )
    return f"{title} {abstract}".lower()


def split_words(text: str) -> list[str]:
    """Lower-case ``text`` and split it on runs of non-word characters."""
    return _NON_WORD_RE.split(text.lower())


def iter_terms(
    text: str,
    stopwords: frozenset[str],
    min_length: int = TERM_MIN_LENGTH,
) -> Iterator[str]:
    """Yield tokens longer than ``min_length`` that are not stopwords."""
    for word in split_words(text):
        if len(word) > min_length and word not in stopwords:
            yield word


def iter_bigrams(text: str, stopwords: frozenset[str]) -> Iterator[str]:
    """Yield space-joined pairs of adjacent filtered tokens.

    Both halves are re-checked against ``stopwords`` even though the source
    tokens already passed the filter.
    """
    words = list(iter_terms(text, stopwords, min_length=BIGRAM_MIN_LENGTH))
    for first, second in zip(words, words[1:]):
        if first in stopwords or second in stopwords:
            continue
        yield f"{first} {second}"


def iter_paper_texts(papers: Iterable[Any]) -> Iterator[str]:
    for paper in papers:
        yield paper_text(paper)
