"""OpenAI-backed short labels for keyword-summarized paper clusters."""

from __future__ import annotations

import json
import logging
import os
from json import JSONDecodeError
from typing import Any, Sequence

from openai import OpenAI

from models import ClusterSummary, Paper

OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-5.2")
OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.1"))
MAX_ATTEMPTS = 2
MAX_TITLES_IN_PROMPT = 15
MAX_LABEL_WORDS = 6

LOGGER = logging.getLogger(__name__)

_LABEL_SYSTEM_PROMPT = """You are a research librarian naming groups of related academic papers.
You will be given the distinguishing keywords of one cluster and a sample of its paper titles.
Respond ONLY with valid JSON following the schema below. No prose, no markdown.

Required JSON schema:
{
  "label": "<topic name, at most 6 words>"
}"""


def build_cluster_label_prompt(
    summary: ClusterSummary,
    papers: Sequence[Paper],
) -> list[dict]:
    """Build an OpenAI-style messages list asking for one cluster label.

    Args:
        summary: Cluster with its extracted keywords.
        papers: Papers in the cluster; only the first MAX_TITLES_IN_PROMPT
            titles are included.

    Returns:
        messages list suitable for passing directly to an OpenAI chat call.
    """
    lines = [
        f"Cluster: {summary.cluster_id}",
        f"Keywords: {', '.join(summary.keywords) or 'none'}",
    ]
    if summary.noun_phrases:
        lines.append(f"Phrases: {', '.join(summary.noun_phrases[:10])}")
    lines.append("")
    lines.append(f"Titles ({len(papers)} papers):")
    for paper in papers[:MAX_TITLES_IN_PROMPT]:
        lines.append(f"- {paper.title}")

    return [
        {"role": "system", "content": _LABEL_SYSTEM_PROMPT},
        {"role": "user", "content": "\n".join(lines)},
    ]


def label_cluster(summary: ClusterSummary, papers: Sequence[Paper]) -> str:
    """Ask OpenAI for a short topic label for one cluster.

    Raises RuntimeError if the API key is missing or every attempt fails.
    """
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise RuntimeError("OPENAI_API_KEY environment variable is required")

    LOGGER.info("Labeling cluster=%s with OpenAI", summary.cluster_id)
    client = OpenAI(api_key=api_key)
    messages = build_cluster_label_prompt(summary, papers)
    last_error: Exception | None = None

    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            response = client.chat.completions.create(
                model=OPENAI_MODEL,
                temperature=OPENAI_TEMPERATURE,
                max_completion_tokens=64,
                response_format={"type": "json_object"},
                messages=messages,
            )
            content = response.choices[0].message.content
            if not content:
                raise RuntimeError("OpenAI returned an empty label response")
            label = parse_label_response(content)
            LOGGER.info("Label for cluster=%s: %s", summary.cluster_id, label)
            return label
        except Exception as exc:
            last_error = exc
            LOGGER.warning(
                "Labeling failed for cluster=%s on attempt %s/%s: %s",
                summary.cluster_id,
                attempt,
                MAX_ATTEMPTS,
                exc,
            )

    raise RuntimeError(f"Labeling failed for cluster={summary.cluster_id}: {last_error}")


def parse_label_response(content: str) -> str:
    """Extract a non-empty label from possibly noisy model output."""
    parsed = _parse_json_object(content)
    label = parsed.get("label")
    if not isinstance(label, str) or not label.strip():
        raise RuntimeError("Label response missing 'label' string")
    words = label.split()
    return " ".join(words[:MAX_LABEL_WORDS])


def _parse_json_object(content: str) -> dict[str, Any]:
    try:
        parsed = json.loads(content)
    except JSONDecodeError:
        parsed = _extract_first_json_object(content)

    if not isinstance(parsed, dict):
        raise RuntimeError("Expected JSON object from OpenAI response")
    return parsed


def _extract_first_json_object(content: str) -> dict[str, Any]:
    """Extract the first decodable JSON object from an arbitrary string."""
    decoder = json.JSONDecoder()
    for index, char in enumerate(content):
        if char != "{":
            continue
        try:
            candidate, _ = decoder.raw_decode(content[index:])
        except JSONDecodeError:
            continue
        if isinstance(candidate, dict):
            return candidate
    raise RuntimeError("Could not extract valid JSON object from OpenAI output")
