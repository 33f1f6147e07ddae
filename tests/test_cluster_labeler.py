from unittest.mock import MagicMock, patch

import pytest

from cluster_labeler import (
    MAX_TITLES_IN_PROMPT,
    build_cluster_label_prompt,
    label_cluster,
    parse_label_response,
)
from models import ClusterSummary, Paper

_SUMMARY = ClusterSummary(
    cluster_id="3",
    paper_ids=["t1", "t2"],
    keywords=["traffic flow", "spatial temporal"],
    noun_phrases=["pose estimation"],
    label=None,
)
_PAPERS = [
    Paper(title="Graph Neural Networks for Traffic Prediction", abstract=""),
    Paper(title="Traffic Flow Forecasting with Deep Learning", abstract=""),
]


def _mock_client(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    client = MagicMock()
    client.chat.completions.create.return_value = response
    return client


def test_prompt_lists_keywords_phrases_and_titles() -> None:
    messages = build_cluster_label_prompt(_SUMMARY, _PAPERS)

    assert [m["role"] for m in messages] == ["system", "user"]
    user = messages[1]["content"]
    assert "Keywords: traffic flow, spatial temporal" in user
    assert "Phrases: pose estimation" in user
    assert "- Traffic Flow Forecasting with Deep Learning" in user


def test_prompt_caps_number_of_titles() -> None:
    papers = [Paper(title=f"Paper {i}", abstract="") for i in range(40)]
    user = build_cluster_label_prompt(_SUMMARY, papers)[1]["content"]
    assert user.count("\n- ") == MAX_TITLES_IN_PROMPT
    assert "Titles (40 papers):" in user


def test_parse_label_response_with_wrapping_text() -> None:
    assert parse_label_response('Sure!\n{"label": "Traffic Forecasting"}\nDone') == "Traffic Forecasting"


def test_parse_label_response_truncates_long_labels() -> None:
    label = parse_label_response('{"label": "one two three four five six seven eight"}')
    assert label == "one two three four five six"


@pytest.mark.parametrize("raw", ['{"label": ""}', '{"name": "x"}', "no json here"])
def test_parse_label_response_rejects_bad_payloads(raw: str) -> None:
    with pytest.raises(RuntimeError):
        parse_label_response(raw)


def test_label_cluster_returns_parsed_label() -> None:
    client = _mock_client('{"label": "Traffic Forecasting"}')

    with patch("cluster_labeler.OpenAI", return_value=client), \
         patch.dict("os.environ", {"OPENAI_API_KEY": "test-key"}):
        label = label_cluster(_SUMMARY, _PAPERS)

    assert label == "Traffic Forecasting"
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["response_format"] == {"type": "json_object"}


def test_label_cluster_retries_then_raises() -> None:
    client = _mock_client(None)

    with patch("cluster_labeler.OpenAI", return_value=client), \
         patch.dict("os.environ", {"OPENAI_API_KEY": "test-key"}):
        with pytest.raises(RuntimeError, match="Labeling failed"):
            label_cluster(_SUMMARY, _PAPERS)

    assert client.chat.completions.create.call_count == 2


def test_label_cluster_raises_without_api_key() -> None:
    with patch.dict("os.environ", {}, clear=True):
        with pytest.raises(RuntimeError, match="OPENAI_API_KEY"):
            label_cluster(_SUMMARY, _PAPERS)
