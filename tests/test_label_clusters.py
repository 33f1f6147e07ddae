"""Tests for the label_clusters CLI and summarize_clusters()."""

from __future__ import annotations

import csv
from pathlib import Path
from unittest.mock import patch

import pytest

import label_clusters
from label_clusters import main, parse_args, summarize_clusters
from models import Paper

_TRAFFIC = [
    ("t1", "Graph Neural Networks for Traffic Prediction",
     "We propose a graph neural network model for traffic flow prediction using spatial temporal graphs"),
    ("t2", "Traffic Flow Forecasting with Deep Learning",
     "This paper forecasts traffic flow using deep learning techniques on spatial temporal data"),
]
_PROTEINS = [
    ("p1", "Protein Folding with Contact Maps",
     "Protein folding guided by residue contact maps and structural priors"),
    ("p2", "Contact Map Refinement for Protein Folding",
     "Residue contact maps improve protein folding accuracy on structural targets"),
]


def _papers() -> list[Paper]:
    papers = [Paper(paper_id=i, title=t, abstract=a, cluster="0") for i, t, a in _TRAFFIC]
    papers += [Paper(paper_id=i, title=t, abstract=a, cluster="1") for i, t, a in _PROTEINS]
    papers += [
        Paper(paper_id=f"u{i}", title=f"User Interface Design {i}", abstract="Menus and dashboards.")
        for i in range(6)
    ]
    return papers


def _write_input(tmp_path: Path) -> str:
    path = tmp_path / "papers.csv"
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=["id", "title", "abstract", "cluster"])
        writer.writeheader()
        for p in _papers():
            writer.writerow({"id": p.paper_id, "title": p.title, "abstract": p.abstract, "cluster": p.cluster or ""})
    return str(path)


def test_summarize_clusters_one_summary_per_cluster() -> None:
    summaries = summarize_clusters(_papers())

    assert [s.cluster_id for s in summaries] == ["0", "1"]
    assert summaries[0].paper_ids == ["t1", "t2"]
    assert "traffic flow" in summaries[0].keywords
    assert any("protein" in k for k in summaries[1].keywords)
    assert all(s.label is None for s in summaries)
    assert all(s.noun_phrases == [] for s in summaries)


def test_summarize_clusters_respects_max_keywords() -> None:
    for summary in summarize_clusters(_papers(), max_keywords=2):
        assert len(summary.keywords) <= 2


def test_summarize_clusters_distinctive_flag_only_reorders() -> None:
    plain = summarize_clusters(_papers(), distinctive=False)
    ranked = summarize_clusters(_papers(), distinctive=True)
    for a, b in zip(plain, ranked):
        assert sorted(a.keywords) == sorted(b.keywords)


def test_summarize_clusters_noun_phrases() -> None:
    papers = [
        Paper(paper_id="x", title="Bayesian priors for pose estimation", abstract="", cluster="9"),
    ]
    [summary] = summarize_clusters(papers, noun_phrases=True)
    assert summary.noun_phrases == ["bayesian priors", "pose estimation"]


def test_summarize_clusters_without_clusters_is_empty() -> None:
    papers = [Paper(title="Loose paper", abstract="")]
    assert summarize_clusters(papers) == []


def test_parse_args_defaults() -> None:
    args = parse_args(["--input", "a.csv", "b.csv", "--stopword", "traffic", "--stopword", "flow"])
    assert args.input == ["a.csv", "b.csv"]
    assert args.stopword == ["traffic", "flow"]
    assert args.max_keywords == 5
    assert args.no_distinctive is False
    assert args.generate_labels is False


def test_main_writes_cluster_csv(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_input(tmp_path)
    output = tmp_path / "out.csv"

    main(["--input", source, "--output", str(output), "--max-keywords", "4"])

    with output.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert [r["cluster_id"] for r in rows] == ["0", "1"]
    assert rows[0]["num_papers"] == "2"
    assert "traffic flow" in rows[0]["keywords"]
    assert "CLUSTER" in capsys.readouterr().out


def test_main_dry_run_writes_nothing(tmp_path: Path) -> None:
    source = _write_input(tmp_path)
    output = tmp_path / "out.csv"

    with patch.object(label_clusters, "label_cluster") as mock_label:
        main(["--input", source, "--output", str(output), "--dry-run", "--generate-labels"])

    assert not output.exists()
    mock_label.assert_not_called()


def test_main_label_failures_are_non_fatal(tmp_path: Path) -> None:
    source = _write_input(tmp_path)
    output = tmp_path / "out.csv"

    def fake_label(summary, papers):
        if summary.cluster_id == "0":
            raise RuntimeError("api down")
        return "Protein Folding"

    with patch.object(label_clusters, "label_cluster", side_effect=fake_label):
        main(["--input", source, "--output", str(output), "--generate-labels"])

    with output.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert rows[0]["label"] == ""
    assert rows[1]["label"] == "Protein Folding"


def test_main_reports_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--input", str(tmp_path / "missing.csv"), "--output", str(tmp_path / "out.csv")])
    assert "No papers loaded" in capsys.readouterr().out
    assert not (tmp_path / "out.csv").exists()


def test_main_zero_max_keywords_writes_empty_keywords(tmp_path: Path) -> None:
    source = _write_input(tmp_path)
    output = tmp_path / "out.csv"

    main(["--input", source, "--output", str(output), "--max-keywords", "0"])

    with output.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert [r["cluster_id"] for r in rows] == ["0", "1"]
    assert all(r["keywords"] == "" for r in rows)


@pytest.mark.parametrize("value", ["-1", "five"])
def test_parse_args_rejects_bad_max_keywords(value: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--max-keywords", value])
    assert excinfo.value.code == 2
    assert "--max-keywords" in capsys.readouterr().err
