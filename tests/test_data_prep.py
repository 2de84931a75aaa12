"""Tests for export helpers."""

import json

from reviewsense.core.interpretation import interpret_label
from reviewsense.core.models import AnalysisRecord
from reviewsense.utils.data_prep import export_to_json, prepare_export


def test_prepare_export_counts_categories():
    """Summary counts each category of the session history."""
    history = [
        AnalysisRecord("good", interpret_label("POSITIVE", 0.98), timestamp=1.0),
        AnalysisRecord("bad", interpret_label("NEGATIVE", 0.91), timestamp=2.0),
        AnalysisRecord("meh", interpret_label("POSITIVE", 0.5), timestamp=3.0),
    ]

    data = prepare_export(history, dataset_size=10, model_id="m")

    assert data["summary"] == {
        "total": 3, "positive": 1, "negative": 1, "neutral": 1, "dataset_size": 10,
    }
    assert data["runs"][0]["confidence_display"] == "98.0%"
    assert data["runs"][2]["category"] == "neutral"
    assert data["metadata"]["export_timestamp"] is None


def test_export_to_json_stamps_timestamp(tmp_path):
    """Export writes UTF-8 JSON with a timestamp."""
    data = prepare_export([AnalysisRecord("café ☕", interpret_label("POSITIVE", 0.9))], 1, "m")
    target = tmp_path / "out.json"

    export_to_json(data, str(target))

    loaded = json.loads(target.read_text(encoding="utf-8"))
    assert loaded["metadata"]["export_timestamp"]
    assert loaded["runs"][0]["review"] == "café ☕"
