"""Shared fixtures for ReviewSense tests."""

import pytest

from reviewsense.services.classifier import SentimentClassifier
from reviewsense.workflow.view import ViewState


class FakePipeline:
    """Stand-in for a transformers pipeline keyed by input text."""

    def __init__(self, outputs=None, default=None, error=None):
        self.outputs = outputs or {}
        self.default = default or {"label": "POSITIVE", "score": 0.9}
        self.error = error
        self.calls = []

    def __call__(self, text):
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return [self.outputs.get(text, self.default)]


def make_factory(pipeline=None, error=None):
    calls = []

    def factory(task, **kwargs):
        calls.append((task, kwargs))
        if error is not None:
            raise error
        return pipeline or FakePipeline()

    factory.calls = calls
    return factory


@pytest.fixture
def fake_pipeline():
    return FakePipeline(
        outputs={
            "Great product!": {"label": "POSITIVE", "score": 0.98},
            "Terrible, broke in a day": {"label": "NEGATIVE", "score": 0.91},
        }
    )


@pytest.fixture
def classifier(fake_pipeline):
    return SentimentClassifier("test-model", pipeline_factory=make_factory(fake_pipeline))


@pytest.fixture
def view():
    return ViewState()


@pytest.fixture
def tsv_file(tmp_path):
    path = tmp_path / "reviews.tsv"
    path.write_text(
        "id\ttext\n"
        "1\tGreat product!\n"
        "\n"
        "2\t   \n"
        "3\tTerrible, broke in a day\n",
        encoding="utf-8",
    )
    return path
