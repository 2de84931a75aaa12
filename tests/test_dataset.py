"""Tests for review dataset loading."""

import random
from collections import Counter
from unittest.mock import Mock, patch

import pytest
import requests
from reviewsense.core.exceptions import EmptyDatasetError, FetchError, ParseError
from reviewsense.core.models import ReviewDataset
from reviewsense.services.dataset import load_reviews, parse_reviews


class TestParseReviews:
    """Test TSV parsing and filtering."""

    def test_keeps_non_blank_rows_in_order(self):
        """Blank and whitespace-only entries are dropped, order preserved."""
        content = "id\ttext\n1\tfirst\n2\t\n3\t   \n\n4\tsecond\n5\tthird\n"
        assert parse_reviews(content) == ["first", "second", "third"]

    def test_text_is_not_trimmed(self):
        """Stored review text is the original value."""
        content = "id\ttext\n1\t  padded review \n"
        assert parse_reviews(content) == ["  padded review "]

    def test_custom_column(self):
        """Another column can be designated as the text column."""
        content = "body\tstars\nnice\t5\n"
        assert parse_reviews(content, text_column="body") == ["nice"]

    def test_missing_column_raises(self):
        """A header without the text column is a parse error."""
        with pytest.raises(ParseError):
            parse_reviews("id\tbody\n1\tnice\n")

    def test_empty_document_raises(self):
        """An empty document cannot be parsed."""
        with pytest.raises(ParseError):
            parse_reviews("")

    def test_stray_quotes_are_literal(self):
        """Quotes inside reviews do not start quoted fields."""
        content = 'id\ttext\n1\tThe "best" purchase\n'
        assert parse_reviews(content) == ['The "best" purchase']

    def test_quoted_field_may_contain_delimiter(self):
        """Quoted reviews keep embedded tabs and lose their quotes."""
        content = 'id\ttext\n1\t"Hello\tworld"\n2\t"Nice"\n'
        assert parse_reviews(content) == ["Hello\tworld", "Nice"]

    def test_extra_fields_are_dropped(self):
        """A line with extra fields keeps its leading fields."""
        content = "id\ttext\n1\tgood\n2\tbad\textra\n3\tfine\n"
        assert parse_reviews(content) == ["good", "bad", "fine"]

    def test_extra_fields_on_first_row_do_not_shift_columns(self):
        """Extra fields on the first data row never turn into an index."""
        content = "id\ttext\n1\tgood\textra\n2\tfine\n3\tgreat\n"
        assert parse_reviews(content) == ["good", "fine", "great"]


class TestLoadReviews:
    """Test dataset fetching and validation."""

    def test_local_file(self, tsv_file):
        """Loading a local TSV yields the valid rows."""
        dataset = load_reviews(str(tsv_file))
        assert isinstance(dataset, ReviewDataset)
        assert list(dataset) == ["Great product!", "Terrible, broke in a day"]
        assert dataset.source == str(tsv_file)

    def test_missing_file_raises_fetch_error(self, tmp_path):
        """A missing local file is reported as a fetch error."""
        with pytest.raises(FetchError):
            load_reviews(str(tmp_path / "nope.tsv"))

    def test_all_blank_raises_empty_dataset(self, tmp_path):
        """A text column with no usable values fails the load."""
        path = tmp_path / "blank.tsv"
        path.write_text("id\ttext\n1\t\n2\t  \n", encoding="utf-8")
        with pytest.raises(EmptyDatasetError):
            load_reviews(str(path))

    def test_header_only_raises_empty_dataset(self, tmp_path):
        """A header row alone is an empty dataset."""
        path = tmp_path / "header.tsv"
        path.write_text("id\ttext\n", encoding="utf-8")
        with pytest.raises(EmptyDatasetError):
            load_reviews(str(path))

    @patch("reviewsense.services.dataset.requests.get")
    def test_url_success(self, mock_get):
        """Remote datasets are fetched over HTTP."""
        response = Mock(ok=True, status_code=200, text="id\ttext\n1\tremote review\n")
        mock_get.return_value = response

        dataset = load_reviews("https://example.com/reviews.tsv")

        assert list(dataset) == ["remote review"]
        mock_get.assert_called_once()

    @patch("reviewsense.services.dataset.requests.get")
    def test_url_non_success_status(self, mock_get):
        """A non-success HTTP status raises FetchError with the status."""
        mock_get.return_value = Mock(ok=False, status_code=404)

        with pytest.raises(FetchError) as exc_info:
            load_reviews("https://example.com/missing.tsv")

        assert exc_info.value.status_code == 404
        assert "HTTP 404" in str(exc_info.value)

    @patch("reviewsense.services.dataset.requests.get")
    def test_url_transport_failure(self, mock_get):
        """Transport exceptions are wrapped in FetchError."""
        mock_get.side_effect = requests.ConnectionError("unreachable")

        with pytest.raises(FetchError):
            load_reviews("https://example.com/reviews.tsv")


class TestReviewDataset:
    """Test dataset sampling."""

    def test_empty_dataset_rejected(self):
        """A dataset cannot be constructed empty."""
        with pytest.raises(ValueError):
            ReviewDataset.from_texts([])

    def test_sample_is_member(self):
        """Every draw comes from the dataset."""
        dataset = ReviewDataset.from_texts(["a", "b", "c"])
        rng = random.Random(7)
        for _ in range(100):
            assert dataset.sample(rng) in {"a", "b", "c"}

    def test_all_records_reachable(self):
        """Over many draws every record is sampled."""
        texts = [f"review {i}" for i in range(10)]
        dataset = ReviewDataset.from_texts(texts)
        rng = random.Random(1234)
        counts = Counter(dataset.sample(rng) for _ in range(2000))
        assert set(counts) == set(texts)
