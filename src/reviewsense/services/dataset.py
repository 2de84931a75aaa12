"""Review dataset loading for ReviewSense."""

import io
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd
import requests

from ..core.config import settings
from ..core.constants import FileConstants
from ..core.exceptions import EmptyDatasetError, FetchError, ParseError
from ..core.models import ReviewDataset

logger = logging.getLogger(__name__)


def _is_url(location: str) -> bool:
    return location.lower().startswith(("http://", "https://"))


def fetch_text(location: str, *, encoding: str = FileConstants.DEFAULT_ENCODING,
               timeout: Optional[float] = None) -> str:
    """Read the raw dataset text from a URL or a local path."""
    if _is_url(location):
        try:
            response = requests.get(location, timeout=timeout or settings.request_timeout)
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch TSV: {e}", context={"location": location}) from e
        if not response.ok:
            raise FetchError(
                f"Failed to fetch TSV: HTTP {response.status_code}",
                status_code=response.status_code,
                context={"location": location},
            )
        response.encoding = encoding
        return response.text

    path = Path(location)
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise ParseError(f"TSV parsing failed: {e}", context={"location": location}) from e
    except OSError as e:
        raise FetchError(f"Failed to fetch TSV: {e}", context={"location": location}) from e


def parse_reviews(content: str, *, text_column: str = FileConstants.DEFAULT_TEXT_COLUMN,
                  delimiter: str = FileConstants.DEFAULT_DELIMITER) -> List[str]:
    """Parse delimited text with a header row and return the usable review texts.

    Rows with more fields than the header keep their leading fields; the
    extras are dropped and reported as a parse warning.
    """
    lines = content.strip("\r\n").splitlines()
    n_columns = len(lines[0].split(delimiter)) if lines else 0
    warnings = []

    def _on_bad_line(fields):
        warnings.append(fields)
        return fields[:n_columns]

    try:
        frame = pd.read_csv(
            io.StringIO(content),
            sep=delimiter,
            header=0,
            index_col=False,  # never promote the first column to an index
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=_on_bad_line,
        )
    except pd.errors.EmptyDataError as e:
        raise ParseError(f"TSV parsing failed: {e}") from e
    except pd.errors.ParserError as e:
        raise ParseError(f"TSV parsing failed: {e}") from e

    if warnings:
        logger.warning(f"[TSV] Parse warnings: truncated {len(warnings)} line(s) with extra fields")

    if text_column not in frame.columns:
        raise ParseError(
            f"TSV parsing failed: missing column '{text_column}'",
            context={"columns": list(frame.columns)},
        )

    return [
        text for text in frame[text_column].tolist()
        if isinstance(text, str) and text.strip()
    ]


def load_reviews(location: Optional[str] = None, *, text_column: Optional[str] = None,
                 delimiter: Optional[str] = None, encoding: Optional[str] = None,
                 timeout: Optional[float] = None) -> ReviewDataset:
    """Fetch and parse the review dataset.

    Raises:
        FetchError: the resource is unreachable or answered with a non-success status.
        ParseError: the text is not valid delimited data or lacks the text column.
        EmptyDatasetError: no row carries a non-blank review.
    """
    location = location or settings.dataset_path
    content = fetch_text(
        location,
        encoding=encoding or settings.dataset_encoding,
        timeout=timeout,
    )
    reviews = parse_reviews(
        content,
        text_column=text_column or settings.text_column,
        delimiter=delimiter or settings.dataset_delimiter,
    )

    if not reviews:
        raise EmptyDatasetError("Dataset contains no valid reviews", context={"location": location})

    logger.info(f"[Dataset] Loaded {len(reviews)} entries")
    return ReviewDataset.from_texts(reviews, source=location)
