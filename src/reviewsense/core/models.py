"""Data models for ReviewSense."""

import json
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple


def format_confidence(score: float) -> str:
    """Render a [0, 1] score as a percentage with one decimal place."""
    return f"{score * 100:.1f}%"


class SentimentCategory(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class ReviewDataset:
    """Ordered, non-empty collection of review texts."""
    reviews: Tuple[str, ...]
    source: str = ""

    def __post_init__(self):
        if not self.reviews:
            raise ValueError("ReviewDataset requires at least one review")

    @classmethod
    def from_texts(cls, texts: Sequence[str], source: str = "") -> "ReviewDataset":
        return cls(reviews=tuple(texts), source=source)

    def __len__(self) -> int:
        return len(self.reviews)

    def __iter__(self):
        return iter(self.reviews)

    def __getitem__(self, index: int) -> str:
        return self.reviews[index]

    def sample(self, rng: Optional[random.Random] = None) -> str:
        """Draw one review uniformly at random."""
        rng = rng or random
        return self.reviews[rng.randrange(len(self.reviews))]


@dataclass(frozen=True)
class ClassificationResult:
    """Top-ranked label/score pair returned by the model."""
    label: str
    score: float


@dataclass(frozen=True)
class Interpretation:
    """Display-ready view of a classification result."""
    category: SentimentCategory
    label: str
    score: float
    icon: str

    @property
    def confidence_percent(self) -> str:
        return format_confidence(self.score)


@dataclass
class TelemetryEvent:
    """One completed analysis, as sent to the logging endpoint."""
    ts_iso: str
    event: str
    variant: str
    user_id: str
    meta: Dict[str, Any]
    review: str
    sentiment_label: str
    sentiment_confidence: float

    def to_payload(self) -> Dict[str, Any]:
        """Wire body; ``meta`` travels as a JSON-encoded string."""
        return {
            "ts_iso": self.ts_iso,
            "event": self.event,
            "variant": self.variant,
            "userId": self.user_id,
            "meta": json.dumps(self.meta),
            "review": self.review,
            "sentiment_label": self.sentiment_label,
            "sentiment_confidence": self.sentiment_confidence,
        }


@dataclass
class AnalysisRecord:
    """A completed analysis run kept in the session history."""
    review: str
    interpretation: Interpretation
    timestamp: float = 0.0
    meta: Dict[str, Any] = field(default_factory=dict)
