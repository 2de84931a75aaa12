"""Data preparation for export."""

import json
from collections import Counter
from typing import Any, Dict, List

from ..core.models import AnalysisRecord, SentimentCategory


def prepare_export(
    history: List[AnalysisRecord],
    dataset_size: int,
    model_id: str,
) -> Dict[str, Any]:
    """Prepare session analysis history for JSON export."""

    runs = []
    for record in history:
        interpretation = record.interpretation
        runs.append({
            "review": record.review,
            "category": interpretation.category.value,
            "label": interpretation.label,
            "confidence": interpretation.score,
            "confidence_display": interpretation.confidence_percent,
            "timestamp": record.timestamp,
        })

    counts = Counter(record.interpretation.category for record in history)

    export_data = {
        "model_id": model_id,
        "summary": {
            "total": len(history),
            "positive": counts.get(SentimentCategory.POSITIVE, 0),
            "negative": counts.get(SentimentCategory.NEGATIVE, 0),
            "neutral": counts.get(SentimentCategory.NEUTRAL, 0),
            "dataset_size": dataset_size,
        },
        "runs": runs,
        "metadata": {
            "export_timestamp": None,  # Will be set by caller
            "version": "0.1.0"
        }
    }

    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    import datetime

    # Add timestamp
    data["metadata"]["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
