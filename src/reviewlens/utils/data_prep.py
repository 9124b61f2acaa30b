"""Data preparation for analysis input and export."""

import datetime
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.constants import FileConstants, InputConstants
from ..core.exceptions import ReviewLensError
from ..core.report import AnalysisReport


def split_reviews(text: str, delimiter: str = InputConstants.REVIEW_DELIMITER) -> List[str]:
    """Split pasted text on the review delimiter, trimming and dropping blanks."""
    return [part.strip() for part in (text or "").split(delimiter) if part.strip()]


def _texts_from_json(data: Any) -> List[str]:
    if isinstance(data, dict):
        data = data.get("reviews", [])
    if not isinstance(data, list):
        raise ReviewLensError("Expected a list of reviews or an object with a 'reviews' list")

    texts = []
    for item in data:
        if isinstance(item, str):
            texts.append(item)
        elif isinstance(item, dict):
            texts.append(item.get("text") or "")
    return texts


def load_reviews(path: str) -> List[str]:
    """Read review texts from a JSON or plain-text file."""
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ReviewLensError(f"Cannot read {path}: {e}") from e

    if file_path.suffix.lower() == ".json":
        try:
            return _texts_from_json(json.loads(raw))
        except json.JSONDecodeError as e:
            raise ReviewLensError(f"Invalid JSON in {path}: {e}") from e

    if InputConstants.REVIEW_DELIMITER in raw:
        return split_reviews(raw)
    return [line.strip() for line in raw.splitlines() if line.strip()]


def prepare_export(report: AnalysisReport, source: Optional[str] = None) -> Dict[str, Any]:
    """Prepare an analysis report for JSON export."""
    export_data = report.to_dict()
    export_data["metadata"] = {
        "source": source,
        "export_timestamp": None,  # Will be set by caller
        "version": FileConstants.EXPORT_VERSION,
    }
    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    metadata = data.setdefault("metadata", {})
    metadata["export_timestamp"] = datetime.datetime.now().isoformat()
    
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
