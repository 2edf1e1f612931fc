"""Small utility functions."""

import enum
import json
from typing import Any, Dict, Optional

from .types import SentenceResult


def sentence_result_to_dict(result: SentenceResult, text: Optional[str] = None) -> Dict[str, Any]:
    """Flatten a SentenceResult into plain per-word records."""
    words = []
    for offset, length, suggestion in result:
        record = {
            "offset": offset,
            "length": length,
            "attributes": [flag.name for flag in type(suggestion.attributes)
                           if flag and flag in suggestion.attributes],
            "suggestions": list(suggestion.suggestions),
        }
        if text is not None:
            record["word"] = text[offset:offset + length]
        words.append(record)
    return {"cookie": result.cookie, "sequence": result.sequence, "words": words}


def safe_json(obj: Any) -> str:
    """Safely serialize object to JSON, handling numpy and enum types."""
    def serialize_item(item):
        if isinstance(item, SentenceResult):
            return sentence_result_to_dict(item)
        elif isinstance(item, enum.Enum):
            return item.name
        elif hasattr(item, 'item'):  # numpy scalar
            return item.item()
        elif hasattr(item, 'tolist'):  # numpy array
            return item.tolist()
        elif hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items()}
        elif isinstance(item, (list, tuple, frozenset, set)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item

    try:
        return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        return f"<serialization error: {e}>"
