"""Small utility functions."""

import json
from enum import Enum
from typing import Any

def safe_json(obj: Any) -> str:
    """Safely serialize object to JSON, handling numpy types, enums and dataclasses."""
    def serialize_item(item):
        if isinstance(item, Enum):
            return item.value
        elif hasattr(item, 'item'):  # numpy scalar
            return item.item()
        elif hasattr(item, 'tolist'):  # numpy array
            return item.tolist()
        elif hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items()}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item

    try:
        return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)
    except Exception as e:
        return f"<serialization error: {e}>"
