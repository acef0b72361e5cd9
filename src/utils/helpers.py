"""
Utility functions and helpers
"""

from datetime import datetime
from typing import Any, Dict
from bson import ObjectId, json_util

def _serialize_value(value: Any) -> Any:
    if value is None or isinstance(value, (str, bool, int, float, datetime)):
        return value
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: _serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize_value(item) for item in value]
    # Remaining BSON types (bytes, Decimal128, Regex, ...) as extended JSON
    try:
        return json_util.default(value)
    except TypeError:
        return str(value)

def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Render a stored document as JSON-safe data; ObjectIds become strings at any depth"""
    return _serialize_value(dict(document))
