import json
from typing import Any, Dict

from bson import ObjectId, json_util


def bson_default(obj: Any) -> Any:
    if isinstance(obj, ObjectId):
        return str(obj)
    try:
        return json_util.default(obj)
    except TypeError:
        return str(obj)


def to_plain(value: Any) -> Any:
    """Store value -> JSON-safe value. ObjectIds become hex strings, other BSON types extended JSON."""
    return json.loads(json.dumps(value, default=bson_default))


def document_to_json(doc: Dict[str, Any]) -> Dict[str, Any]:
    # Documents go out as stored: no field is checked or dropped
    return to_plain(doc)
