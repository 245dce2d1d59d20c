# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""JSON primitives shared by the call layer and the entities.

Decoding follows the tolerance of the server side: unknown keys are ignored, missing or null keys fall back to
defaults, but a key holding a value of the wrong JSON type is rejected with ValueError (reported to callers as
DecodeError by the call layer).
"""

import json
from enum import Enum
from typing import Any, Callable, Dict, List, Type

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class NiFiJSONEncoder(json.JSONEncoder):
    """Encoder that understands client entities and enums, so that payloads can be passed to the call layer as-is."""

    def default(self, obj: Any) -> Any:
        if hasattr(obj, "to_json_dict"):
            return obj.to_json_dict()
        elif isinstance(obj, Enum):
            return obj.value
        return super().default(obj)


def dumps(obj: Any) -> str:
    return json.dumps(obj, cls=NiFiJSONEncoder)


def as_object(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"Expected a JSON object for {what!r}, got {type(value).__name__}!")
    return value


def _matches(value: Any, expected_type: Type) -> bool:
    # JSON booleans are ints in Python, keep them apart
    if expected_type is bool:
        return isinstance(value, bool)
    if expected_type is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if expected_type is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, expected_type)


def get_field(data: Dict[str, Any], key: str, expected_type: Type, default: Any = None) -> Any:
    value = data.get(key, None)
    if value is None:
        return default
    if not _matches(value, expected_type):
        raise ValueError(f"Field {key!r} should be of type {expected_type.__name__}, got {type(value).__name__} ({value!r})!")
    return float(value) if expected_type is float else value


def get_object_field(data: Dict[str, Any], key: str, loader: Callable[[Any], Any], default_factory: Callable[[], Any]) -> Any:
    value = data.get(key, None)
    if value is None:
        return default_factory()
    return loader(value)


def get_list_field(data: Dict[str, Any], key: str, item_loader: Callable[[Any], Any]) -> List[Any]:
    value = get_field(data, key, list, [])
    return [item_loader(item) for item in value]


def load_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"Expected a string, got {type(value).__name__} ({value!r})!")
    return value
