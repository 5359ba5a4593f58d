"""
Codec - encode core values to JSON/YAML and back.

encode() turns any core value into a plain, self-describing dict;
decode() reverses it. decode(encode(v)) == v for every core type.
File helpers pick the format from the path suffix.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_music_theory.constants import SCHEMA_VERSION, ErrorMessages
from chuk_music_theory.errors import DecodeError
from chuk_music_theory.serialization.models import DOCUMENT_ADAPTER, document_for

logger = logging.getLogger(__name__)

_JSON_SUFFIXES = {".json"}
_YAML_SUFFIXES = {".yaml", ".yml"}


def encode(value: Any) -> dict[str, Any]:
    """
    Encode a core value as a dict.

    Args:
        value: Any core value (Pitch, Duration, Chord, Timeline, ...)

    Returns:
        Dict with a `type` tag and the value's fields

    Raises:
        TypeError: If the value is not a core type
    """
    data: dict[str, Any] = document_for(value).model_dump(mode="json")
    logger.debug(f"Encoded {type(value).__name__} as '{data['type']}' document")
    return data


def decode(data: dict[str, Any]) -> Any:
    """
    Decode a dict produced by encode().

    Structural problems raise DecodeError. Musical invariant violations
    (a root outside its chord, a zero ratio) raise the core error.
    """
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a mapping, got {type(data).__name__}")

    try:
        document = DOCUMENT_ADAPTER.validate_python(data)
        value = document.to_value()
    except ValidationError as e:
        logger.warning(f"Invalid '{data.get('type')}' document: {e.error_count()} error(s)")
        if any(err["type"] == "union_tag_invalid" for err in e.errors()):
            message = ErrorMessages.UNKNOWN_DOCUMENT_TYPE.format(type=data.get("type"))
            raise DecodeError(message) from e
        raise DecodeError(str(e)) from e

    logger.debug(f"Decoded '{document.type}' document")
    return value


def to_json(value: Any, indent: int = 2) -> str:
    """Serialize a core value to a JSON string."""
    return json.dumps({"schema": SCHEMA_VERSION, "value": encode(value)}, indent=indent)


def from_json(json_str: str) -> Any:
    """Deserialize a core value from a JSON string."""
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON: {e}") from e
    return _unwrap(data)


def to_yaml(value: Any) -> str:
    """Serialize a core value to a YAML string."""
    return yaml.safe_dump(
        {"schema": SCHEMA_VERSION, "value": encode(value)},
        default_flow_style=False,
        sort_keys=False,
    )


def from_yaml(yaml_str: str) -> Any:
    """Deserialize a core value from a YAML string."""
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise DecodeError(f"Invalid YAML: {e}") from e
    return _unwrap(data)


def save(value: Any, path: Path) -> Path:
    """
    Write a core value to a .json, .yaml or .yml file.

    Args:
        value: The value to save
        path: Destination; the suffix selects the format

    Returns:
        The path written
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in _JSON_SUFFIXES:
        text = to_json(value)
    elif suffix in _YAML_SUFFIXES:
        text = to_yaml(value)
    else:
        raise ValueError(ErrorMessages.UNSUPPORTED_FORMAT.format(suffix=suffix))

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        f.write(text)

    logger.info(f"Saved {type(value).__name__} to {path}")
    return path


def load(path: Path) -> Any:
    """Read a core value from a .json, .yaml or .yml file."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in _JSON_SUFFIXES | _YAML_SUFFIXES:
        raise ValueError(ErrorMessages.UNSUPPORTED_FORMAT.format(suffix=suffix))

    with open(path) as f:
        text = f.read()

    if suffix in _JSON_SUFFIXES:
        return from_json(text)
    return from_yaml(text)


def _unwrap(data: Any) -> Any:
    """Check the schema envelope and decode its value."""
    if not isinstance(data, dict) or "value" not in data:
        raise DecodeError("Missing 'value' in document envelope")
    schema = data.get("schema", SCHEMA_VERSION)
    if schema != SCHEMA_VERSION:
        raise DecodeError(f"Unsupported schema version: '{schema}'. Expected '{SCHEMA_VERSION}'.")
    return decode(data["value"])
