"""
Optional serialization adapter for the core value types.

The core never imports this package. It provides:
- Pydantic document models mirroring each core type field for field
- encode/decode between values and plain dicts
- JSON and YAML strings and files
"""

from chuk_music_theory.serialization.codec import (
    decode,
    encode,
    from_json,
    from_yaml,
    load,
    save,
    to_json,
    to_yaml,
)
from chuk_music_theory.serialization.models import DOCUMENT_TYPES, BaseDocument

__all__ = [
    "encode",
    "decode",
    "to_json",
    "from_json",
    "to_yaml",
    "from_yaml",
    "save",
    "load",
    "BaseDocument",
    "DOCUMENT_TYPES",
]
