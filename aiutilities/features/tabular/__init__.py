from __future__ import annotations

from .errors import SerializationError
from .serializer import DELIMITER, RECORD_SEPARATOR, parse_records, serialize_records

__all__ = [
    "DELIMITER",
    "RECORD_SEPARATOR",
    "SerializationError",
    "parse_records",
    "serialize_records",
]
