from __future__ import annotations

import csv
import io
import logging
from typing import Iterable, Sequence

from .errors import SerializationError

DELIMITER = "\t"
QUOTE_CHAR = '"'
RECORD_SEPARATOR = "\r\n"
ENCODING = "utf-8"

logger = logging.getLogger(__name__)


class TabDialect(csv.Dialect):
    delimiter = DELIMITER
    quotechar = QUOTE_CHAR
    doublequote = True
    skipinitialspace = False
    lineterminator = RECORD_SEPARATOR
    quoting = csv.QUOTE_MINIMAL
    strict = True


def serialize_records(rows: Iterable[Sequence[str]]) -> bytes:
    """Write rows as tab-delimited text and return the finished UTF-8 bytes.

    Fields holding a tab, a line break or a quote are quoted with inner
    quotes doubled. Row order is kept as given.
    """
    buffer = io.StringIO(newline="")
    writer = csv.writer(buffer, dialect=TabDialect)
    try:
        for row in rows:
            writer.writerow(row)
        return buffer.getvalue().encode(ENCODING)
    except (csv.Error, UnicodeEncodeError) as exc:
        logger.error("Tab-delimited serialization failed.", exc_info=True)
        raise SerializationError(f"Error converting to csv: {exc}") from exc
    finally:
        buffer.close()


def parse_records(data: bytes) -> list[list[str]]:
    try:
        text = data.decode(ENCODING)
        return list(csv.reader(io.StringIO(text, newline=""), dialect=TabDialect))
    except (csv.Error, UnicodeDecodeError) as exc:
        raise SerializationError(f"Error reading csv: {exc}") from exc
