from __future__ import annotations

import logging
from dataclasses import dataclass

_REPLACEMENT_CHAR = "\ufffd"


@dataclass
class CleanupStats:
    nul_removed: int = 0
    surrogates_replaced: int = 0
    line_breaks_normalized: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.nul_removed or self.surrogates_replaced or self.line_breaks_normalized)

    def merge(self, other: CleanupStats) -> None:
        self.nul_removed += other.nul_removed
        self.surrogates_replaced += other.surrogates_replaced
        self.line_breaks_normalized += other.line_breaks_normalized


def clean_extracted_text(value: str) -> tuple[str, CleanupStats]:
    """Make text pulled out of a document safe to forward to a model.

    NUL bytes are dropped, lone surrogates (common in PDF text layers with
    broken font maps) become U+FFFD, and CR / CRLF line breaks become LF.
    Surrounding whitespace is left alone so page joins stay intact.
    """
    stats = CleanupStats()
    out: list[str] = []
    pending_cr = False

    for char in value:
        if pending_cr:
            pending_cr = False
            if char == "\n":
                continue
        if char == "\x00":
            stats.nul_removed += 1
            continue
        if "\ud800" <= char <= "\udfff":
            out.append(_REPLACEMENT_CHAR)
            stats.surrogates_replaced += 1
            continue
        if char == "\r":
            out.append("\n")
            stats.line_breaks_normalized += 1
            pending_cr = True
            continue
        out.append(char)

    return "".join(out), stats


def log_cleanup_stats(
    logger: logging.Logger,
    *,
    location: str,
    stats: CleanupStats,
) -> None:
    if not stats.changed:
        return
    logger.debug(
        "Cleaned extracted text for %s (nul_removed=%d, surrogates_replaced=%d, line_breaks_normalized=%d).",
        location,
        stats.nul_removed,
        stats.surrogates_replaced,
        stats.line_breaks_normalized,
    )


__all__ = [
    "CleanupStats",
    "clean_extracted_text",
    "log_cleanup_stats",
]
