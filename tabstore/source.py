"""
Reading a table source into text.

Responsibilities:
- scoped read of the raw bytes
- encoding detection + decode with fallbacks
- newline normalization (CRLF/CR -> LF)
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Tuple

from charset_normalizer import from_bytes

from .errors import SourceUnavailable

UTF8_BOM = b"\xef\xbb\xbf"


def read_source(path: str | os.PathLike) -> bytes:
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as e:
        raise SourceUnavailable(os.fspath(path), e.strerror or str(e)) from e


def decode_source(raw: bytes) -> Tuple[str, Dict[str, Any]]:
    """
    Decode raw table bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is consumed, never surfaced in the first header cell.
    - If decode fails, retry as UTF-8, then decode with replacement characters.
    - Newlines are normalized to LF.
    """
    detected = None
    if raw:
        match = from_bytes(raw).best()
        if match is not None:
            detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(UTF8_BOM) and decode_used.lower().replace("-", "_") in ("utf_8", "utf8", "ascii"):
        decode_used = "utf-8-sig"

    decode_fallback = False
    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8-sig")
            decode_used = "utf-8-sig"
        except UnicodeDecodeError:
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"
        decode_fallback = True

    crlf = text.count("\r\n")
    cr = text.count("\r") - crlf
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
        "newlines_changed": (crlf > 0) or (cr > 0),
    }
    return text, report


def split_lines(text: str) -> List[str]:
    # A terminating newline yields a final empty line; callers skip it.
    return text.split("\n")
