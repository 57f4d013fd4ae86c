from __future__ import annotations

import codecs
import mimetypes
import re
from pathlib import Path

_GENERIC_TYPES = {None, "application/octet-stream", "text/plain"}
_HTML_MARKERS = (b"<!doctype html", b"<html")
_SNIFF_BYTES = 1024
_CHARSET_SCAN_BYTES = 4096
_META_CHARSET_RE = re.compile(rb"""<meta[^>]*?charset\s*=\s*["']?\s*([A-Za-z0-9_.:\-]+)""", re.IGNORECASE)
_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def sniff_media_type(path: Path) -> str:
    """Guess a media type from the file name, falling back to the leading bytes."""
    guessed = mimetypes.guess_type(path.name)[0]
    if guessed not in _GENERIC_TYPES:
        return guessed
    try:
        with path.open("rb") as f:
            head = f.read(_SNIFF_BYTES)
    except OSError:
        return guessed or "application/octet-stream"
    lowered = head.lstrip(b"\xef\xbb\xbf \t\r\n").lower()
    if any(lowered.startswith(marker) for marker in _HTML_MARKERS):
        return "text/html"
    return guessed or "application/octet-stream"


def is_html_media_type(media_type: str | None) -> bool:
    return bool(media_type) and "html" in media_type.lower()


def is_html_file(path: Path) -> bool:
    if not path.is_file():
        return False
    return is_html_media_type(sniff_media_type(path))


def detect_html_charset(data: bytes) -> str | None:
    """Charset declared by a byte-order mark or a ``<meta>`` tag, if any."""
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding
    match = _META_CHARSET_RE.search(data[:_CHARSET_SCAN_BYTES])
    if match is None:
        return None
    declared = match.group(1).decode("ascii", errors="ignore")
    try:
        return codecs.lookup(declared).name
    except LookupError:
        return None


def decode_html(data: bytes) -> tuple[str, bool]:
    """Decode an HTML payload; the flag reports whether bytes had to be replaced.

    The declared charset wins, UTF-8 is assumed otherwise.
    """
    encoding = detect_html_charset(data) or "utf-8"
    try:
        return data.decode(encoding), False
    except UnicodeDecodeError:
        return data.decode(encoding, errors="replace"), True
