from __future__ import annotations

import re
import unicodedata

_DISALLOWED_CHARS_RE = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def normalize(value: str) -> str:
    """Canonical comparison form: accent-free, lowercase, alphanumerics and single spaces."""
    if not isinstance(value, str):
        raise TypeError(f"normalize expects str, got {type(value).__name__}")
    text = strip_accents(value).lower()
    text = _DISALLOWED_CHARS_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()
