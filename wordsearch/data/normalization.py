"""Helpers for turning raw vocabulary entries into grid-ready words."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return an uppercase ASCII representation of ``text``.

    Accented letters are folded to their base letter; anything that is not
    a letter (spaces, hyphens, digits) is dropped.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return WORD_RE.sub("", stripped.upper())


__all__ = ["clean_word"]
