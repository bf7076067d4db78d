"""Reading and splitting of the game's description files."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path


def split_words(text: str, seps: str) -> list[str]:
    """Split *text* on runs of any character found in *seps*.

    Separators at the start of the text are ignored. A run of separators at
    the end yields a final empty word, and an empty text gives one empty word.
    """
    if not seps:
        return [text]
    pattern = "[" + re.escape(seps) + "]+"
    return re.split(pattern, text.lstrip(seps))


def get_name(key: str, fields: Sequence[str]) -> str | None:
    """Return the field that follows *key* in *fields*, or None."""
    try:
        index = list(fields).index(key)
    except ValueError:
        return None
    if index + 1 < len(fields):
        return fields[index + 1]
    return None


def read_file(path: str | Path) -> str:
    """Return the whole content of the file at *path*.

    Raises OSError when the file cannot be read and ValueError when it is empty.
    """
    text = Path(path).read_text(encoding="utf-8")
    if not text:
        raise ValueError(f"{path}: file is empty")
    return text