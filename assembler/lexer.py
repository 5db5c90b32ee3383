from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class SourceLine:
    text: str
    line: int


COMMENT = "//"


def normalize(raw: str) -> str | None:
    """Cleaned instruction token, or None when the line carries nothing."""
    line = raw.strip()
    if not line:
        return None
    if line.startswith(COMMENT):
        return None
    # comment glued to the instruction: "@1//note"
    line = line.split(COMMENT, 1)[0]
    # keep only the leading token
    return line.split(None, 1)[0]


def scan(src: str) -> Iterator[SourceLine]:
    # только \n разделяет строки; \f, \v и прочие остаются внутри строки
    for idx, raw in enumerate(src.split("\n")):
        if raw.endswith("\r"):
            raw = raw[:-1]
        text = normalize(raw)
        if text is None:
            continue
        yield SourceLine(text, idx)
