"""Input normalization and comma segmentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


class ParseError(ValueError):
    """Raised when input cannot be parsed at all."""


class EmptyInputError(ParseError):
    """Raised for empty or whitespace-only input."""


@dataclass(frozen=True)
class Segment:
    """One independently parsed clause of the input."""

    raw: str
    text: str
    index: int = 0


def normalize(text: str) -> str:
    """Lowercase, collapse whitespace and drop edge punctuation."""
    return " ".join(text.lower().split()).strip(" ,.;!?")


def split_segments(text: Optional[str], split: bool = True) -> List[Segment]:
    """Split input into segments on commas when that yields several clauses.

    A single clause keeps the input verbatim as its raw text.
    """
    if text is None or not text.strip():
        raise EmptyInputError("input text is empty")

    if split and "," in text:
        pieces = [piece.strip() for piece in text.split(",")]
        pieces = [piece for piece in pieces if piece]
        if len(pieces) > 1:
            return [Segment(raw=piece, text=normalize(piece), index=index) for index, piece in enumerate(pieces)]

    return [Segment(raw=text, text=normalize(text), index=0)]
