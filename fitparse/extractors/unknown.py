"""Fallback extraction for text that matched no activity."""

from __future__ import annotations

from typing import Optional

from fitparse.core.models import Extraction, UnknownFields
from fitparse.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary


def extract_unknown(
    text: str,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    reasoning: Optional[str] = None,
) -> Extraction:
    return Extraction(UnknownFields(raw=text), "unknown", reasoning or "no activity recognized")
