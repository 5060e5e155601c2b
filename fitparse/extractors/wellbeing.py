"""Mood and energy extraction."""

from __future__ import annotations

import re
from typing import Optional

from fitparse.core.constants import DEFAULT_ENERGY_LEVEL, DEFAULT_MOOD, ENERGY_LEVELS, MOOD_LABELS
from fitparse.core.models import EnergyFields, Extraction, MoodFields
from fitparse.core.patterns import match_energy
from fitparse.core.vocabulary import DEFAULT_VOCABULARY, Vocabulary, find_word

_NEGATED_GOOD_RE = re.compile(r"\bnot\s+(?:so\s+|very\s+|feeling\s+|too\s+)?(?:good|great|well|fine|happy)\b")


def find_mood(text: str) -> Optional[str]:
    if _NEGATED_GOOD_RE.search(text):
        return "bad"
    for label, words in MOOD_LABELS:
        if find_word(text, words):
            return label
    return None


def extract_mood(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Optional[Extraction]:
    label = find_mood(text)
    if label:
        return Extraction(MoodFields(mood=label), "keyword_only", f"mood word: {label}")
    return Extraction(MoodFields(mood=DEFAULT_MOOD), "fallback_weak", "no mood word, defaulted to okay")


def extract_energy(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Optional[Extraction]:
    match = match_energy(text)
    if match:
        return Extraction(
            fields=EnergyFields(level=match.level),
            band="structured_full" if match.scaled else "structured",
            reasoning="energy level pattern",
        )

    for words, level in ENERGY_LEVELS:
        if find_word(text, words):
            return Extraction(EnergyFields(level=level), "keyword_only", "energy word")

    if vocabulary.matches("energy", text):
        return Extraction(
            EnergyFields(level=DEFAULT_ENERGY_LEVEL),
            "fallback_weak",
            "energy keyword without a level",
        )
    return None
